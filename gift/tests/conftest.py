import logging

import pytest
from rest_framework.test import APIClient

from gift.services.member_service import MemberService
from gift.services.token_service import TokenIssuer
from gift.tests.factories import MemberFactory, ProductFactory, TestConstants

# ==========================================
# 0. 테스트 상수
# ==========================================

TOKEN_TTL_MILLIS = MemberService.TOKEN_TTL_MILLIS
DEFAULT_PASSWORD = TestConstants.DEFAULT_PASSWORD

# ==========================================
# 1. 전역 설정 (Session Scope)
# ==========================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging_for_tests():
    """
    테스트 환경에서 로그 propagation 활성화

    caplog가 로그를 캡처할 수 있도록 propagate=True로 설정
    """
    for logger_name in ["gift.services", "gift.views"]:
        logging.getLogger(logger_name).propagate = True


# ==========================================
# 2. API 클라이언트 Fixture
# ==========================================


@pytest.fixture
def api_client():
    """
    DRF APIClient 인스턴스

    Function scope: 매 테스트마다 새로운 클라이언트 생성
    """
    return APIClient()


# ==========================================
# 3. 회원(Member) Fixture
# ==========================================


@pytest.fixture
def member(db):
    """
    기본 회원

    - email: member@example.com
    - password: DEFAULT_PASSWORD
    """
    return MemberFactory(email="member@example.com", password=DEFAULT_PASSWORD)


@pytest.fixture
def other_member(db):
    """다른 회원 (위시리스트 격리 확인용)"""
    return MemberFactory(email="other@example.com", password=DEFAULT_PASSWORD)


@pytest.fixture
def member_token(member):
    """기본 회원의 Bearer 토큰"""
    return TokenIssuer.issue(member.email, TOKEN_TTL_MILLIS)


@pytest.fixture
def authenticated_client(api_client, member_token):
    """
    인증된 API 클라이언트

    Authorization: Bearer <token> 헤더가 설정되어 있음
    """
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {member_token}")
    return api_client


# ==========================================
# 4. 상품(Product) Fixture
# ==========================================


@pytest.fixture
def product(db):
    """기본 상품"""
    return ProductFactory(name="아메리카노", price=4500)


@pytest.fixture
def products(db):
    """상품 5개 (id 오름차순)"""
    return ProductFactory.create_batch(5)
