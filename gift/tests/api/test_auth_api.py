"""회원가입/로그인/토큰 확인 API 테스트"""

import pytest
from django.urls import reverse
from rest_framework import status

from gift.models.member import Member
from gift.tests.factories import MemberFactory


@pytest.mark.django_db
class TestRegisterAPI:
    """POST /api/members/register/"""

    url = reverse("member-register")

    def test_register_success(self, api_client):
        """정상 케이스: 201"""
        # Act
        response = api_client.post(self.url, {"email": "a@x.com", "password": "p1"}, format="json")

        # Assert
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["email"] == "a@x.com"
        assert "password" not in response.data
        assert Member.objects.filter(email="a@x.com").exists()

    def test_register_duplicate_email(self, api_client):
        """예외 케이스: 409"""
        # Arrange
        MemberFactory(email="a@x.com")

        # Act
        response = api_client.post(self.url, {"email": "a@x.com", "password": "p2"}, format="json")

        # Assert
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data["code"] == "MEMBER_ALREADY_EXISTS"
        assert "error" in response.data

    def test_register_invalid_email(self, api_client):
        """예외 케이스: 형식이 잘못된 email은 400"""
        response = api_client.post(self.url, {"email": "not-an-email", "password": "p1"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_missing_password(self, api_client):
        """예외 케이스: 비밀번호 누락은 400"""
        response = api_client.post(self.url, {"email": "a@x.com"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Member.objects.exists()


@pytest.mark.django_db
class TestLoginAPI:
    """POST /api/members/login/"""

    url = reverse("member-login")

    def test_login_success(self, api_client, member):
        """정상 케이스: 200 + token"""
        # Act
        response = api_client.post(
            self.url, {"email": member.email, "password": "testpass123"}, format="json"
        )

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.data["token"]

    def test_login_wrong_password(self, api_client, member):
        """예외 케이스: 401"""
        response = api_client.post(self.url, {"email": member.email, "password": "wrong"}, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["code"] == "INVALID_PASSWORD"

    def test_login_unknown_email(self, api_client):
        """예외 케이스: 404"""
        response = api_client.post(self.url, {"email": "nobody@x.com", "password": "p1"}, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["code"] == "MEMBER_NOT_FOUND"

    def test_token_from_login_authenticates(self, api_client, member):
        """정상 케이스: 로그인 토큰으로 인증 API 호출"""
        # Arrange
        token = api_client.post(
            self.url, {"email": member.email, "password": "testpass123"}, format="json"
        ).data["token"]
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        # Act
        response = api_client.get(reverse("token-verify"))

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.data["member"]["email"] == member.email


@pytest.mark.django_db
class TestTokenVerifyAPI:
    """GET /api/auth/token/verify/"""

    url = reverse("token-verify")

    def test_valid_token(self, authenticated_client, member):
        """정상 케이스: 200"""
        response = authenticated_client.get(self.url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["valid"] is True
        assert response.data["member"]["email"] == member.email

    def test_without_token(self, api_client):
        """예외 케이스: 토큰 없음은 401"""
        response = api_client.get(self.url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_invalid_token(self, api_client):
        """예외 케이스: 잘못된 토큰은 401"""
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.value")

        response = api_client.get(self.url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
