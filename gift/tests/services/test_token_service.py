"""TokenIssuer 단위 테스트"""

import pytest
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from gift.services.token_service import TokenIssuer


class TestTokenIssuer:
    """토큰 발급 테스트"""

    def test_subject_claim(self):
        """정상 케이스: subject가 sub 클레임에 기록"""
        # Act
        token = TokenIssuer.issue("a@x.com", 60_000)

        # Assert
        assert AccessToken(token)["sub"] == "a@x.com"

    def test_expiry_follows_ttl(self):
        """정상 케이스: 만료 시각 = 발급 시각 + ttl"""
        # Act
        access = AccessToken(TokenIssuer.issue("a@x.com", 1_800_000))

        # Assert
        assert access["exp"] - access["iat"] == 1800

    def test_tokens_are_distinct(self):
        """정상 케이스: 같은 subject라도 매번 다른 토큰 (jti)"""
        first = TokenIssuer.issue("a@x.com", 60_000)
        second = TokenIssuer.issue("a@x.com", 60_000)

        assert first != second

    def test_tampered_token_rejected(self):
        """예외 케이스: 서명이 바뀐 토큰은 검증 실패"""
        # Arrange
        token = TokenIssuer.issue("a@x.com", 60_000)
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])

        # Act & Assert
        with pytest.raises(TokenError):
            AccessToken(tampered)

    @pytest.mark.parametrize("ttl_millis", [0, -1])
    def test_non_positive_ttl(self, ttl_millis):
        """예외 케이스: ttl은 양수"""
        with pytest.raises(ValueError):
            TokenIssuer.issue("a@x.com", ttl_millis)
