"""토큰 발급 서비스

simplejwt의 AccessToken으로 subject(회원 email)와 유효시간을 담은
서명된 토큰 문자열을 만듭니다. 서명 알고리즘/키는 SIMPLE_JWT 설정을 따릅니다.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Bearer 토큰 발급기"""

    @staticmethod
    def issue(subject: str, ttl_millis: int) -> str:
        """
        토큰 발급

        Args:
            subject: 토큰 주체 (USER_ID_CLAIM에 기록, 회원 email)
            ttl_millis: 유효시간 (밀리초)

        Returns:
            str: 서명된 JWT 문자열
        """
        if ttl_millis <= 0:
            raise ValueError("ttl_millis는 0보다 커야 합니다.")

        token = AccessToken()
        token.set_exp(lifetime=timedelta(milliseconds=ttl_millis))
        token[api_settings.USER_ID_CLAIM] = subject

        logger.debug("토큰 발급 | subject=%s, ttl_millis=%d", subject, ttl_millis)
        return str(token)
