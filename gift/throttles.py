"""
인증 엔드포인트 Rate Limiting (속도 제한) 클래스

로그인/회원가입 남용(brute force, 스팸 계정 생성)을 막습니다.
속도 제한 카운터는 캐시 백엔드(local/production에서는 Redis)에 저장됩니다.
"""

from rest_framework.throttling import AnonRateThrottle


class LoginRateThrottle(AnonRateThrottle):
    """
    로그인 엔드포인트 속도 제한

    제한: DEFAULT_THROTTLE_RATES["login"]

    적용 대상: LoginView
    """
    scope = "login"


class RegisterRateThrottle(AnonRateThrottle):
    """
    회원가입 엔드포인트 속도 제한

    제한: DEFAULT_THROTTLE_RATES["register"]

    적용 대상: RegisterView
    """
    scope = "register"
