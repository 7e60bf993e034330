"""서비스 레이어 공통 모듈

서비스 클래스에서 공통으로 사용하는 유틸리티를 제공합니다.

- log_service_call: 서비스 메서드 호출 로깅 데코레이터
- ServiceError: 서비스 예외 기본 클래스
- AlreadyExistsError / NotFoundError / InvalidCredentialError: 회원/위시리스트 예외 분류
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

# 제네릭 타입 변수 (반환 타입 보존용)
T = TypeVar("T")

# 로그에 남기지 않는 인자 이름
SENSITIVE_KWARGS = ("password", "raw_password", "token", "secret")

# 느린 실행 경고 기준 (ms)
SLOW_CALL_THRESHOLD_MS = 100


def log_service_call(func: Callable[..., T]) -> Callable[..., T]:
    """
    서비스 메서드 호출 로깅 데코레이터

    기능:
    - 메서드 호출 시작/종료 DEBUG 로깅
    - 실행 시간 측정 (ms)
    - 느린 실행 경고 (100ms 이상)
    - 비즈니스 예외 WARNING 로깅
    - 시스템 예외 ERROR 로깅 (스택 트레이스 포함)

    사용법:
        @staticmethod
        @log_service_call
        def some_method(email, ...):
            ...

    Note:
        - 위치 인자는 첫 번째(식별자: email 등)만 기록합니다.
          비밀번호가 두 번째 위치 인자로 들어오는 경우가 있기 때문입니다.
        - 민감 정보(password, token)는 kwargs에서도 제외됩니다.
        - 서비스 클래스 이름은 모듈명에서 추출됩니다.
    """

    @wraps(func)
    def wrapper(*args, **kwargs) -> T:
        # 서비스 클래스명 추출 (모듈명에서)
        module_name = func.__module__
        service_name = module_name.split(".")[-1].replace("_service", "").title() + "Service"

        func_name = func.__name__
        start_time = time.perf_counter()

        safe_kwargs = {k: v for k, v in kwargs.items() if k not in SENSITIVE_KWARGS}

        logger.debug(
            "[%s.%s] 호출 시작 | args=%s, kwargs=%s",
            service_name,
            func_name,
            args[:1],
            safe_kwargs,
        )

        try:
            result = func(*args, **kwargs)
            elapsed = (time.perf_counter() - start_time) * 1000  # ms

            logger.debug(
                "[%s.%s] 호출 완료 | elapsed=%.2fms",
                service_name,
                func_name,
                elapsed,
            )

            if elapsed > SLOW_CALL_THRESHOLD_MS:
                logger.warning(
                    "[%s.%s] 느린 실행 감지 | elapsed=%.2fms",
                    service_name,
                    func_name,
                    elapsed,
                )

            return result

        except ServiceError as e:
            elapsed = (time.perf_counter() - start_time) * 1000
            logger.warning(
                "[%s.%s] 비즈니스 에러 | code=%s, message=%s, elapsed=%.2fms",
                service_name,
                func_name,
                e.code,
                e.message,
                elapsed,
            )
            raise

        except Exception as e:
            elapsed = (time.perf_counter() - start_time) * 1000
            logger.error(
                "[%s.%s] 예외 발생 | error=%s, elapsed=%.2fms",
                service_name,
                func_name,
                str(e),
                elapsed,
                exc_info=True,  # 스택 트레이스 포함
            )
            raise

    return wrapper


class ServiceError(Exception):
    """
    서비스 레이어 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        code: 에러 코드 (API 응답에 활용)
        details: 추가 상세 정보
    """

    default_code = "SERVICE_ERROR"

    def __init__(self, message: str, code: str | None = None, details: dict | None = None):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class AlreadyExistsError(ServiceError):
    """유니크 조건 위반 (중복 email 가입, 중복 위시리스트 추가)"""

    default_code = "ALREADY_EXISTS"


class NotFoundError(ServiceError):
    """참조한 회원/상품/위시리스트 행이 없음"""

    default_code = "NOT_FOUND"


class InvalidCredentialError(ServiceError):
    """로그인 비밀번호 불일치"""

    default_code = "INVALID_CREDENTIAL"
