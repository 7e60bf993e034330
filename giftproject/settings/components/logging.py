"""
Logging Configuration
로깅 관련 모든 설정을 관리합니다.
"""

from pathlib import Path

# BASE_DIR은 base.py에서 import
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent


def get_logging_config(debug: bool = False, log_file: bool = True) -> dict:
    """
    환경에 맞는 로깅 설정을 반환합니다.

    Args:
        debug: DEBUG 모드 여부
        log_file: logs/gift.log 파일 핸들러 사용 여부 (테스트에서는 끔)
    """
    handlers = ["console", "file"] if log_file else ["console"]

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
                "style": "{",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "level": "DEBUG" if debug else "INFO",
                "class": "logging.StreamHandler",
                "formatter": "simple",
            },
        },
        "loggers": {
            # Django request 로거 (400/500 에러 자동 로깅)
            "django.request": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            "gift.services": {
                "handlers": handlers,
                "level": "DEBUG" if debug else "INFO",
                "propagate": False,
            },
            "gift.views": {
                "handlers": handlers,
                "level": "DEBUG" if debug else "INFO",
                "propagate": False,
            },
        },
    }

    if log_file:
        logs_dir = BASE_DIR / "logs"
        logs_dir.mkdir(exist_ok=True)
        config["handlers"]["file"] = {
            "level": "INFO",
            "class": "logging.FileHandler",
            "filename": logs_dir / "gift.log",
            "formatter": "verbose",
        }

    return config
