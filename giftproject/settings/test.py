"""
Django Test Settings
테스트 환경 전용 설정 (pytest, Django test)
"""

import os

# base.py는 SECRET_KEY가 없으면 예외를 던지므로 테스트 전용 키를 먼저 채운다
os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret-key-not-for-production-use-0123456789")

from giftproject.settings.base import *  # noqa: F401, F403, E402
from giftproject.settings.components.logging import get_logging_config  # noqa: E402

# ==========================================================================
# Test Mode Flag
# ==========================================================================

TESTING = True
DEBUG = True

# ==========================================================================
# Database (SQLite - 외부 DB 없이 실행)
# ==========================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test_db.sqlite3",  # noqa: F405
        "ATOMIC_REQUESTS": True,
        "TEST": {
            "NAME": ":memory:",
        },
    }
}

# ==========================================================================
# Cache (LocMem - throttle 카운터용)
# ==========================================================================

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# ==========================================================================
# Rate Limiting - 테스트에서는 사실상 비활성화
# ==========================================================================

REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {  # noqa: F405
    "login": "1000/min",
    "register": "1000/hour",
}

# ==========================================================================
# Logging (Quiet mode for tests)
# ==========================================================================

LOGGING = get_logging_config(debug=False, log_file=False)

# ==========================================================================
# Password Hashing (빠른 해싱 - 테스트 속도 향상)
# ==========================================================================

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
