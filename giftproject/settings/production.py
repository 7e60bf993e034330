"""
Django Production Settings
프로덕션 환경 전용 설정

⚠️ 주의: 이 설정을 사용하기 전에 반드시 다음 환경변수를 설정하세요:
- DJANGO_SECRET_KEY
- DATABASE_* (PostgreSQL 연결 정보)
- REDIS_URL
"""

import os

from giftproject.settings.base import *  # noqa: F401, F403
from giftproject.settings.components.logging import get_logging_config

# ==========================================================================
# Security Settings
# ==========================================================================

DEBUG = False

# HTTPS 관련 보안 설정
SECURE_SSL_REDIRECT = os.environ.get("SECURE_SSL_REDIRECT", "TRUE") == "TRUE"
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# HSTS (HTTP Strict Transport Security)
SECURE_HSTS_SECONDS = 31536000  # 1년
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

CSRF_TRUSTED_ORIGINS = os.environ.get(
    "CSRF_TRUSTED_ORIGINS", "https://yourdomain.com"
).split(",")

# ==========================================================================
# Database (PostgreSQL - Production)
# ==========================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("DATABASE_NAME"),
        "USER": os.getenv("DATABASE_USER"),
        "PASSWORD": os.getenv("DATABASE_PASSWORD"),
        "HOST": os.getenv("DATABASE_HOST"),
        "PORT": os.getenv("DATABASE_PORT", "5432"),
        "CONN_MAX_AGE": 600,
        "CONN_HEALTH_CHECKS": True,
        "ATOMIC_REQUESTS": True,
        "OPTIONS": {
            "connect_timeout": 10,
            "options": "-c statement_timeout=30000",
        },
    }
}

# ==========================================================================
# Cache (Redis - Production)
# ==========================================================================

CACHES = {
    "default": {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": os.environ.get("REDIS_URL"),
        "OPTIONS": {
            "CLIENT_CLASS": "django_redis.client.DefaultClient",
            "SOCKET_CONNECT_TIMEOUT": 5,
            "SOCKET_TIMEOUT": 5,
            "RETRY_ON_TIMEOUT": True,
        },
    }
}

# ==========================================================================
# Rate Limiting - 프로덕션 제한
# ==========================================================================

REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {  # noqa: F405
    "login": "5/min",
    "register": "10/hour",
}

# ==========================================================================
# Logging (Production mode - less verbose)
# ==========================================================================

LOGGING = get_logging_config(debug=False)
