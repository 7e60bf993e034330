"""
Django 프로젝트 패키지

설정(settings)과 최상위 URL 구성을 담고 있습니다.
비즈니스 로직은 gift 앱에 있습니다.
"""
