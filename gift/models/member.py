from __future__ import annotations

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.hashers import check_password
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils import timezone


class MemberManager(BaseUserManager):
    """email을 로그인 ID로 사용하는 회원 매니저"""

    use_in_migrations = True

    def create_user(self, email: str, password: str | None = None, **extra_fields) -> Member:
        if not email:
            raise ValueError("email은 필수입니다.")
        member = self.model(email=self.normalize_email(email), **extra_fields)
        member.set_password(password)
        member.save(using=self._db)
        return member

    def create_superuser(self, email: str, password: str | None = None, **extra_fields) -> Member:
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        return self.create_user(email, password, **extra_fields)


class Member(AbstractBaseUser, PermissionsMixin):
    """
    회원 모델

    email이 자연키(unique)이며 로그인 ID로 사용됩니다.
    위시리스트는 Wishlist 테이블로만 연결되고, 회원 객체에 목록을 캐싱하지 않습니다.
    회원 삭제 시 Wishlist 행은 CASCADE로 함께 삭제됩니다.
    """

    email = models.EmailField(unique=True, verbose_name="이메일")

    is_active = models.BooleanField(default=True, verbose_name="활성화 여부")

    is_staff = models.BooleanField(default=False, verbose_name="관리자 페이지 접근 여부")

    date_joined = models.DateTimeField(default=timezone.now, verbose_name="가입일")

    objects = MemberManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        db_table = "gift_members"
        verbose_name = "회원"
        verbose_name_plural = "회원 목록"

    def __str__(self) -> str:
        return self.email

    def is_correct_password(self, raw_password: str) -> bool:
        """입력한 비밀번호가 가입 시 비밀번호와 같은지 확인"""
        # AbstractBaseUser.check_password와 달리 해시 업그레이드 저장을 하지 않음
        return check_password(raw_password, self.password)
