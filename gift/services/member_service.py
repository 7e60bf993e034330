"""회원 서비스 레이어

회원 가입, 로그인(토큰 발급), 위시리스트 조회/추가/삭제를 처리합니다.

- 상태를 갖지 않습니다. 모든 상태는 Repository(DB)에 있습니다.
- 중복 검사는 DB 유니크 제약으로 원자적으로 처리하고,
  IntegrityError를 AlreadyExistsError로 변환합니다.
- 위시리스트 삭제는 조건부 DELETE 한 번으로 존재 확인과 삭제를 함께 처리합니다.
- 비즈니스 예외(AlreadyExistsError, NotFoundError, InvalidCredentialError)는
  잡지 않고 그대로 호출자(View)에게 전파합니다.

사용 예시:
    MemberService.register_member("a@x.com", "p1")
    token = MemberService.login("a@x.com", "p1")

    MemberService.add_wishlist("a@x.com", product_id=42)
    products = MemberService.get_all_wishlist("a@x.com")
    page = MemberService.get_all_wishlist("a@x.com", PageRequest(page=1, size=10))
    MemberService.delete_wishlist("a@x.com", product_id=42)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import ceil

from django.core.paginator import Paginator
from django.db import IntegrityError, transaction

from ..models.member import Member
from ..models.product import Product
from ..models.wishlist import Wishlist
from ..repositories import MemberRepository, ProductRepository, WishlistRepository
from .base import AlreadyExistsError, InvalidCredentialError, NotFoundError, log_service_call
from .token_service import TokenIssuer

logger = logging.getLogger(__name__)


class ErrorMessage:
    """서비스 에러 메시지"""

    EMAIL_ALREADY_EXISTS_MSG = "이미 가입된 이메일입니다."
    MEMBER_NOT_EXISTS_MSG = "존재하지 않는 회원입니다."
    INVALID_PASSWORD_MSG = "비밀번호가 일치하지 않습니다."
    PRODUCT_NOT_EXISTS_MSG = "존재하지 않는 상품입니다."
    WISHLIST_ALREADY_EXISTS_MSG = "이미 위시리스트에 있는 상품입니다."
    WISHLIST_NOT_EXISTS_MSG = "위시리스트에 없는 상품입니다."


# ===== Data Transfer Objects (DTO) =====


@dataclass(frozen=True)
class ProductView:
    """위시리스트 조회 시 반환하는 상품 정보"""

    id: int
    name: str
    price: int
    image_url: str

    @classmethod
    def from_product(cls, product: Product) -> ProductView:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            image_url=product.image_url,
        )


@dataclass(frozen=True)
class PageRequest:
    """페이지 요청 (page는 1부터 시작)"""

    page: int = 1
    size: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page는 1 이상이어야 합니다.")
        if self.size < 1:
            raise ValueError("size는 1 이상이어야 합니다.")


@dataclass
class WishlistPage:
    """위시리스트 페이지 조회 결과"""

    items: list[ProductView] = field(default_factory=list)
    page: int = 1
    size: int = 10
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        return ceil(self.total_elements / self.size) if self.total_elements else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class MemberService:
    """
    회원/위시리스트 비즈니스 로직 서비스

    책임:
    - 회원 가입 (email 중복 검사)
    - 로그인 (비밀번호 확인 + 토큰 발급)
    - 위시리스트 조회 (전체 / 페이지)
    - 위시리스트 추가/삭제

    Note:
        모든 메서드는 stateless하게 설계되어 있으며,
        필요한 상태는 인자로 전달받습니다.
    """

    # ===== 정책 상수 =====
    # 로그인 토큰 유효시간: 30분
    TOKEN_TTL_MILLIS = 1000 * 60 * 30

    # ===== 회원 가입 =====

    @staticmethod
    @log_service_call
    def register_member(email: str, password: str) -> None:
        """
        회원 가입

        Args:
            email: 이메일 (로그인 ID)
            password: 비밀번호

        Raises:
            AlreadyExistsError: 이미 가입된 email인 경우
        """
        if MemberRepository.exists_by_email(email):
            raise MemberService._email_already_exists(email)

        member = Member(email=email)
        member.set_password(password)

        # 동시 가입: 앞의 조회를 둘 다 통과해도 유니크 제약에서 한쪽만 성공
        try:
            with transaction.atomic():
                MemberRepository.save(member)
        except IntegrityError:
            raise MemberService._email_already_exists(email)

        logger.info("[Member] 회원 가입 | member_id=%d, email=%s", member.id, email)

    # ===== 로그인 =====

    @staticmethod
    @log_service_call
    def login(email: str, password: str) -> str:
        """
        로그인

        Args:
            email: 이메일
            password: 비밀번호

        Returns:
            str: 30분간 유효한 Bearer 토큰 (subject = email)

        Raises:
            NotFoundError: 가입되지 않은 email인 경우
            InvalidCredentialError: 비밀번호가 일치하지 않는 경우
        """
        member = MemberService._get_member(email)

        if not member.is_correct_password(password):
            logger.info("[Member] 로그인 실패 (비밀번호 불일치) | member_id=%d", member.id)
            raise InvalidCredentialError(
                ErrorMessage.INVALID_PASSWORD_MSG,
                code="INVALID_PASSWORD",
            )

        token = TokenIssuer.issue(member.email, MemberService.TOKEN_TTL_MILLIS)
        logger.info("[Member] 로그인 | member_id=%d", member.id)
        return token

    # ===== 위시리스트 조회 =====

    @staticmethod
    @log_service_call
    def get_all_wishlist(email: str, page: PageRequest | None = None) -> list[ProductView] | WishlistPage:
        """
        회원의 위시리스트 조회

        Args:
            email: 회원 이메일
            page: 페이지 요청. None이면 전체 목록을 반환

        Returns:
            list[ProductView]: page가 없는 경우 (추가 순서)
            WishlistPage: page가 있는 경우. 범위를 넘는 페이지는 빈 페이지

        Raises:
            NotFoundError: 가입되지 않은 email인 경우 (페이지 조회 포함)
        """
        MemberService._get_member(email)

        wishlists = WishlistRepository.find_all_by_member_email(email)

        if page is None:
            return [ProductView.from_product(wishlist.product) for wishlist in wishlists]

        paginator = Paginator(wishlists, page.size)
        items: list[ProductView] = []
        if paginator.count and page.page <= paginator.num_pages:
            items = [
                ProductView.from_product(wishlist.product)
                for wishlist in paginator.page(page.page).object_list
            ]

        return WishlistPage(
            items=items,
            page=page.page,
            size=page.size,
            total_elements=paginator.count,
        )

    # ===== 위시리스트 추가 =====

    @staticmethod
    @log_service_call
    def add_wishlist(email: str, product_id: int) -> None:
        """
        위시리스트에 상품 추가

        Args:
            email: 회원 이메일
            product_id: 상품 ID

        Raises:
            NotFoundError: 회원 또는 상품이 없는 경우
            AlreadyExistsError: 이미 위시리스트에 있는 상품인 경우
        """
        member = MemberService._get_member(email)
        product = MemberService._get_product(product_id)

        # 존재 확인 + 삽입을 유니크 제약 한 번으로 처리 (savepoint 안에서 실패를 흡수)
        try:
            with transaction.atomic():
                WishlistRepository.save(Wishlist(member=member, product=product))
        except IntegrityError:
            raise AlreadyExistsError(
                ErrorMessage.WISHLIST_ALREADY_EXISTS_MSG,
                code="WISHLIST_ALREADY_EXISTS",
                details={"product_id": product_id},
            )

        logger.info("[Wishlist] 추가 | member_id=%d, product_id=%d", member.id, product_id)

    # ===== 위시리스트 삭제 =====

    @staticmethod
    @log_service_call
    def delete_wishlist(email: str, product_id: int) -> None:
        """
        위시리스트에서 상품 삭제

        Args:
            email: 회원 이메일
            product_id: 상품 ID

        Raises:
            NotFoundError: 위시리스트에 해당 (email, product_id) 행이 없는 경우
        """
        deleted = WishlistRepository.delete_by_member_email_and_product_id(email, product_id)

        if not deleted:
            raise NotFoundError(
                ErrorMessage.WISHLIST_NOT_EXISTS_MSG,
                code="WISHLIST_NOT_FOUND",
                details={"product_id": product_id},
            )

        logger.info("[Wishlist] 삭제 | email=%s, product_id=%d", email, product_id)

    # ===== Private Helper Methods =====

    @staticmethod
    def _get_member(email: str) -> Member:
        """회원 조회"""
        member = MemberRepository.find_by_email(email)
        if member is None:
            raise NotFoundError(
                ErrorMessage.MEMBER_NOT_EXISTS_MSG,
                code="MEMBER_NOT_FOUND",
                details={"email": email},
            )
        return member

    @staticmethod
    def _get_product(product_id: int) -> Product:
        """상품 조회"""
        product = ProductRepository.find_by_id(product_id)
        if product is None:
            raise NotFoundError(
                ErrorMessage.PRODUCT_NOT_EXISTS_MSG,
                code="PRODUCT_NOT_FOUND",
                details={"product_id": product_id},
            )
        return product

    @staticmethod
    def _email_already_exists(email: str) -> AlreadyExistsError:
        return AlreadyExistsError(
            ErrorMessage.EMAIL_ALREADY_EXISTS_MSG,
            code="MEMBER_ALREADY_EXISTS",
            details={"email": email},
        )
