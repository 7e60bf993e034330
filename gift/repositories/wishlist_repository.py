"""
Repository for Wishlist database operations

위시리스트 행은 항상 (회원 email, 상품 id) 쌍으로 접근합니다.
"""

from __future__ import annotations

from django.db.models import BigIntegerField, QuerySet

from gift.models.wishlist import Wishlist

# 상품 id(BigAutoField)가 가질 수 있는 최댓값
MAX_PRODUCT_ID = BigIntegerField.MAX_BIGINT


class WishlistRepository:
    """Repository for Wishlist database operations"""

    @staticmethod
    def find_by_member_email_and_product_id(email: str, product_id: int) -> Wishlist | None:
        """(email, product_id) 쌍의 위시리스트 행 조회 (삭제 경로는 조건부 DELETE를 쓰며, 저장소 인터페이스로만 유지)"""
        return (
            Wishlist.objects.filter(member__email=email, product_id=product_id)
            .select_related("member", "product")
            .first()
        )

    @staticmethod
    def find_all_by_member_email(email: str) -> QuerySet[Wishlist]:
        """
        회원의 위시리스트 전체 조회

        상품을 함께 가져오며(select_related) 추가 순서(id)로 정렬됩니다.
        Paginator에 그대로 넘길 수 있도록 QuerySet을 반환합니다.
        """
        return (
            Wishlist.objects.filter(member__email=email)
            .select_related("product")
            .order_by("id")
        )

    @staticmethod
    def save(wishlist: Wishlist) -> Wishlist:
        """
        위시리스트 행 저장

        (member, product) 유니크 제약 위반 시 IntegrityError가 그대로 전파됩니다.
        """
        wishlist.save()
        return wishlist

    @staticmethod
    def delete_by_member_email_and_product_id(email: str, product_id: int) -> int:
        """
        (email, product_id) 쌍의 위시리스트 행 삭제

        조건부 DELETE 한 번으로 처리하며 삭제된 행 수를 반환합니다.
        id 범위를 벗어난 product_id는 존재할 수 없으므로 0을 반환합니다.
        """
        if not 0 < product_id <= MAX_PRODUCT_ID:
            return 0

        deleted, _ = Wishlist.objects.filter(
            member__email=email,
            product_id=product_id,
        ).delete()
        return deleted
