from __future__ import annotations

from rest_framework import serializers

from gift.repositories.wishlist_repository import MAX_PRODUCT_ID
from gift.services.member_service import PageRequest

from .product_serializers import ProductViewSerializer


class WishlistAddSerializer(serializers.Serializer):
    """위시리스트 추가 요청 Serializer"""

    product_id = serializers.IntegerField(
        required=True,
        min_value=1,
        max_value=MAX_PRODUCT_ID,
        help_text="추가할 상품 ID",
    )


class WishlistPageQuerySerializer(serializers.Serializer):
    """
    위시리스트 페이지 조회 쿼리 파라미터

    page, size 중 하나라도 있으면 페이지 조회로 처리합니다.
    """

    page = serializers.IntegerField(required=False, min_value=1, help_text="페이지 번호 (1부터)")
    size = serializers.IntegerField(required=False, min_value=1, max_value=100, help_text="페이지 크기")

    def to_page_request(self) -> PageRequest | None:
        """검증된 값으로 PageRequest 생성 (파라미터가 없으면 None)"""
        data = self.validated_data
        if "page" not in data and "size" not in data:
            return None
        return PageRequest(page=data.get("page", 1), size=data.get("size", 10))


class WishlistPageSerializer(serializers.Serializer):
    """위시리스트 페이지 조회 응답 (WishlistPage DTO)"""

    items = ProductViewSerializer(many=True)
    page = serializers.IntegerField()
    size = serializers.IntegerField()
    total_elements = serializers.IntegerField()
    total_pages = serializers.IntegerField()
    has_next = serializers.BooleanField()
