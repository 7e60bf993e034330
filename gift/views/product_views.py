from __future__ import annotations

from rest_framework import permissions, viewsets

from gift.repositories.product_repository import ProductRepository
from gift.serializers.product_serializers import ProductSerializer


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    상품 조회 ViewSet (목록/상세)

    위시리스트에 추가할 상품 ID를 찾는 용도입니다.
    상품 등록/수정은 관리자 페이지에서 합니다.
    """

    serializer_class = ProductSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):
        return ProductRepository.find_all()
