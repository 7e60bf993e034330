from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import permissions, serializers as drf_serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from gift.serializers.product_serializers import ProductViewSerializer
from gift.serializers.wishlist_serializers import (
    WishlistAddSerializer,
    WishlistPageQuerySerializer,
    WishlistPageSerializer,
)
from gift.services.base import ServiceError
from gift.services.member_service import MemberService

from .mixins import ErrorResponseSerializer, ServiceErrorResponseMixin


# ===== Swagger 문서화용 응답 Serializers =====


class WishlistAddResponseSerializer(drf_serializers.Serializer):
    """위시리스트 추가 응답"""
    message = drf_serializers.CharField()
    product_id = drf_serializers.IntegerField()


class WishlistViewSet(ServiceErrorResponseMixin, ViewSet):
    """
    위시리스트 관리 ViewSet

    엔드포인트:
    - GET    /api/wishlist/               - 위시리스트 조회 (page/size가 있으면 페이지 조회)
    - POST   /api/wishlist/               - 위시리스트에 상품 추가
    - DELETE /api/wishlist/{product_id}/  - 위시리스트에서 상품 삭제

    권한: 인증 필요 (토큰의 회원 본인 위시리스트만 관리 가능)
    """

    permission_classes = [permissions.IsAuthenticated]
    lookup_field = "product_id"
    lookup_value_regex = r"\d+"

    @extend_schema(
        parameters=[
            OpenApiParameter(name="page", description="페이지 번호 (1부터)", required=False, type=int),
            OpenApiParameter(name="size", description="페이지 크기 (기본 10)", required=False, type=int),
        ],
        responses={200: WishlistPageSerializer, 404: ErrorResponseSerializer},
        summary="위시리스트 조회",
        description="""처리 내용:
- page/size가 없으면 추가 순서대로 전체 상품 목록(배열)을 반환한다.
- page/size가 있으면 페이지 정보를 함께 반환한다.
- 범위를 넘는 페이지는 빈 items를 반환한다.""",
        tags=["Wishlist"],
    )
    def list(self, request: Request) -> Response:
        """위시리스트 조회"""
        query = WishlistPageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = query.to_page_request()

        try:
            result = MemberService.get_all_wishlist(request.user.email, page)
        except ServiceError as e:
            return self._handle_service_error(e)

        if page is None:
            return Response(ProductViewSerializer(result, many=True).data)
        return Response(WishlistPageSerializer(result).data)

    @extend_schema(
        request=WishlistAddSerializer,
        responses={201: WishlistAddResponseSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        summary="위시리스트 추가",
        description="""처리 내용:
- 존재하지 않는 상품이면 404를 반환한다.
- 이미 위시리스트에 있는 상품이면 409를 반환한다.""",
        tags=["Wishlist"],
    )
    def create(self, request: Request) -> Response:
        """위시리스트 추가"""
        serializer = WishlistAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product_id = serializer.validated_data["product_id"]
        try:
            MemberService.add_wishlist(request.user.email, product_id)
        except ServiceError as e:
            return self._handle_service_error(e)

        return Response(
            {"message": "위시리스트에 추가되었습니다.", "product_id": product_id},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        responses={204: None, 404: ErrorResponseSerializer},
        summary="위시리스트 삭제",
        description="위시리스트에 없는 상품이면 404를 반환한다.",
        tags=["Wishlist"],
    )
    def destroy(self, request: Request, product_id: str | None = None) -> Response:
        """위시리스트 삭제"""
        try:
            MemberService.delete_wishlist(request.user.email, int(product_id))
        except ServiceError as e:
            return self._handle_service_error(e)

        return Response(status=status.HTTP_204_NO_CONTENT)
