from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import serializers as drf_serializers
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from gift.serializers.member_serializers import LoginSerializer, MemberSerializer, RegisterSerializer, TokenResponseSerializer
from gift.services.base import ServiceError
from gift.services.member_service import MemberService
from gift.throttles import LoginRateThrottle, RegisterRateThrottle

from .mixins import ErrorResponseSerializer, ServiceErrorResponseMixin


# ===== Swagger 문서화용 응답 Serializers =====


class RegisterResponseSerializer(drf_serializers.Serializer):
    """회원가입 성공 응답 스키마"""
    message = drf_serializers.CharField()
    email = drf_serializers.EmailField()


class TokenCheckResponseSerializer(drf_serializers.Serializer):
    """토큰 확인 응답 스키마"""
    valid = drf_serializers.BooleanField()
    member = MemberSerializer()
    message = drf_serializers.CharField()


class RegisterView(ServiceErrorResponseMixin, APIView):
    """
    회원가입 API
    - POST: 새 회원 생성 (토큰은 로그인으로 발급)
    """

    permission_classes = [AllowAny]
    throttle_classes = [RegisterRateThrottle]

    @extend_schema(
        request=RegisterSerializer,
        responses={201: RegisterResponseSerializer, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        summary="회원가입",
        description="""처리 내용:
- email/password로 새 회원을 생성한다.
- 이미 가입된 email이면 409를 반환한다.""",
        tags=["Members"],
    )
    def post(self, request: Request) -> Response:
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        try:
            MemberService.register_member(email, serializer.validated_data["password"])
        except ServiceError as e:
            return self._handle_service_error(e)

        return Response(
            {"message": "회원가입이 완료되었습니다.", "email": email},
            status=status.HTTP_201_CREATED,
        )


class LoginView(ServiceErrorResponseMixin, APIView):
    """
    로그인 API
    - POST: 비밀번호 확인 후 30분짜리 토큰 발급
    """

    permission_classes = [AllowAny]
    throttle_classes = [LoginRateThrottle]

    @extend_schema(
        request=LoginSerializer,
        responses={
            200: TokenResponseSerializer,
            400: ErrorResponseSerializer,
            401: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        summary="로그인",
        description="""처리 내용:
- 가입되지 않은 email이면 404를 반환한다.
- 비밀번호가 다르면 401을 반환한다.
- 성공 시 Bearer 토큰을 반환한다.""",
        tags=["Members"],
    )
    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            token = MemberService.login(
                serializer.validated_data["email"],
                serializer.validated_data["password"],
            )
        except ServiceError as e:
            return self._handle_service_error(e)

        return Response({"token": token}, status=status.HTTP_200_OK)


@extend_schema(
    responses={200: TokenCheckResponseSerializer},
    summary="토큰 유효성 확인",
    tags=["Auth"],
)
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def check_token(request: Request) -> Response:
    """
    토큰 유효성 확인 API
    - GET: 현재 Bearer 토큰이 유효한지 확인
    """
    return Response(
        {
            "valid": True,
            "member": MemberSerializer(request.user).data,
            "message": "유효한 토큰입니다.",
        },
        status=status.HTTP_200_OK,
    )
