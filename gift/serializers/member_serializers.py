from __future__ import annotations

from rest_framework import serializers

from gift.models.member import Member


class MemberSerializer(serializers.ModelSerializer):
    """회원 조회용 시리얼라이저 (비밀번호 제외)"""

    class Meta:
        model = Member
        fields = ["id", "email", "date_joined"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """
    회원가입 요청 시리얼라이저
    - email 중복 검사는 서비스(DB 유니크 제약)에서 처리
    """

    email = serializers.EmailField(required=True, label="이메일")

    # 비밀번호는 쓰기 전용
    password = serializers.CharField(
        write_only=True,
        required=True,
        trim_whitespace=False,
        style={"input_type": "password"},
        label="비밀번호",
    )


class LoginSerializer(serializers.Serializer):
    """로그인 요청 시리얼라이저"""

    email = serializers.EmailField(required=True, label="이메일")
    password = serializers.CharField(
        write_only=True,
        required=True,
        trim_whitespace=False,
        style={"input_type": "password"},
        label="비밀번호",
    )


class TokenResponseSerializer(serializers.Serializer):
    """로그인 성공 응답"""

    token = serializers.CharField(help_text="Authorization: Bearer 헤더에 사용하는 토큰 (30분 유효)")
