"""
Repository for Member database operations
"""

from __future__ import annotations

from gift.models.member import Member


class MemberRepository:
    """Repository for Member database operations"""

    @staticmethod
    def find_by_email(email: str) -> Member | None:
        """email로 회원 조회 (없으면 None)"""
        return Member.objects.filter(email=email).first()

    @staticmethod
    def exists_by_email(email: str) -> bool:
        return Member.objects.filter(email=email).exists()

    @staticmethod
    def save(member: Member) -> Member:
        """
        회원 저장

        email 유니크 제약 위반 시 IntegrityError가 그대로 전파됩니다.
        """
        member.save()
        return member
