"""
Repositories package

모델별 DB 조회/저장 로직을 서비스에서 분리합니다.

- member_repository.py: 회원 (email로 조회)
- product_repository.py: 상품 (id로 조회)
- wishlist_repository.py: 위시리스트 (email + product_id로 조회/삭제)

Usage:
    from gift.repositories import MemberRepository
    member = MemberRepository.find_by_email("a@x.com")
"""

from .member_repository import MemberRepository
from .product_repository import ProductRepository
from .wishlist_repository import WishlistRepository

__all__ = [
    "MemberRepository",
    "ProductRepository",
    "WishlistRepository",
]
