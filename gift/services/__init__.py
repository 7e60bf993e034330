from .base import AlreadyExistsError, InvalidCredentialError, NotFoundError, ServiceError
from .member_service import MemberService, PageRequest, ProductView, WishlistPage
from .token_service import TokenIssuer

__all__ = [
    "ServiceError",
    "AlreadyExistsError",
    "NotFoundError",
    "InvalidCredentialError",
    "MemberService",
    "PageRequest",
    "ProductView",
    "WishlistPage",
    "TokenIssuer",
]
