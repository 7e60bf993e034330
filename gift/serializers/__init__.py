from .member_serializers import LoginSerializer, MemberSerializer, RegisterSerializer, TokenResponseSerializer
from .product_serializers import ProductSerializer, ProductViewSerializer
from .wishlist_serializers import WishlistAddSerializer, WishlistPageQuerySerializer, WishlistPageSerializer

__all__ = [
    "MemberSerializer",
    "RegisterSerializer",
    "LoginSerializer",
    "TokenResponseSerializer",
    "ProductSerializer",
    "ProductViewSerializer",
    "WishlistAddSerializer",
    "WishlistPageQuerySerializer",
    "WishlistPageSerializer",
]
