from .member import Member
from .product import Product
from .wishlist import Wishlist

__all__ = [
    "Member",
    "Product",
    "Wishlist",
]
