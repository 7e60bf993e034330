"""
Repository for Product database operations
"""

from __future__ import annotations

from django.db.models import QuerySet

from gift.models.product import Product


class ProductRepository:
    """Repository for Product database operations"""

    @staticmethod
    def find_by_id(product_id: int) -> Product | None:
        """Get Product by ID"""
        return Product.objects.filter(id=product_id).first()

    @staticmethod
    def find_all() -> QuerySet[Product]:
        """Get all Product records (id 순)"""
        return Product.objects.all()
