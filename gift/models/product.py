from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """
    상품 기본 정보

    코어 로직에서는 id로 조회만 합니다.
    생성/수정은 관리자 페이지나 create_test_data 명령으로 합니다.
    """

    name = models.CharField(max_length=200, verbose_name="상품명", db_index=True)

    price = models.PositiveIntegerField(
        validators=[MinValueValidator(0)],
        verbose_name="가격",
    )

    image_url = models.URLField(max_length=500, blank=True, verbose_name="이미지 URL")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "gift_products"
        verbose_name = "상품"
        verbose_name_plural = "상품 목록"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} ({self.price:,}원)"
