from django.conf import settings
from django.db import models


class Wishlist(models.Model):
    """
    위시리스트 (회원 - 상품 연결 테이블)

    (member, product) 쌍마다 최대 1행. DB 유니크 제약으로 보장합니다.
    호출자는 항상 (email, product_id)로 접근하며 id는 외부에 노출하지 않습니다.
    """

    member = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="wishlists",
        verbose_name="회원",
    )

    product = models.ForeignKey(
        "gift.Product",
        on_delete=models.CASCADE,
        related_name="wishlists",
        verbose_name="상품",
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="추가일")

    class Meta:
        db_table = "gift_wishlist"
        verbose_name = "위시리스트"
        verbose_name_plural = "위시리스트 목록"
        # 조회 순서 = 추가 순서
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["member", "product"],
                name="unique_wishlist_member_product",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.member_id} - {self.product_id}"
