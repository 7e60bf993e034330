from django.contrib import admin
from django.db.models import Count

from .models import Member, Product, Wishlist


# Member Admin
@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    """
    회원 관리자 페이지 설정
    비밀번호 해시는 노출하지 않음
    """

    list_display = ["email", "date_joined", "is_active", "is_staff"]
    list_filter = ["is_active", "is_staff", "date_joined"]
    search_fields = ["email"]
    date_hierarchy = "date_joined"
    ordering = ["-date_joined"]
    exclude = ["password"]


# Product Admin
@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """상품 관리자 페이지 설정"""

    list_display = ["id", "name", "price", "wishlist_count", "created_at"]
    search_fields = ["name"]
    ordering = ["id"]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_wishlist_count=Count("wishlists"))

    @admin.display(description="위시리스트 수", ordering="_wishlist_count")
    def wishlist_count(self, obj):
        return obj._wishlist_count


# Wishlist Admin
@admin.register(Wishlist)
class WishlistAdmin(admin.ModelAdmin):
    """위시리스트 관리자 페이지 설정"""

    list_display = ["id", "member", "product", "created_at"]
    search_fields = ["member__email", "product__name"]
    list_select_related = ["member", "product"]
    raw_id_fields = ["member", "product"]
    ordering = ["-created_at"]
