"""모델 테스트"""

import pytest

from gift.models.member import Member
from gift.models.product import Product
from gift.models.wishlist import Wishlist
from gift.tests.factories import MemberFactory, ProductFactory, WishlistFactory


@pytest.mark.django_db
class TestMemberModel:
    """Member 모델 테스트"""

    def test_create_user_normalizes_email_domain(self):
        """정상 케이스: email 도메인 소문자 정규화"""
        member = Member.objects.create_user("User@EXAMPLE.COM", "p1")

        assert member.email == "User@example.com"
        assert member.is_correct_password("p1")

    def test_create_user_requires_email(self):
        """예외 케이스: email 필수"""
        with pytest.raises(ValueError):
            Member.objects.create_user("", "p1")

    def test_create_superuser(self):
        """정상 케이스: 관리자 계정"""
        admin = Member.objects.create_superuser("admin@x.com", "admin123!")

        assert admin.is_staff is True
        assert admin.is_superuser is True

    def test_is_correct_password(self):
        """정상 케이스: 비밀번호 비교"""
        member = MemberFactory(password="p1")

        assert member.is_correct_password("p1") is True
        assert member.is_correct_password("p2") is False
        assert member.is_correct_password("") is False

    def test_str(self):
        assert str(MemberFactory(email="a@x.com")) == "a@x.com"

    def test_delete_member_cascades_wishlist(self):
        """정상 케이스: 회원 삭제 시 위시리스트 함께 삭제"""
        wishlist = WishlistFactory()
        product_id = wishlist.product_id

        wishlist.member.delete()

        assert not Wishlist.objects.exists()
        assert Product.objects.filter(id=product_id).exists()


@pytest.mark.django_db
class TestProductModel:
    """Product 모델 테스트"""

    def test_str(self):
        product = ProductFactory(name="케이크", price=30000)

        assert str(product) == "케이크 (30,000원)"

    def test_delete_product_cascades_wishlist(self):
        """정상 케이스: 상품 삭제 시 위시리스트 함께 삭제"""
        wishlist = WishlistFactory()
        member_id = wishlist.member_id

        wishlist.product.delete()

        assert not Wishlist.objects.exists()
        assert Member.objects.filter(id=member_id).exists()
