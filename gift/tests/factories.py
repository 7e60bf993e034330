"""
Test factories for gift app

Factory Boy를 사용하여 테스트 데이터를 생성합니다.
- 재사용 가능한 테스트 객체 생성
- 기본값 제공 및 필요시 오버라이드 가능
"""

import factory
from factory.django import DjangoModelFactory

from gift.models.member import Member
from gift.models.product import Product
from gift.models.wishlist import Wishlist


# ==========================================
# 상수 정의
# ==========================================

class TestConstants:
    """테스트에서 사용하는 상수"""

    DEFAULT_PASSWORD = "testpass123"
    DEFAULT_PRODUCT_PRICE = 10000


# ==========================================
# Member Factories
# ==========================================


class MemberFactory(DjangoModelFactory):
    """
    Member factory

    사용 예시:
        member = MemberFactory()  # 기본 비밀번호 testpass123
        member = MemberFactory(password="p1")
    """

    class Meta:
        model = Member
        django_get_or_create = ("email",)
        skip_postgeneration_save = True  # post_generation에서 명시적으로 save() 호출

    email = factory.Sequence(lambda n: f"member{n}@test.com")
    is_active = True

    @factory.post_generation
    def password(obj, create, extracted, **kwargs):
        """
        비밀번호 설정 및 저장

        extracted가 제공되면 해당 비밀번호 사용, 아니면 기본 비밀번호 사용
        """
        obj.set_password(extracted if extracted else TestConstants.DEFAULT_PASSWORD)
        if create:
            obj.save()


# ==========================================
# Product Factories
# ==========================================


class ProductFactory(DjangoModelFactory):
    """Product factory"""

    class Meta:
        model = Product

    name = factory.Sequence(lambda n: f"테스트 상품 {n}")
    price = TestConstants.DEFAULT_PRODUCT_PRICE
    image_url = factory.Sequence(lambda n: f"https://example.com/images/{n}.png")


# ==========================================
# Wishlist Factories
# ==========================================


class WishlistFactory(DjangoModelFactory):
    """
    Wishlist factory

    사용 예시:
        WishlistFactory(member=member, product=product)
    """

    class Meta:
        model = Wishlist

    member = factory.SubFactory(MemberFactory)
    product = factory.SubFactory(ProductFactory)
