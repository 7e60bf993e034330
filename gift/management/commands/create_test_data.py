# gift/management/commands/create_test_data.py

import os
import random

from django.core.management.base import BaseCommand
from django.db import transaction
from dotenv import load_dotenv

from gift.models import Member, Product, Wishlist
from gift.services.base import AlreadyExistsError
from gift.services.member_service import MemberService

# 환경변수 로드
load_dotenv()


class Command(BaseCommand):
    help = "테스트용 데이터를 생성합니다 (상품, 데모 회원, 위시리스트)"

    # 상품명 조합용 샘플
    ADJECTIVES = ["프리미엄", "시그니처", "스페셜", "클래식", "미니", "홀리데이"]
    ITEMS = ["케이크", "커피 쿠폰", "꽃다발", "향수", "머그컵", "디퓨저", "초콜릿 세트", "와인"]

    def add_arguments(self, parser):
        """커맨드 옵션 추가"""
        parser.add_argument(
            "--products",
            type=int,
            default=20,
            help="생성할 상품 수 (기본 20)",
        )
        parser.add_argument(
            "--clear",
            action="store_true",
            help="기존 상품/위시리스트를 모두 삭제하고 새로 생성",
        )
        parser.add_argument(
            "--with-member",
            action="store_true",
            help="데모 회원과 위시리스트도 함께 생성",
        )

    def handle(self, *args, **options):
        """메인 실행 함수"""
        self.stdout.write("🚀 테스트 데이터 생성을 시작합니다...")

        if options["clear"]:
            self.clear_existing_data()

        # 트랜잭션으로 묶어서 실행 (에러 시 롤백)
        with transaction.atomic():
            products = self.create_products(options["products"])

            if options["with_member"]:
                self.create_demo_member(products)

        self.stdout.write(self.style.SUCCESS("\n✅ 테스트 데이터 생성이 완료되었습니다!"))
        self.print_summary()

    def clear_existing_data(self):
        """기존 데이터 삭제"""
        self.stdout.write("🗑️  기존 데이터를 삭제하는 중...")
        Wishlist.objects.all().delete()
        Product.objects.all().delete()
        self.stdout.write(self.style.SUCCESS("  ✓ 기존 데이터 삭제 완료"))

    def create_products(self, count):
        """상품 생성"""
        self.stdout.write(f"📦 상품 {count}개 생성 중...")

        products = [
            Product(
                name=f"{random.choice(self.ADJECTIVES)} {random.choice(self.ITEMS)} {i + 1}",
                price=random.randrange(5_000, 100_000, 500),
                image_url=f"https://picsum.photos/seed/gift{i + 1}/300/300",
            )
            for i in range(count)
        ]
        products = Product.objects.bulk_create(products)

        self.stdout.write(self.style.SUCCESS(f"  ✓ 상품 {len(products)}개 생성"))
        return products

    def create_demo_member(self, products):
        """데모 회원 생성 후 상품 일부를 위시리스트에 추가"""
        email = os.environ.get("TEST_MEMBER_EMAIL", "demo@example.com")
        password = os.environ.get("TEST_MEMBER_PASSWORD", "demo1234!")

        try:
            MemberService.register_member(email, password)
            self.stdout.write(self.style.SUCCESS(f"  ✓ 데모 회원 생성: {email}"))
        except AlreadyExistsError:
            self.stdout.write(self.style.WARNING(f"  - 이미 존재하는 회원: {email}"))

        added = 0
        for product in products[:3]:
            try:
                MemberService.add_wishlist(email, product.id)
                added += 1
            except AlreadyExistsError:
                continue

        self.stdout.write(self.style.SUCCESS(f"  ✓ 위시리스트 {added}개 추가"))

    def print_summary(self):
        """생성 결과 요약"""
        self.stdout.write("\n" + "=" * 40)
        self.stdout.write(f"회원: {Member.objects.count()}명")
        self.stdout.write(f"상품: {Product.objects.count()}개")
        self.stdout.write(f"위시리스트: {Wishlist.objects.count()}개")
        self.stdout.write("=" * 40)
