from django.urls import include, path
from rest_framework.routers import DefaultRouter

# Auth Views
from gift.views.auth_views import LoginView, RegisterView, check_token

# ViewSet
from gift.views.product_views import ProductViewSet
from gift.views.wishlist_views import WishlistViewSet

# DRF의 라우터 생성
router = DefaultRouter()

# ViewSet 등록
router.register(r"products", ProductViewSet, basename="product")
router.register(r"wishlist", WishlistViewSet, basename="wishlist")

# URL 패턴 정의
urlpatterns = [
    # API root - 라우터가 자동으로 생성하는 URL들
    path("", include(router.urls)),
    # 회원가입 및 로그인
    path("members/register/", RegisterView.as_view(), name="member-register"),
    path("members/login/", LoginView.as_view(), name="member-login"),
    # 토큰 확인
    path("auth/token/verify/", check_token, name="token-verify"),
]
