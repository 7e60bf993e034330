from rest_framework import serializers

from gift.models.product import Product


class ProductSerializer(serializers.ModelSerializer):
    """상품 조회 Serializer"""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "image_url", "created_at"]
        read_only_fields = fields


class ProductViewSerializer(serializers.Serializer):
    """위시리스트에 표시할 상품 정보 (ProductView DTO)"""

    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.IntegerField()
    image_url = serializers.CharField()
