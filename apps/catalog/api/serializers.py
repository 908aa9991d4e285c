from rest_framework import serializers


# =============================================================================
# Detail Serializers (read-only, built from apps.catalog.services.view_models)
# =============================================================================

class CalculatedProductPriceSerializer(serializers.Serializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    old_price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    percent_of_saving = serializers.IntegerField()


class MediaSerializer(serializers.Serializer):
    url = serializers.CharField(allow_null=True)
    thumbnail_url = serializers.CharField(allow_null=True)


class ProductDetailAttributeSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = serializers.CharField()


class ProductDetailCategorySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()


class ProductDetailVariationOptionSerializer(serializers.Serializer):
    option_id = serializers.IntegerField()
    option_name = serializers.CharField()
    value = serializers.CharField()


class ProductDetailVariationSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    normalized_name = serializers.CharField()
    is_allow_to_order = serializers.BooleanField()
    is_call_for_pricing = serializers.BooleanField()
    stock_quantity = serializers.IntegerField()
    calculated_product_price = CalculatedProductPriceSerializer()
    options = ProductDetailVariationOptionSerializer(many=True)


class ProductThumbnailSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()
    normalized_name = serializers.CharField()
    is_call_for_pricing = serializers.BooleanField()
    is_allow_to_order = serializers.BooleanField()
    stock_quantity = serializers.IntegerField()
    reviews_count = serializers.IntegerField()
    rating_average = serializers.FloatField(allow_null=True)
    thumbnail_url = serializers.CharField(allow_null=True)
    calculated_product_price = CalculatedProductPriceSerializer(allow_null=True)


class ProductDetailSerializer(serializers.Serializer):
    """Full product detail page."""
    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()
    normalized_name = serializers.CharField()
    calculated_product_price = CalculatedProductPriceSerializer()
    is_call_for_pricing = serializers.BooleanField()
    is_allow_to_order = serializers.BooleanField()
    stock_quantity = serializers.IntegerField()
    short_description = serializers.CharField(allow_blank=True)
    description = serializers.CharField(allow_blank=True)
    specification = serializers.CharField(allow_blank=True)
    reviews_count = serializers.IntegerField()
    rating_average = serializers.FloatField(allow_null=True)
    thumbnail_url = serializers.CharField(allow_null=True)
    attributes = ProductDetailAttributeSerializer(many=True)
    categories = ProductDetailCategorySerializer(many=True)
    variations = ProductDetailVariationSerializer(many=True)
    related_products = ProductThumbnailSerializer(many=True)
    cross_sell_products = ProductThumbnailSerializer(many=True)
    images = MediaSerializer(many=True)

