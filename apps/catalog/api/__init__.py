from .serializers import (
    CalculatedProductPriceSerializer,
    MediaSerializer,
    ProductDetailSerializer,
    ProductDetailVariationSerializer,
    ProductThumbnailSerializer,
)

__all__ = [
    'CalculatedProductPriceSerializer',
    'MediaSerializer',
    'ProductDetailSerializer',
    'ProductDetailVariationSerializer',
    'ProductThumbnailSerializer',
]
