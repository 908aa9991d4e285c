import logging

from rest_framework import viewsets, filters, status
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.catalog.exceptions import ProductNotFound
from apps.catalog.models import Product
from apps.catalog.services import get_product_detail
from apps.catalog.services.product_detail import get_media_service, get_pricing_service
from apps.catalog.services.related_products import build_thumbnail
from .serializers import ProductDetailSerializer, ProductThumbnailSerializer
from .filters import ProductFilter

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Storefront API endpoint for published products.

    list: Published products as thumbnails
    retrieve: Product detail page with variations, related and cross-sell products
    """
    queryset = Product.objects.filter(is_published=True).select_related('thumbnail_image')
    serializer_class = ProductThumbnailSerializer
    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering_fields = ['name', 'price', 'created_at']
    ordering = ['name']
    lookup_value_regex = r'\d+'

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        pricing_service = get_pricing_service()
        media_service = get_media_service(request)

        page = self.paginate_queryset(queryset)
        products = page if page is not None else queryset
        thumbnails = [
            build_thumbnail(product, pricing_service, media_service)
            for product in products
        ]
        serializer = ProductThumbnailSerializer(thumbnails, many=True)

        if page is not None:
            return self.get_paginated_response(serializer.data)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        try:
            detail = get_product_detail(pk, request=request)
        except ProductNotFound:
            logger.debug("Product detail requested for missing product %s", pk)
            return Response(
                {'error': 'Product not found'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(ProductDetailSerializer(detail).data)
