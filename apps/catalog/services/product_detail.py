"""
Service assembling the product detail page.
Collects the product, its published variants, related and cross-sell
products, categories, attributes and images into one ProductDetail.
"""

import logging

from django.conf import settings
from django.utils.module_loading import import_string

from apps.catalog.models import MediaType
from apps.catalog.services.product_graph import fetch_detail_graph
from apps.catalog.services.related_products import classify_links
from apps.catalog.services.variants import resolve_variants
from apps.catalog.services.view_models import (
    MediaViewModel,
    ProductDetail,
    ProductDetailAttribute,
    ProductDetailCategory,
)
from apps.catalog.signals import ENTITY_TYPE_PRODUCT, notify_viewed

logger = logging.getLogger(__name__)


def get_pricing_service():
    return import_string(settings.CATALOG_PRICING_SERVICE)()


def get_media_service(request=None):
    return import_string(settings.CATALOG_MEDIA_SERVICE)(request=request)


class ProductDetailComposer:
    """
    Builds ProductDetail objects.

    Pricing and media services are injected; by default they come from the
    CATALOG_PRICING_SERVICE and CATALOG_MEDIA_SERVICE settings.
    """

    def __init__(self, pricing_service=None, media_service=None):
        self.pricing_service = pricing_service or get_pricing_service()
        self.media_service = media_service or get_media_service()

    def compose_detail(self, product_id) -> ProductDetail:
        """
        Build the detail of a published product.

        Raises:
            ProductNotFound: product missing or unpublished
        """
        product = fetch_detail_graph(product_id)

        detail = ProductDetail(
            id=product.id,
            name=product.name,
            slug=product.slug,
            normalized_name=product.normalized_name,
            calculated_product_price=self.pricing_service.calculate_product_price(product),
            is_call_for_pricing=product.is_call_for_pricing,
            is_allow_to_order=product.is_allow_to_order,
            stock_quantity=product.stock_quantity,
            short_description=product.short_description,
            description=product.description,
            specification=product.specification,
            reviews_count=product.reviews_count,
            rating_average=product.rating_average,
            thumbnail_url=self.media_service.get_thumbnail_url(product.thumbnail_image),
            attributes=[
                ProductDetailAttribute(name=value.attribute.name, value=value.value)
                for value in product.attribute_values.all()
            ],
            categories=[
                ProductDetailCategory(
                    id=membership.category_id,
                    name=membership.category.name,
                    slug=membership.category.slug,
                )
                for membership in product.product_categories.all()
            ],
        )

        detail.variations = resolve_variants(product.id, self.pricing_service)
        detail.related_products, detail.cross_sell_products = classify_links(
            product.product_links.all(), self.pricing_service, self.media_service
        )
        detail.images = [
            MediaViewModel(
                url=self.media_service.get_media_url(product_media.media),
                thumbnail_url=self.media_service.get_thumbnail_url(product_media.media),
            )
            for product_media in product.medias.all()
            if product_media.media.media_type == MediaType.IMAGE
        ]

        logger.debug(
            "Built detail for product %s: %d variations, %d related, %d cross-sell, %d images",
            product.id, len(detail.variations), len(detail.related_products),
            len(detail.cross_sell_products), len(detail.images),
        )

        notify_viewed(product.id, ENTITY_TYPE_PRODUCT)
        return detail


def get_product_detail(product_id, request=None) -> ProductDetail:
    """Detail of a published product using the configured services."""
    composer = ProductDetailComposer(media_service=get_media_service(request))
    return composer.compose_detail(product_id)
