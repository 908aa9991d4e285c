from django.db.models import Prefetch

from apps.catalog.exceptions import ProductNotFound
from apps.catalog.models import (
    Product,
    ProductAttributeValue,
    ProductCategory,
    ProductLink,
    ProductMedia,
)


def get_detail_queryset():
    """Published products with everything the detail page reads."""
    return Product.objects.filter(is_published=True).select_related(
        'thumbnail_image'
    ).prefetch_related(
        Prefetch(
            'product_categories',
            queryset=ProductCategory.objects.select_related('category'),
        ),
        Prefetch(
            'attribute_values',
            queryset=ProductAttributeValue.objects.select_related('attribute'),
        ),
        Prefetch(
            'product_links',
            queryset=ProductLink.objects.select_related(
                'linked_product', 'linked_product__thumbnail_image'
            ),
        ),
        Prefetch(
            'medias',
            queryset=ProductMedia.objects.select_related('media'),
        ),
    )


def fetch_detail_graph(product_id) -> Product:
    """
    Load a published product and its detail graph in one go.

    Raises:
        ProductNotFound: no product with that id, or it isn't published
    """
    try:
        return get_detail_queryset().get(pk=product_id)
    except Product.DoesNotExist:
        raise ProductNotFound(product_id)
