from typing import Iterable, List, Tuple

from apps.catalog.models import ProductLink, ProductLinkType
from apps.catalog.services.view_models import ProductThumbnail


def build_thumbnail(product, pricing_service, media_service) -> ProductThumbnail:
    thumbnail = ProductThumbnail.from_product(product)
    thumbnail.thumbnail_url = media_service.get_thumbnail_url(product.thumbnail_image)
    thumbnail.calculated_product_price = pricing_service.calculate_product_price(product)
    return thumbnail


def classify_links(
    product_links: Iterable[ProductLink],
    pricing_service,
    media_service,
) -> Tuple[List[ProductThumbnail], List[ProductThumbnail]]:
    """
    Split outbound links into related and cross-sell thumbnails.

    Links are visited in stored order. Unpublished targets and SUPER links
    are skipped. A target reached by two links is listed twice, once per link.

    Returns:
        (related_products, cross_sell_products)
    """
    related = []
    cross_sell = []

    for link in product_links:
        linked_product = link.linked_product
        if not linked_product.is_published:
            continue

        if link.link_type == ProductLinkType.RELATED:
            bucket = related
        elif link.link_type == ProductLinkType.CROSS_SELL:
            bucket = cross_sell
        else:
            continue

        bucket.append(build_thumbnail(linked_product, pricing_service, media_service))

    return related, cross_sell
