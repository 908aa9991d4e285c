from .media import MediaService
from .pricing import ProductPricingService
from .product_detail import ProductDetailComposer, get_product_detail
from .product_graph import fetch_detail_graph
from .related_products import classify_links
from .variants import resolve_variants

__all__ = [
    'MediaService',
    'ProductPricingService',
    'ProductDetailComposer',
    'get_product_detail',
    'fetch_detail_graph',
    'classify_links',
    'resolve_variants',
]
