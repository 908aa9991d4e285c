"""
Catalog models for the storefront product detail page.

Model Hierarchy:
- Product: Sellable product, published or not
- Category / ProductCategory: Category tree and product membership
- ProductAttribute / ProductAttributeValue: Specification table entries
- ProductOption / ProductOptionCombination: Option values of a variant
- ProductLink: Typed edge between products (variant, related, cross-sell)
- Media / ProductMedia: Uploaded files and product galleries
"""

from .product import Product, ProductCategory
from .category import Category
from .attribute import ProductAttribute, ProductAttributeValue
from .option import ProductOption, ProductOptionCombination
from .link import ProductLink, ProductLinkType
from .media import Media, MediaType, ProductMedia

__all__ = [
    'Product',
    'ProductCategory',
    'Category',
    'ProductAttribute',
    'ProductAttributeValue',
    'ProductOption',
    'ProductOptionCombination',
    'ProductLink',
    'ProductLinkType',
    'Media',
    'MediaType',
    'ProductMedia',
]
