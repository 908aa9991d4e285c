"""
Display-ready structures built for the product detail page.
All of them are plain dataclasses, serialized by apps.catalog.api.serializers.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class CalculatedProductPrice:
    price: Decimal
    old_price: Optional[Decimal] = None
    percent_of_saving: int = 0


@dataclass
class MediaViewModel:
    url: Optional[str]
    thumbnail_url: Optional[str]


@dataclass
class ProductDetailAttribute:
    name: str
    value: str


@dataclass
class ProductDetailCategory:
    id: int
    name: str
    slug: str


@dataclass
class ProductDetailVariationOption:
    option_id: int
    option_name: str
    value: str


@dataclass
class ProductDetailVariation:
    id: int
    name: str
    normalized_name: str
    is_allow_to_order: bool
    is_call_for_pricing: bool
    stock_quantity: int
    calculated_product_price: CalculatedProductPrice
    options: List[ProductDetailVariationOption] = field(default_factory=list)


@dataclass
class ProductThumbnail:
    id: int
    name: str
    slug: str
    normalized_name: str
    is_call_for_pricing: bool
    is_allow_to_order: bool
    stock_quantity: int
    reviews_count: int
    rating_average: Optional[float]
    thumbnail_url: Optional[str] = None
    calculated_product_price: Optional[CalculatedProductPrice] = None

    @classmethod
    def from_product(cls, product):
        return cls(
            id=product.id,
            name=product.name,
            slug=product.slug,
            normalized_name=product.normalized_name,
            is_call_for_pricing=product.is_call_for_pricing,
            is_allow_to_order=product.is_allow_to_order,
            stock_quantity=product.stock_quantity,
            reviews_count=product.reviews_count,
            rating_average=product.rating_average,
        )


@dataclass
class ProductDetail:
    id: int
    name: str
    slug: str
    normalized_name: str
    calculated_product_price: CalculatedProductPrice
    is_call_for_pricing: bool
    is_allow_to_order: bool
    stock_quantity: int
    short_description: str
    description: str
    specification: str
    reviews_count: int
    rating_average: Optional[float]
    thumbnail_url: Optional[str] = None
    attributes: List[ProductDetailAttribute] = field(default_factory=list)
    categories: List[ProductDetailCategory] = field(default_factory=list)
    variations: List[ProductDetailVariation] = field(default_factory=list)
    related_products: List[ProductThumbnail] = field(default_factory=list)
    cross_sell_products: List[ProductThumbnail] = field(default_factory=list)
    images: List[MediaViewModel] = field(default_factory=list)
