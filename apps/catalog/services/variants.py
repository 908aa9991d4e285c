from typing import List

from django.db.models import Prefetch

from apps.catalog.models import Product, ProductLinkType, ProductOptionCombination
from apps.catalog.services.view_models import (
    ProductDetailVariation,
    ProductDetailVariationOption,
)


def get_variants_queryset(parent_id):
    """Published variants of a product, i.e. targets of its SUPER links."""
    return Product.objects.filter(
        linked_product_links__product_id=parent_id,
        linked_product_links__link_type=ProductLinkType.SUPER,
        is_published=True,
    ).distinct().order_by('id').prefetch_related(
        Prefetch(
            'option_combinations',
            queryset=ProductOptionCombination.objects.select_related('option'),
        )
    )


def build_variation(variant, pricing_service) -> ProductDetailVariation:
    variation = ProductDetailVariation(
        id=variant.id,
        name=variant.name,
        normalized_name=variant.normalized_name,
        is_allow_to_order=variant.is_allow_to_order,
        is_call_for_pricing=variant.is_call_for_pricing,
        stock_quantity=variant.stock_quantity,
        calculated_product_price=pricing_service.calculate_product_price(variant),
    )

    # sorted() is stable: equal sort_index keeps the stored order
    combinations = sorted(variant.option_combinations.all(), key=lambda c: c.sort_index)
    for combination in combinations:
        variation.options.append(ProductDetailVariationOption(
            option_id=combination.option_id,
            option_name=combination.option.name,
            value=combination.value,
        ))
    return variation


def resolve_variants(parent_id, pricing_service) -> List[ProductDetailVariation]:
    """
    Published variants of a product with their options.

    Variants keep the order of the query; only options inside a variant
    are sorted, by sort_index.
    """
    return [
        build_variation(variant, pricing_service)
        for variant in get_variants_queryset(parent_id)
    ]
