from decimal import Decimal

import pytest

from apps.catalog.models import (
    Category,
    Media,
    MediaType,
    Product,
    ProductAttribute,
    ProductAttributeValue,
    ProductCategory,
    ProductLink,
    ProductLinkType,
    ProductMedia,
    ProductOption,
    ProductOptionCombination,
)
from apps.catalog.services import ProductDetailComposer
from tests.fakes import FakeMediaService, FakePricingService


@pytest.fixture
def pricing_service():
    return FakePricingService()


@pytest.fixture
def media_service():
    return FakeMediaService()


@pytest.fixture
def composer(pricing_service, media_service):
    return ProductDetailComposer(pricing_service=pricing_service, media_service=media_service)


@pytest.fixture
def make_product(db):
    def _make_product(name, is_published=True, **kwargs):
        kwargs.setdefault('price', Decimal('10.00'))
        return Product.objects.create(name=name, is_published=is_published, **kwargs)
    return _make_product


@pytest.fixture
def link(db):
    def _link(product, linked_product, link_type):
        return ProductLink.objects.create(
            product=product, linked_product=linked_product, link_type=link_type
        )
    return _link


@pytest.fixture
def add_options(db):
    """Attach option combinations given as (option name, value, sort_index)."""
    def _add_options(variant, *combinations):
        for option_name, value, sort_index in combinations:
            option, _ = ProductOption.objects.get_or_create(name=option_name)
            ProductOptionCombination.objects.create(
                product=variant, option=option, value=value, sort_index=sort_index
            )
    return _add_options


@pytest.fixture
def add_media(db):
    def _add_media(product, media_type=MediaType.IMAGE, display_order=0, name='photo.jpg'):
        media = Media.objects.create(file=f'media/{name}', media_type=media_type)
        ProductMedia.objects.create(product=product, media=media, display_order=display_order)
        return media
    return _add_media


@pytest.fixture
def detail_scenario(make_product, link, add_options):
    """
    Product 10 with:
    - variant 11 (Size=M sort 2, Color=Red sort 1)
    - related product 20 (published)
    - cross-sell product 21 (unpublished)
    """
    parent = make_product('Camiseta', id=10)
    variant = make_product('Camiseta Vermelha M', id=11)
    related = make_product('Bermuda', id=20)
    cross_sell = make_product('Boné', id=21, is_published=False)

    link(parent, variant, ProductLinkType.SUPER)
    add_options(variant, ('Size', 'M', 2), ('Color', 'Red', 1))
    link(parent, related, ProductLinkType.RELATED)
    link(parent, cross_sell, ProductLinkType.CROSS_SELL)
    return parent


@pytest.fixture
def categorized_product(make_product):
    product = make_product('Tinta Acrílica Azul', short_description='Tinta para artesanato')
    pintura = Category.objects.create(name='Pintura', slug='pintura')
    tintas = Category.objects.create(name='Tintas', slug='tintas', parent=pintura)
    ProductCategory.objects.create(product=product, category=tintas)

    marca = ProductAttribute.objects.create(name='Marca')
    volume = ProductAttribute.objects.create(name='Volume')
    ProductAttributeValue.objects.create(product=product, attribute=marca, value='Acrilex')
    ProductAttributeValue.objects.create(product=product, attribute=volume, value='37ml')
    ProductAttributeValue.objects.create(product=product, attribute=marca, value='Acrilex')
    return product
