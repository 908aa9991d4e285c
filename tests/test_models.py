from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from apps.catalog.models import Category, MediaType, Media, Product, ProductLink, ProductLinkType


pytestmark = pytest.mark.django_db


def test_product_slug_and_normalized_name_from_name():
    product = Product.objects.create(name='Tinta Acrílica Fosca')

    assert product.slug == 'tinta-acrilica-fosca'
    assert product.normalized_name == 'tinta-acrilica-fosca'
    assert product.is_published is False


def test_product_keeps_explicit_normalized_name():
    product = Product.objects.create(name='Tinta', normalized_name='tinta-premium')
    assert product.normalized_name == 'tinta-premium'


def test_product_history_is_tracked():
    product = Product.objects.create(name='Tinta')
    product.stock_quantity = 3
    product.save()

    assert product.history.count() == 2


def test_link_type_is_immutable(make_product):
    link = ProductLink.objects.create(
        product=make_product('Tela'),
        linked_product=make_product('Pincel'),
        link_type=ProductLinkType.RELATED,
    )

    link.link_type = ProductLinkType.CROSS_SELL
    with pytest.raises(ValidationError):
        link.save()

    link.refresh_from_db()
    assert link.link_type == ProductLinkType.RELATED


def test_link_type_change_fails_full_clean(make_product, link):
    product_link = link(make_product('Tela'), make_product('Pincel'), ProductLinkType.RELATED)

    product_link.link_type = ProductLinkType.SUPER
    with pytest.raises(ValidationError) as excinfo:
        product_link.full_clean()

    assert 'link_type' in excinfo.value.message_dict


def test_has_special_price():
    assert not Product(name='Tinta').has_special_price
    assert Product(name='Tinta', special_price=Decimal('8.00')).has_special_price


def test_inbound_and_outbound_links(make_product, link):
    parent = make_product('Camiseta')
    variant = make_product('Camiseta P')
    link(parent, variant, ProductLinkType.SUPER)

    assert list(parent.product_links.values_list('linked_product_id', flat=True)) == [variant.id]
    assert list(variant.linked_product_links.values_list('product_id', flat=True)) == [parent.id]


def test_category_full_path_and_unique_slug():
    pintura = Category.objects.create(name='Pintura')
    tintas = Category.objects.create(name='Tintas', parent=pintura)
    duplicate = Category.objects.create(name='Pintura')

    assert tintas.full_path == 'Pintura > Tintas'
    assert tintas.get_ancestors() == [pintura]
    assert duplicate.slug == 'pintura-1'


def test_media_is_image():
    assert Media(media_type=MediaType.IMAGE).is_image
    assert not Media(media_type=MediaType.VIDEO).is_image
