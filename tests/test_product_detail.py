from dataclasses import asdict

import pytest

from apps.catalog.exceptions import ProductNotFound
from apps.catalog.models import MediaType, Product, ProductLinkType
from apps.catalog.services import ProductDetailComposer, fetch_detail_graph, get_product_detail
from apps.catalog.signals import ENTITY_TYPE_PRODUCT, entity_viewed


pytestmark = pytest.mark.django_db


def test_fetch_detail_graph_missing_product():
    with pytest.raises(ProductNotFound) as exc_info:
        fetch_detail_graph(999)
    assert exc_info.value.product_id == 999


def test_unpublished_product_is_not_found(composer, make_product, link, add_media):
    product = make_product('Rascunho', is_published=False, stock_quantity=5)
    link(product, make_product('Outro'), ProductLinkType.RELATED)
    add_media(product)

    with pytest.raises(ProductNotFound):
        composer.compose_detail(product.id)


def test_scenario_variants_related_and_cross_sell(composer, detail_scenario):
    detail = composer.compose_detail(10)

    assert detail.id == 10
    assert [v.id for v in detail.variations] == [11]
    assert [(o.option_name, o.value) for o in detail.variations[0].options] == [
        ('Color', 'Red'),
        ('Size', 'M'),
    ]
    assert [p.id for p in detail.related_products] == [20]
    assert detail.cross_sell_products == []


def test_scalar_fields(composer, make_product):
    product = make_product(
        'Caneta Nanquim',
        short_description='Ponta 0.3',
        description='Caneta descartável',
        specification='Tinta pigmentada',
        stock_quantity=7,
        is_call_for_pricing=True,
        is_allow_to_order=False,
        reviews_count=4,
        rating_average=4.5,
    )

    detail = composer.compose_detail(product.id)

    assert detail.name == 'Caneta Nanquim'
    assert detail.slug == 'caneta-nanquim'
    assert detail.normalized_name == 'caneta-nanquim'
    assert detail.calculated_product_price.price == product.price
    assert detail.is_call_for_pricing is True
    assert detail.is_allow_to_order is False
    assert detail.stock_quantity == 7
    assert detail.short_description == 'Ponta 0.3'
    assert detail.description == 'Caneta descartável'
    assert detail.specification == 'Tinta pigmentada'
    assert detail.reviews_count == 4
    assert detail.rating_average == 4.5
    assert detail.thumbnail_url is None


def test_attributes_and_categories(composer, categorized_product):
    detail = composer.compose_detail(categorized_product.id)

    # storage order, duplicates kept
    assert [(a.name, a.value) for a in detail.attributes] == [
        ('Marca', 'Acrilex'),
        ('Volume', '37ml'),
        ('Marca', 'Acrilex'),
    ]
    assert [(c.name, c.slug) for c in detail.categories] == [('Tintas', 'tintas')]


def test_only_image_media_in_association_order(composer, make_product, add_media):
    product = make_product('Pincel Chato')
    first = add_media(product, MediaType.IMAGE, display_order=0)
    add_media(product, MediaType.VIDEO, display_order=1, name='demo.mp4')
    third = add_media(product, MediaType.IMAGE, display_order=2)

    detail = composer.compose_detail(product.id)

    assert len(detail.images) == 2
    assert [image.url for image in detail.images] == [f'/media/{first.id}', f'/media/{third.id}']
    assert [image.thumbnail_url for image in detail.images] == [
        f'/thumbs/{first.id}',
        f'/thumbs/{third.id}',
    ]


def test_thumbnail_url_from_thumbnail_image(composer, make_product, add_media):
    product = make_product('Estojo')
    media = add_media(product)
    Product.objects.filter(pk=product.pk).update(thumbnail_image=media)

    detail = composer.compose_detail(product.id)

    assert detail.thumbnail_url == f'/thumbs/{media.id}'


def test_compose_detail_is_idempotent(composer, detail_scenario, add_media):
    add_media(detail_scenario)

    first = composer.compose_detail(detail_scenario.id)
    second = composer.compose_detail(detail_scenario.id)

    assert asdict(first) == asdict(second)


def test_pricing_called_once_per_product(composer, pricing_service, detail_scenario):
    composer.compose_detail(detail_scenario.id)

    # root, variant 11, related 20; unpublished 21 is never priced
    assert sorted(pricing_service.calls) == [10, 11, 20]


def test_graph_is_fetched_once(composer, detail_scenario, add_media, django_assert_max_num_queries):
    add_media(detail_scenario)

    # product + 4 prefetches + variants + their option combinations
    with django_assert_max_num_queries(7):
        composer.compose_detail(detail_scenario.id)


def test_view_notification_sent(composer, detail_scenario):
    received = []

    def on_viewed(sender, entity_id, entity_type_id, **kwargs):
        received.append((entity_id, entity_type_id))

    entity_viewed.connect(on_viewed)
    try:
        composer.compose_detail(detail_scenario.id)
    finally:
        entity_viewed.disconnect(on_viewed)

    assert received == [(10, ENTITY_TYPE_PRODUCT)]


def test_failing_view_receiver_does_not_break_detail(composer, detail_scenario, caplog):
    def broken_receiver(sender, **kwargs):
        raise RuntimeError('analytics down')

    entity_viewed.connect(broken_receiver)
    try:
        detail = composer.compose_detail(detail_scenario.id)
    finally:
        entity_viewed.disconnect(broken_receiver)

    assert detail.id == 10
    assert [v.id for v in detail.variations] == [11]
    assert 'analytics down' in caplog.text


def test_no_notification_for_missing_product(composer):
    received = []

    def on_viewed(sender, **kwargs):
        received.append(kwargs['entity_id'])

    entity_viewed.connect(on_viewed)
    try:
        with pytest.raises(ProductNotFound):
            composer.compose_detail(404)
    finally:
        entity_viewed.disconnect(on_viewed)

    assert received == []


def test_get_product_detail_uses_configured_services(settings, detail_scenario):
    settings.CATALOG_PRICING_SERVICE = 'tests.fakes.FakePricingService'
    settings.CATALOG_MEDIA_SERVICE = 'tests.fakes.FakeMediaService'

    detail = get_product_detail(detail_scenario.id)

    assert detail.id == 10
    assert [p.id for p in detail.related_products] == [20]


def test_composer_defaults_to_configured_services(settings):
    settings.CATALOG_PRICING_SERVICE = 'tests.fakes.FakePricingService'
    settings.CATALOG_MEDIA_SERVICE = 'tests.fakes.FakeMediaService'

    composer = ProductDetailComposer()

    assert type(composer.pricing_service).__name__ == 'FakePricingService'
    assert type(composer.media_service).__name__ == 'FakeMediaService'
