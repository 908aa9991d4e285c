from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

import pytest

from apps.catalog.models import Product
from apps.catalog.services import ProductPricingService


NOW = datetime(2024, 5, 10, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def pricing():
    return ProductPricingService(clock=lambda: NOW)


def product(**kwargs):
    kwargs.setdefault('price', Decimal('100.00'))
    return Product(name='Tinta', **kwargs)


def test_regular_price(pricing):
    price = pricing.calculate_product_price(product())

    assert price.price == Decimal('100.00')
    assert price.old_price is None
    assert price.percent_of_saving == 0


def test_old_price_gives_saving(pricing):
    price = pricing.calculate_product_price(product(old_price=Decimal('125.00')))

    assert price.price == Decimal('100.00')
    assert price.old_price == Decimal('125.00')
    assert price.percent_of_saving == 20


def test_old_price_lower_than_price_gives_no_saving(pricing):
    price = pricing.calculate_product_price(product(old_price=Decimal('80.00')))
    assert price.percent_of_saving == 0


def test_active_special_price(pricing):
    price = pricing.calculate_product_price(product(
        special_price=Decimal('75.00'),
        special_price_start=NOW - timedelta(days=1),
        special_price_end=NOW + timedelta(days=1),
    ))

    assert price.price == Decimal('75.00')
    assert price.old_price == Decimal('100.00')
    assert price.percent_of_saving == 25


def test_open_ended_special_price(pricing):
    price = pricing.calculate_product_price(product(special_price=Decimal('90.00')))
    assert price.price == Decimal('90.00')


@pytest.mark.parametrize('start, end', [
    (NOW + timedelta(hours=1), None),
    (None, NOW - timedelta(hours=1)),
])
def test_special_price_outside_window(pricing, start, end):
    price = pricing.calculate_product_price(product(
        special_price=Decimal('50.00'),
        special_price_start=start,
        special_price_end=end,
    ))

    assert price.price == Decimal('100.00')
    assert price.old_price is None
