from django.utils import timezone

from apps.catalog.services.view_models import CalculatedProductPrice


class ProductPricingService:
    """
    Computes the price shown to customers.

    A special price replaces the regular price while its window is open;
    the regular price is then displayed as the "old" price.
    """

    def __init__(self, clock=timezone.now):
        self.clock = clock

    def is_special_price_active(self, product) -> bool:
        if not product.has_special_price:
            return False
        now = self.clock()
        if product.special_price_start and product.special_price_start > now:
            return False
        if product.special_price_end and product.special_price_end < now:
            return False
        return True

    def calculate_product_price(self, product) -> CalculatedProductPrice:
        price = product.price
        old_price = product.old_price

        if self.is_special_price_active(product):
            old_price = price
            price = product.special_price

        return CalculatedProductPrice(
            price=price,
            old_price=old_price,
            percent_of_saving=self.percent_of_saving(price, old_price),
        )

    @staticmethod
    def percent_of_saving(price, old_price) -> int:
        if not old_price or old_price <= price:
            return 0
        return int(((old_price - price) / old_price) * 100)
