class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFound(CatalogError):
    """Product doesn't exist or isn't published."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")
