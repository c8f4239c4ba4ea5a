"""Read-only product catalog."""
from typing import Dict, Iterable, Optional, Tuple

from shopcart.logging import get_logger
from .models import Product, ProductCategory

logger = get_logger(__name__)


class ProductCatalog:
    """
    Fixed set of purchasable products.

    Seeded once at construction and read-only afterwards. Lookups never
    raise: an unknown id is reported as None.
    """

    def __init__(self, products: Iterable[Product]):
        by_id: Dict[int, Product] = {}
        for product in products:
            if product.id in by_id:
                raise ValueError(f"Duplicate product id {product.id}")
            by_id[product.id] = product
        self._by_id = by_id
        self._products: Tuple[Product, ...] = tuple(by_id.values())
        logger.debug(f"Catalog seeded with {len(self._products)} products")

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by id, or None if the catalog has no such product."""
        return self._by_id.get(product_id)

    def products(self) -> Tuple[Product, ...]:
        """All products in seed order."""
        return self._products

    def grouped_by_category(self) -> Dict[ProductCategory, Tuple[Product, ...]]:
        """Products grouped by category, categories in first-seen order."""
        groups: Dict[ProductCategory, list] = {}
        for product in self._products:
            groups.setdefault(product.category, []).append(product)
        return {category: tuple(items) for category, items in groups.items()}
