"""In-memory cart storage. Owns every cart mutation."""
from dataclasses import replace
from decimal import Decimal
from typing import List, Optional, Tuple

from shopcart.catalog import ProductCatalog
from shopcart.errors import InvalidRequest, NotFound
from shopcart.logging import get_logger
from shopcart.money import sum_money
from .models import CartLine

logger = get_logger(__name__)


class CartStore:
    """
    Ordered list of cart lines backed by a product catalog.

    Invariants:
    - at most one line per product id
    - every line has quantity >= 1
    - total() is recomputed from live catalog prices on every call
    """

    def __init__(self, catalog: ProductCatalog):
        self._catalog = catalog
        self._lines: List[CartLine] = []

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def _find(self, product_id: int) -> Optional[CartLine]:
        return next((line for line in self._lines if line.product_id == product_id), None)

    def add(self, product_id: int, quantity: int) -> CartLine:
        """Add `quantity` units of a product, merging into its existing line."""
        # bool is an int subclass but never a valid quantity
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise InvalidRequest(product_id=product_id, quantity=quantity)

        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise InvalidRequest(product_id=product_id, quantity=quantity)

        for index, existing in enumerate(self._lines):
            if existing.product_id == product_id:
                merged = replace(existing, quantity=existing.quantity + quantity)
                self._lines[index] = merged
                logger.debug(f"Cart line {product_id} now has quantity {merged.quantity}")
                return merged

        line = CartLine(product=product, quantity=quantity)
        self._lines.append(line)
        logger.debug(f"Cart line {product_id} added with quantity {quantity}")
        return line

    def remove(self, product_id: int) -> CartLine:
        """Delete the whole line for a product."""
        line = self._find(product_id)
        if line is None:
            raise NotFound(product_id=product_id)
        self._lines.remove(line)
        logger.debug(f"Cart line {product_id} removed")
        return line

    def lines(self) -> Tuple[CartLine, ...]:
        """Current lines in insertion order."""
        return tuple(self._lines)

    def total(self) -> Decimal:
        """Sum of price x quantity over current lines."""
        return sum_money(line.total_price for line in self._lines)

    def clear(self) -> None:
        """Remove all lines."""
        count = len(self._lines)
        self._lines.clear()
        logger.debug(f"Cart cleared ({count} lines)")
