"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Tuple

from shopcart.catalog.models import Product
from shopcart.money import multiply, round_money, sum_money


@dataclass(frozen=True)
class CartLine:
    """
    One product-and-quantity entry in the cart.

    Holds a reference to the catalog product, never a copy, so prices are
    always read live from the catalog. Lines are immutable; the store swaps
    in a new line when the quantity changes.
    """
    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def total_price(self) -> Decimal:
        """Total price for all units."""
        return round_money(multiply(self.product.price, self.quantity))


@dataclass(frozen=True)
class CartView:
    """Read-only snapshot of the cart's lines and total."""
    lines: Tuple[CartLine, ...]
    total: Decimal

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        """Total number of units across all lines."""
        return sum(line.quantity for line in self.lines)

    @classmethod
    def of(cls, lines: Iterable[CartLine]) -> "CartView":
        snapshot = tuple(lines)
        return cls(lines=snapshot, total=sum_money(line.total_price for line in snapshot))

    def to_dict(self) -> dict:
        """JSON-serializable summary, logged with each checkout receipt."""
        return {
            "is_empty": self.is_empty,
            "total_items": self.total_items,
            "items": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product.name,
                    "quantity": line.quantity,
                    "unit_price": str(line.product.price),
                    "total": str(line.total_price),
                }
                for line in self.lines
            ],
            "total": str(self.total),
        }


@dataclass(frozen=True)
class Receipt:
    """What checkout reports: the cart as it was, and when it was cleared."""
    view: CartView
    checked_out_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Decimal:
        return self.view.total
