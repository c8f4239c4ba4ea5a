"""Cart service: add/remove/view/checkout over the store and catalog."""
import json
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from shopcart.catalog import Product, ProductCatalog, ProductCategory, default_catalog
from shopcart.errors import EmptyCart
from shopcart.logging import get_logger
from .models import CartView, Receipt
from .store import CartStore

logger = get_logger(__name__)


@dataclass
class ShopContext:
    """Everything a cart session needs, passed explicitly instead of held globally."""
    catalog: ProductCatalog
    store: CartStore

    @classmethod
    def create(cls, catalog: Optional[ProductCatalog] = None) -> "ShopContext":
        """Context with a fresh, empty cart over `catalog` (default seed if omitted)."""
        catalog = catalog if catalog is not None else default_catalog()
        return cls(catalog=catalog, store=CartStore(catalog))


class CartService:
    """
    Cart operations as seen by the menu.

    State per cart is Empty or NonEmpty:
    - add moves Empty -> NonEmpty
    - removing the last line moves NonEmpty -> Empty
    - checkout moves NonEmpty -> Empty and is rejected from Empty
    """

    def __init__(self, context: ShopContext):
        self.context = context

    @property
    def catalog(self) -> ProductCatalog:
        return self.context.catalog

    @property
    def store(self) -> CartStore:
        return self.context.store

    def list_products(self) -> Dict[ProductCategory, Tuple[Product, ...]]:
        """Catalog grouped by category."""
        return self.catalog.grouped_by_category()

    def add_to_cart(self, product_id: int, quantity: int) -> CartView:
        """Add to cart. Raises InvalidRequest for unknown ids or non-positive quantities."""
        self.store.add(product_id, quantity)
        logger.info(f"Added product {product_id} x{quantity} to cart")
        return self.view_cart()

    def remove_from_cart(self, product_id: int) -> CartView:
        """Remove a whole line. Raises NotFound if the product is not in the cart."""
        self.store.remove(product_id)
        logger.info(f"Removed product {product_id} from cart")
        return self.view_cart()

    def view_cart(self) -> CartView:
        """Snapshot of the cart. Pure read."""
        return CartView.of(list(self.store.lines()))

    def checkout(self) -> Receipt:
        """
        Finalize the cart: report its contents, then empty it.

        The receipt is built before the clear but only handed back after the
        clear has succeeded, so callers see both effects or neither.

        Raises:
            EmptyCart: if there is nothing to check out (cart left unchanged)
        """
        if self.store.is_empty:
            raise EmptyCart()

        receipt = Receipt(view=self.view_cart())
        self.store.clear()
        logger.info(
            f"Checked out {receipt.view.total_items} items, total {receipt.total}"
        )
        logger.debug(f"Receipt: {json.dumps(receipt.view.to_dict())}")
        return receipt
