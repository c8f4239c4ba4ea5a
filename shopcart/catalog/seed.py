"""Default product seed for the console shop."""
from datetime import date, timedelta
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from .catalog import ProductCatalog
from .models import Product, electronics, grocery


def default_products(today: Optional[date] = None) -> List[Product]:
    """
    Build the default product list.

    Grocery expiry dates are relative to `today` (defaults to the current date).
    """
    today = today or date.today()
    return [
        # Electronics
        electronics(1, "Laptop", 45000, 24),
        electronics(2, "Smartphone", 25000, 12),
        electronics(3, "Wireless Earbuds", 3500, 6),
        electronics(4, "Smart Watch", 8000, 12),
        electronics(5, 'LED TV 42"', 32000, 18),
        electronics(6, "Bluetooth Speaker", 2000, 6),
        electronics(7, "Gaming Console", 40000, 24),
        electronics(8, "Digital Camera", 30000, 12),
        # Grocery
        grocery(9, "Rice (1kg)", 60, today + relativedelta(months=6)),
        grocery(10, "Milk (1L)", 45, today + timedelta(days=7)),
        grocery(11, "Eggs (12 pcs)", 70, today + timedelta(days=10)),
        grocery(12, "Atta (5kg)", 210, today + relativedelta(months=4)),
        grocery(13, "Salt (1kg)", 20, today + relativedelta(months=12)),
        grocery(14, "Cooking Oil (1L)", 150, today + relativedelta(months=9)),
        grocery(15, "Sugar (1kg)", 45, today + relativedelta(months=6)),
        grocery(16, "Tea Powder (500g)", 180, today + relativedelta(months=8)),
        grocery(17, "Toor Dal (1kg)", 130, today + relativedelta(months=5)),
    ]


def default_catalog(today: Optional[date] = None) -> ProductCatalog:
    """Catalog seeded with `default_products`."""
    return ProductCatalog(default_products(today))
