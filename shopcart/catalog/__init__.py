"""Catalog package: product models, catalog, and seed data."""
from .models import (
    ProductCategory,
    ElectronicsDetails,
    GroceryDetails,
    Product,
    electronics,
    grocery,
    display_info,
)
from .catalog import ProductCatalog
from .seed import default_catalog, default_products

__all__ = [
    "ProductCategory",
    "ElectronicsDetails",
    "GroceryDetails",
    "Product",
    "electronics",
    "grocery",
    "display_info",
    "ProductCatalog",
    "default_catalog",
    "default_products",
]
