"""Catalog models - products and their category-specific details."""
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shopcart.money import DEFAULT_CURRENCY, format_money, round_money


class ProductCategory(str, Enum):
    """Product category."""
    ELECTRONICS = "Electronics"
    GROCERY = "Grocery"


class ElectronicsDetails(BaseModel):
    """Electronics carry a warranty."""
    model_config = ConfigDict(frozen=True)

    category: Literal[ProductCategory.ELECTRONICS] = ProductCategory.ELECTRONICS
    warranty_months: int = Field(ge=0)


class GroceryDetails(BaseModel):
    """Groceries carry an expiry date."""
    model_config = ConfigDict(frozen=True)

    category: Literal[ProductCategory.GROCERY] = ProductCategory.GROCERY
    expiry_date: date


ProductDetails = Annotated[
    Union[ElectronicsDetails, GroceryDetails],
    Field(discriminator="category"),
]


class Product(BaseModel):
    """Catalog product. Created once at startup, never mutated."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal
    details: ProductDetails

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        # Strict: catalog prices must parse, never default to zero
        if isinstance(v, bool) or not isinstance(v, (str, int, float, Decimal)):
            raise ValueError(f"price must be a number, got {type(v).__name__}")
        try:
            price = Decimal(str(v)) if isinstance(v, float) else Decimal(v)
        except InvalidOperation:
            raise ValueError(f"price must be a number, got {v!r}")
        if not price.is_finite():
            raise ValueError("price must be finite")
        return price

    @field_validator("price")
    @classmethod
    def check_price(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("price must be non-negative")
        if v != round_money(v):
            raise ValueError("price must have at most 2 decimal places")
        return v

    @property
    def category(self) -> ProductCategory:
        return self.details.category


def electronics(product_id: int, name: str, price, warranty_months: int) -> Product:
    """Shorthand for an Electronics product."""
    return Product(
        id=product_id,
        name=name,
        price=price,
        details=ElectronicsDetails(warranty_months=warranty_months),
    )


def grocery(product_id: int, name: str, price, expiry_date: date) -> Product:
    """Shorthand for a Grocery product."""
    return Product(
        id=product_id,
        name=name,
        price=price,
        details=GroceryDetails(expiry_date=expiry_date),
    )


def display_info(product: Product, currency: str = DEFAULT_CURRENCY) -> str:
    """One-line description of a product, tagged by category."""
    price = format_money(product.price, currency)
    details = product.details
    if isinstance(details, ElectronicsDetails):
        return (
            f"[E] ID: {product.id}, Name: {product.name}, Price: {price}, "
            f"Warranty: {details.warranty_months} months"
        )
    if isinstance(details, GroceryDetails):
        return (
            f"[G] ID: {product.id}, Name: {product.name}, Price: {price}, "
            f"Expiry: {details.expiry_date:%d-%m-%Y}"
        )
    raise TypeError(f"Unsupported product details: {type(details).__name__}")
