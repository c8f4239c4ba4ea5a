"""Pytest configuration and fixtures"""
import os
from datetime import date

import pytest

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "WARNING")

from shopcart.cart import CartService, CartStore, ShopContext
from shopcart.catalog import ProductCatalog, electronics, grocery
from shopcart.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings singleton re-reads the environment in every test"""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_products():
    """Small catalog: two electronics, one grocery"""
    return [
        electronics(1, "Laptop", 100, 24),
        electronics(2, "Earbuds", 50, 6),
        grocery(3, "Milk (1L)", "45.50", date(2025, 1, 8)),
    ]


@pytest.fixture
def catalog(sample_products):
    """Catalog over sample products"""
    return ProductCatalog(sample_products)


@pytest.fixture
def store(catalog):
    """Empty cart store"""
    return CartStore(catalog)


@pytest.fixture
def service(catalog):
    """Cart service with an empty cart"""
    return CartService(ShopContext.create(catalog))


class ScriptedConsole:
    """Feeds scripted answers to input() and records everything printed"""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def print(self, line: str) -> None:
        self.lines.append(line)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def console_factory():
    """Build a scripted console from a list of answers"""
    return ScriptedConsole
