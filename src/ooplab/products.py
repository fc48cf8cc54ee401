"""
Products identified by code, for use in sets and as mapping keys
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set

from rich.console import Console

from .output import make_console

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    """
    A catalog product

    Attributes:
        code: unique product code; the only field used for equality and hashing
        name: display name
        price: unit price
    """
    code: str
    name: str = field(compare=False)
    price: float = field(compare=False)

    def __post_init__(self):
        object.__setattr__(self, "price", float(self.price))

    def __str__(self) -> str:
        return f"{self.name} ({self.code}): {self.price}"


def collect_products(products: Iterable[Product]) -> Set[Product]:
    """
    Build a set of products, deduplicated by code

    When two products share a code the first one inserted is kept.
    """
    result: Set[Product] = set()
    for product in products:
        if product in result:
            logger.debug(f"Skipping duplicate product code {product.code}")
        result.add(product)
    return result


def show_products(products: Iterable[Product], console: Optional[Console] = None) -> None:
    console = console or make_console()
    for product in products:
        console.print(str(product))


def show_stock(stock: Dict[Product, int], console: Optional[Console] = None) -> None:
    """Print one "<product> -> stoc: <n>" line per entry"""
    console = console or make_console()
    for product, quantity in stock.items():
        console.print(f"{product} -> stoc: {quantity}")
