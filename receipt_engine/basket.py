"""
Shopping basket and receipt rendering.

A basket collects priced items in the order they are added and renders
them as a receipt::

    1 imported box of chocolates: 10.50
    1 imported bottle of perfume: 54.65
    Sales Taxes: 7.65
    Total: 65.15
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from receipt_engine.calculator import ItemPricer, PricedItem, sum_amounts
from receipt_engine.parser import parse
from receipt_engine.rates import TaxConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Receipt:
    """A rendered basket."""

    header: str
    items: tuple[PricedItem, ...]
    sales_taxes: Decimal
    total: Decimal

    def lines(self) -> list[str]:
        lines = [item.format() for item in self.items]
        lines.append(f"Sales Taxes: {self.sales_taxes:.2f}")
        lines.append(f"Total: {self.total:.2f}")
        return lines

    def format_text(self) -> str:
        """Header line, when there is one, followed by the receipt lines."""
        lines = self.lines()
        if self.header:
            lines.insert(0, self.header)
        return "\n".join(lines)


class ShoppingBasket:
    """Ordered collection of priced items."""

    def __init__(self, config: Optional[TaxConfig] = None) -> None:
        self.pricer = ItemPricer(config)
        self._items: list[PricedItem] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[PricedItem, ...]:
        return tuple(self._items)

    def add_item(
        self,
        name: str,
        cost: Decimal,
        quantity: int = 1,
        is_imported: bool = False,
    ) -> PricedItem:
        """Price an item and append it to the basket."""
        item = self.pricer.price(name, cost, quantity, is_imported)
        self._items.append(item)
        return item

    def add_description(self, description: str) -> PricedItem:
        """Parse a ``[qty] [item name] at [cost]`` line and add it."""
        parsed = parse(description)
        item = self.pricer.price_parsed(parsed)
        self._items.append(item)
        return item

    @property
    def sales_taxes(self) -> Decimal:
        return sum_amounts(i.tax_amount for i in self._items)

    @property
    def total(self) -> Decimal:
        return sum_amounts(i.total_cost for i in self._items)

    def receipt(self, header: str = "") -> Receipt:
        """Snapshot the basket as a receipt."""
        return Receipt(
            header=header,
            items=self.items,
            sales_taxes=self.sales_taxes,
            total=self.total,
        )

    def render_receipt(self) -> str:
        """Item lines followed by the sales tax and grand totals."""
        return "\n".join(self.receipt().lines())


def build_basket(
    descriptions: Iterable[str], config: Optional[TaxConfig] = None
) -> ShoppingBasket:
    """Fill a basket from descriptions; any bad one aborts the lot."""
    basket = ShoppingBasket(config)
    for description in descriptions:
        basket.add_description(description)
    logger.debug("Built basket with %d item(s)", len(basket))
    return basket


def generate_receipt(
    header: str,
    descriptions: Iterable[str],
    config: Optional[TaxConfig] = None,
) -> str:
    """
    Header line followed by the receipt for ``descriptions``.

    The header line is always written, even when blank.
    """
    receipt = build_basket(descriptions, config).receipt(header)
    return "\n".join([header, *receipt.lines()])
