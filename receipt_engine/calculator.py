"""
Per-item tax calculation.

Handles:
- Basic sales tax with exempt categories
- Import duty on imported goods
- Rounding of the combined tax up to the nearest 0.05
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    ROUND_CEILING,
    ROUND_HALF_UP,
    localcontext,
)
from typing import Iterable, Iterator, Optional

from receipt_engine.errors import ValidationError, require
from receipt_engine.parser import ParsedItem
from receipt_engine.rates import DEFAULT_CONFIG, TaxConfig

logger = logging.getLogger(__name__)

_NICKELS_PER_UNIT = Decimal("20")
_CENT = Decimal("0.01")
# Room for the cents, the x20 scaling and carries when summing.
_EXTRA_DIGITS = 10


@dataclass(frozen=True)
class PricedItem:
    """A basket line with its tax worked out."""

    name: str
    cost: Decimal
    quantity: int
    is_imported: bool
    tax_amount: Decimal
    total_cost: Decimal

    def format(self) -> str:
        """Render as ``<qty> [imported ]<name>: <total>``."""
        parts = [str(self.quantity)]
        # "imported" always leads the name, wherever it was in the input.
        if self.is_imported:
            parts.append("imported")
        parts.append(f"{self.name}:")
        parts.append(f"{self.total_cost:.2f}")
        return " ".join(parts)


def _digits(amount: Decimal) -> int:
    _, digits, exponent = amount.as_tuple()
    return len(digits) + abs(exponent)


@contextmanager
def money_context(*amounts: Decimal) -> Iterator[Context]:
    """
    Decimal context wide enough to work on ``amounts`` without rounding.

    The default 28 digits cannot hold large costs once they are scaled
    and quantized to cents.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, sum(_digits(a) for a in amounts) + _EXTRA_DIGITS)
        yield ctx


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Exact sum of money amounts, in order."""
    amounts = list(amounts)
    with money_context(*amounts):
        return sum(amounts, Decimal("0"))


def round_up_to_nickel(amount: Decimal) -> Decimal:
    """Round up to the next multiple of 0.05."""
    with money_context(amount):
        nickels = (amount * _NICKELS_PER_UNIT).to_integral_value(
            rounding=ROUND_CEILING
        )
        return (nickels / _NICKELS_PER_UNIT).quantize(_CENT)


def _round_total(amount: Decimal) -> Decimal:
    with money_context(amount):
        return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def _to_cost(cost: object) -> Decimal:
    if isinstance(cost, Decimal):
        return cost
    try:
        return Decimal(str(cost))
    except InvalidOperation:
        raise ValidationError(f"Cost is not a number: {cost!r}") from None


class ItemPricer:
    """
    Prices basket items under a fixed tax configuration.

    The combined rate (sales tax plus import duty) is applied first and
    only the resulting tax is rounded, never the two parts on their own.
    Quantity is checked but does not scale the price: each line is
    priced as a single unit.
    """

    def __init__(self, config: Optional[TaxConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def price(
        self,
        name: str,
        cost: Decimal,
        quantity: int = 1,
        is_imported: bool = False,
    ) -> PricedItem:
        require(bool(name), "Item name must be supplied")
        cost = _to_cost(cost)
        # NaN and infinities never count as a positive cost.
        require(cost.is_finite() and cost > 0, "Cost cannot be <= 0")
        require(quantity >= 1, "Quantity cannot be < 1")

        rate = self.config.rate_for(name, is_imported)
        with money_context(cost, rate):
            tax = round_up_to_nickel(cost * rate)
            total = _round_total(cost + tax)
        item = PricedItem(
            name=name,
            cost=cost,
            quantity=quantity,
            is_imported=is_imported,
            tax_amount=tax,
            total_cost=total,
        )
        logger.debug("Priced %r at rate %s: tax %s", name, rate, tax)
        return item

    def price_parsed(self, item: ParsedItem) -> PricedItem:
        return self.price(item.name, item.cost, item.quantity, item.is_imported)


def price(
    name: str,
    cost: Decimal,
    quantity: int = 1,
    is_imported: bool = False,
    config: Optional[TaxConfig] = None,
) -> PricedItem:
    """Price one item; shorthand for ``ItemPricer(config).price(...)``."""
    return ItemPricer(config).price(name, cost, quantity, is_imported)
