"""
Tax rates and exempt item categories.

The configuration is an immutable value handed to the pricer, so two
baskets priced under different rules never share state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

# Goods that carry no basic sales tax. Matched against the parsed item
# name exactly, case included.
EXEMPT_CATEGORIES: frozenset[str] = frozenset(
    {
        "book",
        "chocolate bar",
        "box of chocolates",
        "packet of headache pills",
    }
)


@dataclass(frozen=True)
class TaxConfig:
    """Rates applied to every basket item."""

    sales_tax_rate: Decimal = Decimal("0.10")
    import_tax_rate: Decimal = Decimal("0.05")  # import duty
    exempt_categories: frozenset[str] = EXEMPT_CATEGORIES

    def is_exempt(self, name: str) -> bool:
        """Check if an item name is free of basic sales tax."""
        return name in self.exempt_categories

    def rate_for(self, name: str, is_imported: bool) -> Decimal:
        """
        Return the combined rate for an item.

        Import duty applies to every imported item, exempt or not.
        """
        rate = Decimal("0")
        if is_imported:
            rate += self.import_tax_rate
        if not self.is_exempt(name):
            rate += self.sales_tax_rate
        return rate

    def with_exemptions(self, *names: str) -> "TaxConfig":
        """Return a copy that also exempts ``names``."""
        return replace(
            self, exempt_categories=self.exempt_categories | frozenset(names)
        )


DEFAULT_CONFIG = TaxConfig()
