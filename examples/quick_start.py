#!/usr/bin/env python3
"""
Quick Start Example
===================

Demonstrates building a basket item by item and printing its receipt,
then the one-call generate_receipt() helper.

Usage:
    python examples/quick_start.py
"""

from decimal import Decimal

from receipt_engine.basket import ShoppingBasket, generate_receipt


def main() -> None:
    # Add items directly, already split into their parts
    basket = ShoppingBasket()
    basket.add_item("book", Decimal("12.49"))
    basket.add_item("music CD", Decimal("14.99"))
    basket.add_item("chocolate bar", Decimal("0.85"))
    print(basket.render_receipt())

    # Or hand over raw descriptions
    print("\n--- Imported Goods ---")
    print(
        generate_receipt(
            "Output 2:",
            [
                "1 imported box of chocolates at 10.00",
                "1 imported bottle of perfume at 47.50",
            ],
        )
    )


if __name__ == "__main__":
    main()
