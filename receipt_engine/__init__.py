"""
Receipt Engine
==============

Prices a shopping basket: parses item descriptions, applies sales tax and
import duty, and renders the receipt.

Modules:
    errors          - FormatError / ValidationError and the require() helper
    rates           - Tax rates and exempt item categories
    parser          - "[qty] [item name] at [cost]" description parser
    calculator      - Per-item tax calculation
    basket          - Shopping basket and receipt rendering
    report_generator- Receipt export to CSV/JSON
    cli             - Command-line interface
"""

__version__ = "1.0.0"

from receipt_engine.errors import FormatError, ReceiptError, ValidationError
from receipt_engine.rates import DEFAULT_CONFIG, TaxConfig
from receipt_engine.parser import ParsedItem, parse
from receipt_engine.calculator import ItemPricer, PricedItem, price
from receipt_engine.basket import Receipt, ShoppingBasket, generate_receipt
from receipt_engine.report_generator import ReportGenerator

__all__ = [
    "FormatError",
    "ReceiptError",
    "ValidationError",
    "DEFAULT_CONFIG",
    "TaxConfig",
    "ParsedItem",
    "parse",
    "ItemPricer",
    "PricedItem",
    "price",
    "Receipt",
    "ShoppingBasket",
    "generate_receipt",
    "ReportGenerator",
]
