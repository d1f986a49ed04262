"""
Error types raised while building a receipt.

Both kinds abort the receipt they belong to; nothing is retried or
partially rendered.
"""

from __future__ import annotations


class ReceiptError(ValueError):
    """Base class for every receipt failure."""


class FormatError(ReceiptError):
    """A description does not follow ``[qty] [item name] at [cost]``."""


class ValidationError(ReceiptError):
    """A value is well-formed but not acceptable (empty name, cost <= 0)."""


def require(
    condition: bool,
    message: str,
    error: type[ReceiptError] = ValidationError,
) -> None:
    """Raise ``error(message)`` unless ``condition`` holds."""
    if not condition:
        raise error(message)
