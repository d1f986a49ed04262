"""
Parser for free-text basket item descriptions.

Descriptions follow the grammar ``<qty> <name words...> at <cost>``, with
an optional ``imported`` token anywhere among the name words::

    >>> parse("1 imported bottle of perfume at 47.50")
    ParsedItem(quantity=1, name='bottle of perfume', is_imported=True, cost=Decimal('47.50'))

The ``imported`` token is dropped where it stands and the receipt puts it
back right after the quantity, so "box of imported chocolates" comes out
as "imported box of chocolates".
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from receipt_engine.errors import FormatError, require

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[-+]?[0-9]+")
# Loose on purpose: "1.2.3" and "1,000" both pass.
_REAL_RE = re.compile(r"-*[0-9,.]+")
_LEADING_NUMBER_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)")

IMPORTED_TOKEN = "imported"
COST_KEYWORD = "at"
_FORM = "Expected item in the form [qty] [item name] at [cost]"


@dataclass(frozen=True)
class ParsedItem:
    """A description broken into its parts."""

    quantity: int
    name: str
    is_imported: bool
    cost: Decimal


def is_integer(text: str) -> bool:
    return _INTEGER_RE.fullmatch(text) is not None


def is_real(text: str) -> bool:
    return _REAL_RE.fullmatch(text) is not None


def _to_decimal(text: str) -> Decimal:
    """
    Convert the leading number in ``text``, ignoring whatever follows.

    "1.2.3" reads as 1.2 and "1,50" as 1. Text with no leading number
    reads as zero.
    """
    match = _LEADING_NUMBER_RE.match(text)
    if match is None:
        return Decimal("0")
    return Decimal(match.group(0))


def parse(description: str) -> ParsedItem:
    """
    Parse a single item description.

    Raises FormatError naming the first rule the description breaks.
    """
    pieces = description.split()
    n = len(pieces)

    require(n >= 4, f"{_FORM}: {description!r}", FormatError)
    require(
        pieces[n - 2] == COST_KEYWORD,
        f'{_FORM} -- missing "{COST_KEYWORD}": {description!r}',
        FormatError,
    )
    qty, cost = pieces[0], pieces[n - 1]

    name_words = pieces[1 : n - 2]
    lowered = [w.lower() for w in name_words]
    is_imported = IMPORTED_TOKEN in lowered
    if is_imported:
        del name_words[lowered.index(IMPORTED_TOKEN)]

    require(is_integer(qty), f"Quantity is not an integer: {qty!r}", FormatError)
    quantity = int(qty)
    require(
        quantity > 0, f"Quantity must be greater than 0: {qty!r}", FormatError
    )
    require(is_real(cost), f"Cost is not a number: {cost!r}", FormatError)
    amount = _to_decimal(cost)
    require(amount > 0, f"Cost must be greater than 0: {cost!r}", FormatError)
    require(
        bool(name_words),
        f"Item name must be supplied: {description!r}",
        FormatError,
    )

    item = ParsedItem(
        quantity=quantity,
        name=" ".join(name_words),
        is_imported=is_imported,
        cost=amount,
    )
    logger.debug("Parsed %r -> %s", description, item)
    return item


def parse_many(descriptions: Iterable[str]) -> list[ParsedItem]:
    """Parse descriptions in order; the first bad one aborts the lot."""
    return [parse(d) for d in descriptions]
