"""Tests for the item description parser."""

from decimal import Decimal

import pytest

from receipt_engine.errors import FormatError
from receipt_engine.parser import ParsedItem, is_integer, is_real, parse, parse_many


# ── Well-formed descriptions ─────────────────────────────────────────


def test_parse_plain_item():
    item = parse("1 book at 12.49")
    assert item == ParsedItem(
        quantity=1, name="book", is_imported=False, cost=Decimal("12.49")
    )


def test_parse_multi_word_name():
    item = parse("1 packet of headache pills at 9.75")
    assert item.name == "packet of headache pills"
    assert item.cost == Decimal("9.75")


def test_parse_leading_imported():
    item = parse("1 imported bottle of perfume at 47.50")
    assert item.is_imported is True
    assert item.name == "bottle of perfume"


def test_parse_imported_is_case_insensitive():
    item = parse("1 IMPORTED bottle of perfume at 27.99")
    assert item.is_imported is True
    assert item.name == "bottle of perfume"


def test_parse_imported_mid_name_is_dropped_in_place():
    # Known quirk: the word is removed where it stands, not moved.
    item = parse("1 box of imported chocolates at 11.25")
    assert item.name == "box of chocolates"
    assert item.is_imported is True


def test_parse_only_first_imported_removed():
    item = parse("1 imported imported widget at 5.00")
    assert item.is_imported is True
    assert item.name == "imported widget"


def test_parse_collapses_whitespace():
    item = parse("  2   music\tCD  at 14.99 ")
    assert item.quantity == 2
    assert item.name == "music CD"


def test_parse_signed_quantity():
    assert parse("+3 book at 12.49").quantity == 3


def test_parse_is_deterministic():
    assert parse("1 music CD at 14.99") == parse("1 music CD at 14.99")


# ── Permissive cost handling ─────────────────────────────────────────


def test_cost_with_extra_dots_reads_leading_number():
    assert parse("1 widget at 1.2.3").cost == Decimal("1.2")


def test_cost_with_comma_reads_leading_number():
    assert parse("1 widget at 1,50").cost == Decimal("1")


def test_cost_without_integer_part():
    assert parse("1 widget at .75").cost == Decimal(".75")


# ── Malformed descriptions ───────────────────────────────────────────


@pytest.mark.parametrize(
    "description",
    [
        "book at 12.49",  # missing quantity
        "",
        "1 book 12.49",
        "1 book for 12.49",  # missing "at"
        "one book at 12.49",
        "1.5 book at 12.49",
        "0 book at 12.49",
        "-1 book at 12.49",
        "1 book at twelve",
        "1 book at 1e3",
        "1 book at 0.00",
        "1 book at -5",
        "1 book at --5",
        "1 book at ,",
        "1 imported at 5.00",  # no name left
    ],
)
def test_malformed_descriptions_raise_format_error(description: str):
    with pytest.raises(FormatError):
        parse(description)


def test_missing_at_message():
    with pytest.raises(FormatError, match='missing "at"'):
        parse("1 book for 12.49")


def test_zero_quantity_message():
    with pytest.raises(FormatError, match="Quantity must be greater than 0"):
        parse("0 book at 12.49")


def test_empty_name_message():
    with pytest.raises(FormatError, match="Item name must be supplied"):
        parse("1 Imported at 5.00")


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse("book at 12.49")


# ── Predicates ───────────────────────────────────────────────────────


@pytest.mark.parametrize("text", ["1", "42", "+7", "-3", "007"])
def test_is_integer_accepts(text: str):
    assert is_integer(text)


@pytest.mark.parametrize("text", ["", "1.0", "1a", "+", "1 2", "١"])
def test_is_integer_rejects(text: str):
    assert not is_integer(text)


@pytest.mark.parametrize("text", ["12.49", "1.2.3", "1,000", "--5", ".", ","])
def test_is_real_accepts_loose_numbers(text: str):
    assert is_real(text)


@pytest.mark.parametrize("text", ["", "abc", "1e5", "+1.0", "$1.00", "1.0\n"])
def test_is_real_rejects(text: str):
    assert not is_real(text)


# ── Batches ──────────────────────────────────────────────────────────


def test_parse_many_keeps_order():
    items = parse_many(["1 book at 12.49", "1 music CD at 14.99"])
    assert [i.name for i in items] == ["book", "music CD"]


def test_parse_many_stops_at_first_bad_item():
    with pytest.raises(FormatError):
        parse_many(["1 book at 12.49", "book at 12.49", "1 music CD at 14.99"])
