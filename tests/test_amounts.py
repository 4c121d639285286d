"""Unit tests for amount parsing, paise conversion and receipts."""

import pytest

from vitalimes.services.payment.amounts import build_receipt, parse_amount, to_major_units, to_minor_units
from vitalimes.services.payment.errors import InvalidAmountError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(100, 100.0), ("499.99", 499.99), (" 12.5 ", 12.5), ("1e3", 1000.0), (0.01, 0.01)],
)
def test_parse_amount_accepts_numbers_and_numeric_strings(raw, expected):
    """JSON numbers and numeric strings both parse to rupees."""

    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["abc", "", "   ", None, 0, "0", -1, "-0.5", "nan", float("nan"), float("inf"), "-Infinity", True, [], {}, 10**400],
)
def test_parse_amount_rejects_invalid_input(raw):
    """Non-numeric, non-positive and non-finite values are rejected."""

    with pytest.raises(InvalidAmountError) as excinfo:
        parse_amount(raw)
    assert str(excinfo.value) == "Invalid amount"
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize(
    ("amount", "minor"),
    [(499.99, 49999), (100, 10000), (19.99, 1999), (1.005, 101), (0.015, 2), (0.1 + 0.2, 30), (2.675, 268)],
)
def test_to_minor_units_rounds_half_up(amount, minor):
    """Paise come from the decimal repr, with halves rounded up."""

    assert to_minor_units(amount) == minor


def test_to_minor_units_is_deterministic():
    """Same amount always maps to the same paise value."""

    values = {to_minor_units(parse_amount("333.335")) for _ in range(50)}
    assert values == {33334}


@pytest.mark.parametrize("amount", [0.01, 0.015, 1.005, 9.99, 123.456, 499.99, 100000.0])
def test_minor_units_round_trip_within_one_paisa(amount):
    """Converting back to rupees stays within one paisa of the input."""

    minor = to_minor_units(amount)
    assert isinstance(minor, int) and minor >= 0
    assert abs(to_major_units(minor) - amount) <= 0.01


def test_build_receipt_uses_prefix_and_epoch_millis():
    """Receipt is `<prefix>-<millis>` from the injected clock."""

    assert build_receipt("VTL", clock=lambda: 1_700_000_000.5) == "VTL-1700000000500"
    assert build_receipt("SHOP", clock=lambda: 2.0) == "SHOP-2000"


@pytest.mark.parametrize("raw", ["1_000", "4_99.99", "0x10", "0b11"])
def test_parse_amount_rejects_separators_and_radix_literals(raw):
    """Digit separators and hex/binary literals are not amounts."""

    with pytest.raises(InvalidAmountError):
        parse_amount(raw)
