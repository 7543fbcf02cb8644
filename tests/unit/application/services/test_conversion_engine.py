# nosec B101


import math
from types import MappingProxyType

import pytest

from application.services.conversion_engine import ConversionEngine, format_fixed
from domain.models.price import ConversionRequest


RATES = MappingProxyType({"A": 2.0, "B": 4.0, "ETH": 1645.93, "USD": 1.0})


@pytest.fixture
def engine():
    return ConversionEngine()


def test_convert_uses_usd_pivot(engine):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="10")

    assert engine.convert(request, RATES, None) == "5.000000"


def test_convert_fixes_six_decimals(engine):
    request = ConversionRequest(from_currency="USD", to_currency="ETH", from_amount="100")

    assert engine.convert(request, RATES, None) == "0.060756"


def test_convert_unknown_target_keeps_previous(engine):
    for amount in ["10", "", "abc", "0"]:
        request = ConversionRequest(from_currency="A", to_currency="ZZZ", from_amount=amount)
        assert engine.convert(request, RATES, "1.000000") == "1.000000"


def test_convert_unknown_source_keeps_previous(engine):
    request = ConversionRequest(from_currency="ZZZ", to_currency="B", from_amount="10")

    assert engine.convert(request, RATES, "7.000000") == "7.000000"


def test_convert_missing_currency_keeps_previous(engine):
    assert engine.convert(ConversionRequest(to_currency="B", from_amount="1"), RATES, "x") == "x"
    assert engine.convert(ConversionRequest(from_currency="A", from_amount="1"), RATES, None) is None


def test_convert_empty_amount_never_updates(engine):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="")

    assert engine.convert(request, RATES, None) is None
    assert engine.convert(request, RATES, "3.000000") == "3.000000"


def test_convert_unparsable_amount_keeps_previous(engine):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="abc")

    assert engine.convert(request, RATES, "2.500000") == "2.500000"


@pytest.mark.parametrize("amount", ["\u0661\u0660", "\uff11\uff10", "\u0967"])
def test_convert_non_ascii_digits_keep_previous(engine, amount):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount=amount)

    assert engine.convert(request, RATES, "prev") == "prev"


def test_convert_trailing_garbage_uses_numeric_prefix(engine):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="12abc")

    assert engine.convert(request, RATES, None) == "6.000000"


def test_convert_zero_amount_text_updates(engine):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="0")

    assert engine.convert(request, RATES, "9.000000") == "0.000000"


def test_convert_zero_rate_keeps_previous(engine):
    rates = {"A": 2.0, "Z": 0}
    to_zero = ConversionRequest(from_currency="A", to_currency="Z", from_amount="1")
    from_zero = ConversionRequest(from_currency="Z", to_currency="A", from_amount="1")

    assert engine.convert(to_zero, rates, "p") == "p"
    assert engine.convert(from_zero, rates, "p") == "p"


def test_convert_is_repeatable(engine):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="4")

    assert engine.convert(request, RATES, None) == engine.convert(request, RATES, "junk")


def test_convert_custom_precision():
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="1")

    assert ConversionEngine(decimals=2).convert(request, RATES, None) == "0.50"


# ============================================================================
# TEST: format_fixed()
# ============================================================================

@pytest.mark.parametrize(
    "value, expected",
    [
        (5, "5.000000"),
        (0.1, "0.100000"),
        (1 / 3, "0.333333"),
        (2 / 3, "0.666667"),
        (0.0078125, "0.007813"),
        (-0.0078125, "-0.007813"),
        (-0.0, "0.000000"),
        (123456789.123456789, "123456789.123457"),
        (1e21, "1e+21"),
    ],
)
def test_format_fixed(value, expected):
    assert format_fixed(value) == expected


def test_format_fixed_non_finite():
    assert format_fixed(math.nan) == "NaN"
    assert format_fixed(math.inf) == "Infinity"


# ============================================================================
# TEST: compute()
# ============================================================================

def test_compute_returns_none_when_withheld(engine):
    request = ConversionRequest(from_currency="A", to_currency="ZZZ", from_amount="10")

    assert engine.compute(request, RATES) is None


def test_compute_reports_recomputed_value_even_if_unchanged(engine):
    request = ConversionRequest(from_currency="A", to_currency="B", from_amount="10")

    assert engine.compute(request, RATES) == "5.000000"
    assert engine.convert(request, RATES, "5.000000") == "5.000000"
