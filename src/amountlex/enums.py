"""Enumerations for AmountLex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so results serialize to JSON
and compare against plain strings without touching ``.value``.

Python 3.13+.
"""

from enum import StrEnum


class CurrencyCode(StrEnum):
    """Supported ISO 4217 currency codes.

    StrEnum provides automatic string conversion: str(CurrencyCode.INR) == "INR"

    Adding a currency means adding a member here and a CurrencyMarker
    entry in amountlex.markers; the parsing pipeline is table-driven.
    """

    INR = "INR"
    """Indian Rupee (symbol: U+20B9 RUPEE SIGN)"""

    USD = "USD"
    """United States Dollar (symbol: $)"""


class FallbackReason(StrEnum):
    """Why a parse produced the zero-valued default-currency fallback.

    StrEnum provides automatic string conversion: str(FallbackReason.NO_DIGITS) == "no_digits"
    """

    NOT_A_STRING = "not_a_string"
    """Input was not a str (untyped caller)"""

    EMPTY_INPUT = "empty_input"
    """Input was empty or whitespace only"""

    INPUT_TOO_LONG = "input_too_long"
    """Trimmed input, or the canonical form of its value, exceeded max_length"""

    NO_DIGITS = "no_digits"
    """Nothing numeric remained after removing markers and noise"""

    MALFORMED_NUMERAL = "malformed_numeral"
    """Repeated decimal points, misplaced or repeated minus sign"""

    NON_FINITE = "non_finite"
    """Digit run too large to represent as a finite float"""


__all__ = [
    "CurrencyCode",
    "FallbackReason",
]
