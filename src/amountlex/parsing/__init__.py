"""Parsing: locale-ambiguous monetary strings to ParsedAmount.

- Functions NEVER raise on bad input - failure is the zero fallback
- Grouping separators are noise; Western and South-Asian grouping both work
- Unmarked numerals default to INR

Public API:
    Parsing Functions:
        parse_currency - Returns ParsedAmount
        parse_currencies - Returns tuple[tuple[ParsedAmount, ...], tuple[ParseFallback, ...]]
        to_canonical - Returns marker + ungrouped numeral

    Configuration:
        CurrencyParser - Parser with its own default currency and marker table

    Guards:
        is_valid_amount - TypeIs guard for finite ParsedAmount
        is_parseable_amount - True when input parses without falling back

Example:
    >>> from amountlex.parsing import parse_currency, is_parseable_amount
    >>> parse_currency("INR 1,23,456.78").value
    123456.78
    >>> is_parseable_amount("invalid")
    False

Python 3.13+.
"""

from .batch import ParseFallback, parse_currencies
from .currency import DEFAULT_CURRENCY, CurrencyParser, parse_currency, to_canonical
from .guards import is_parseable_amount, is_valid_amount

__all__ = [
    # Configuration
    "DEFAULT_CURRENCY",
    "CurrencyParser",
    # Batch
    "ParseFallback",
    # Guards
    "is_parseable_amount",
    "is_valid_amount",
    # Parsing functions
    "parse_currencies",
    "parse_currency",
    "to_canonical",
]
