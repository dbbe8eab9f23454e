"""Type guard and shape-check functions for parsed amounts.

parse_currency() deliberately returns the same ParsedAmount for a
legitimate zero ("₹0.00") and for a failed parse ("invalid"). Callers that
need to tell them apart validate the input first with is_parseable_amount().

Provides a TypeIs-based guard so mypy can narrow untyped pipeline values
to ParsedAmount. Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from amountlex.parsing import parse_currency
    >>> from amountlex.parsing.guards import is_parseable_amount
    >>> cell = "₹0.00"
    >>> if is_parseable_amount(cell):
    ...     amount = parse_currency(cell)
"""

import math
from typing import TypeIs

from amountlex.amount import ParsedAmount
from amountlex.enums import CurrencyCode

from .currency import CurrencyParser, _default_parser

__all__ = [
    "is_parseable_amount",
    "is_valid_amount",
]


def is_valid_amount(value: object) -> TypeIs[ParsedAmount]:
    """Type guard: Check value is a ParsedAmount with a finite amount.

    Accepts None (and any other object) and returns False.

    Args:
        value: Candidate result, possibly from untyped code

    Returns:
        True if value is a ParsedAmount with a finite float value
        (bool and int are rejected) and a supported CurrencyCode, False
        otherwise
    """
    return (
        isinstance(value, ParsedAmount)
        and isinstance(value.currency, CurrencyCode)
        and isinstance(value.value, float)
        and math.isfinite(value.value)
    )


def is_parseable_amount(value: str, parser: CurrencyParser | None = None) -> bool:
    """Check whether value parses without reaching the fallback path.

    Args:
        value: Raw cell text
        parser: Parser whose rules apply (default: the module parser)

    Returns:
        True if parsing produces a real numeral, False if it falls back
    """
    _, reason = (parser or _default_parser).explain(value)
    return reason is None
