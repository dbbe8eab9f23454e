"""Currency string parsing for locale-ambiguous financial exports.

API: parse_currency() returns ParsedAmount.
Functions NEVER raise exceptions - failure is the zero-valued fallback.

Pipeline (one linear pass per input):
    1. Normalize: trim surrounding whitespace, stop early on empty input
    2. Detect currency: scan the marker table (symbols, then prefixes)
    3. Normalize numeral: drop the matched marker, then every character
       outside the numeral alphabet (digits, minus, decimal point)
    4. Resolve value: validate the numeral shape and convert to float

Grouping separators are treated as pure noise. Western grouping
(1,234,567.89) and South-Asian lakh/crore grouping (12,34,567.89) only
subdivide an unbroken digit run, so dropping every comma reconstructs the
digits without deciding which convention produced them.

Thread-safe. CurrencyParser instances are immutable after construction.

Python 3.13+.
"""

import math
import re
from collections.abc import Sequence

from amountlex.amount import ParsedAmount
from amountlex.constants import (
    MAX_AMOUNT_INPUT_LENGTH,
    MINUS_SIGN,
    MINUS_SIGN_VARIANTS,
    NUMERAL_ALPHABET,
)
from amountlex.enums import CurrencyCode, FallbackReason
from amountlex.markers import DEFAULT_MARKERS, CurrencyMarker

__all__ = [
    "DEFAULT_CURRENCY",
    "CurrencyParser",
    "parse_currency",
    "to_canonical",
]

DEFAULT_CURRENCY: CurrencyCode = CurrencyCode.INR

# Optional leading minus, then digits with at most one decimal point.
# "5." and ".5" are accepted; "-", ".", "1.2.3" and "1-2" are not.
_NUMERAL_PATTERN: re.Pattern[str] = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

_MINUS_FOLD: dict[int, str] = {ord(variant): MINUS_SIGN for variant in MINUS_SIGN_VARIANTS}


class CurrencyParser:
    """Parse free-text monetary strings into ParsedAmount values.

    Configured once, then used from any number of threads.

    Args:
        default_currency: Currency for unmarked input and for every fallback
        markers: Ordered marker table; must cover default_currency and may
            list each currency only once
        max_length: Longest trimmed input attempted; longer input falls back

    Raises:
        ValueError: If the marker table is inconsistent or max_length < 1

    Example:
        >>> parser = CurrencyParser()
        >>> parser.parse("₹1,23,456.78")
        ParsedAmount(value=123456.78, currency=<CurrencyCode.INR: 'INR'>)
        >>> parser.explain("invalid")
        (ParsedAmount(value=0.0, currency=<CurrencyCode.INR: 'INR'>), <FallbackReason.NO_DIGITS: 'no_digits'>)
    """

    __slots__ = ("_by_code", "_default_currency", "_fallback", "_markers", "_max_length")

    def __init__(
        self,
        *,
        default_currency: CurrencyCode = DEFAULT_CURRENCY,
        markers: Sequence[CurrencyMarker] = DEFAULT_MARKERS,
        max_length: int = MAX_AMOUNT_INPUT_LENGTH,
    ) -> None:
        by_code: dict[CurrencyCode, CurrencyMarker] = {}
        for marker in markers:
            if marker.code in by_code:
                msg = f"Currency {marker.code} appears more than once in the marker table"
                raise ValueError(msg)
            by_code[marker.code] = marker
        if default_currency not in by_code:
            msg = f"Default currency {default_currency} has no marker in the marker table"
            raise ValueError(msg)
        if max_length < 1:
            msg = f"max_length must be positive, got {max_length}"
            raise ValueError(msg)

        self._markers: tuple[CurrencyMarker, ...] = tuple(markers)
        self._by_code = by_code
        self._default_currency = default_currency
        self._fallback = ParsedAmount(0.0, default_currency)
        self._max_length = max_length

    @property
    def default_currency(self) -> CurrencyCode:
        """Currency used for unmarked input and for fallbacks."""
        return self._default_currency

    @property
    def markers(self) -> tuple[CurrencyMarker, ...]:
        """Marker table in detection order."""
        return self._markers

    def parse(self, value: str) -> ParsedAmount:
        """Parse one monetary string. Never raises."""
        return self.explain(value)[0]

    def explain(self, value: str) -> tuple[ParsedAmount, FallbackReason | None]:
        """Parse one monetary string and report why it fell back, if it did.

        Returns:
            Tuple of (amount, reason):
            - amount: Same ParsedAmount that parse() returns
            - reason: FallbackReason, or None when the numeral parsed
        """
        # Runtime defense for untyped callers
        if not isinstance(value, str):
            return (self._fallback, FallbackReason.NOT_A_STRING)

        text = value.strip()
        if not text:
            return (self._fallback, FallbackReason.EMPTY_INPUT)
        if len(text) > self._max_length:
            return (self._fallback, FallbackReason.INPUT_TOO_LONG)

        currency, start, end = self._detect_currency(text)
        numeral = self._normalize_numeral(text[:start] + text[end:])
        return self._resolve_value(numeral, currency)

    def canonical_form(self, amount: ParsedAmount) -> str:
        """Render amount as marker + ungrouped numeral.

        Parsing the result yields an equal ParsedAmount.

        Raises:
            KeyError: If amount.currency has no marker in this parser's table
        """
        return f"{self._by_code[amount.currency].primary}{amount.canonical_numeral}"

    def _detect_currency(self, text: str) -> tuple[CurrencyCode, int, int]:
        """Find the currency marker in text.

        Returns:
            (currency, start, end) where text[start:end] is the matched
            marker; start == end == 0 when nothing matched
        """
        for marker in self._markers:
            found = marker.find_symbol(text)
            if found is not None:
                index, symbol = found
                return (marker.code, index, index + len(symbol))

        for marker in self._markers:
            prefix = marker.match_prefix(text)
            if prefix is not None:
                return (marker.code, 0, len(prefix))

        return (self._default_currency, 0, 0)

    @staticmethod
    def _normalize_numeral(text: str) -> str:
        """Keep digits, minus signs and decimal points in their original order."""
        return "".join(ch for ch in text.translate(_MINUS_FOLD) if ch in NUMERAL_ALPHABET)

    def _resolve_value(
        self, numeral: str, currency: CurrencyCode
    ) -> tuple[ParsedAmount, FallbackReason | None]:
        if not any(ch.isdigit() for ch in numeral):
            return (self._fallback, FallbackReason.NO_DIGITS)
        if _NUMERAL_PATTERN.fullmatch(numeral) is None:
            return (self._fallback, FallbackReason.MALFORMED_NUMERAL)

        amount = float(numeral)
        if not math.isfinite(amount):
            return (self._fallback, FallbackReason.NON_FINITE)

        # Fold -0.0 into 0.0 so "-0" and "0" produce identical results
        parsed = ParsedAmount(amount + 0.0, currency)
        # The canonical form must itself fit within max_length to parse back
        if len(self.canonical_form(parsed)) > self._max_length:
            return (self._fallback, FallbackReason.INPUT_TOO_LONG)
        return (parsed, None)


_default_parser = CurrencyParser()


def parse_currency(value: str) -> ParsedAmount:
    """Parse a monetary string from a financial export.

    Never raises. Unparseable input (empty, malformed, non-string) yields
    ParsedAmount(0.0, INR). Unmarked numerals are tagged INR.

    Args:
        value: Raw cell text, e.g. "₹1,234.56", "INR 1,23,456.78", "$ 123.45"

    Returns:
        ParsedAmount with a finite value

    Examples:
        >>> parse_currency("$1,234,567.89")
        ParsedAmount(value=1234567.89, currency=<CurrencyCode.USD: 'USD'>)
        >>> parse_currency("₹-100.50").value
        -100.5
        >>> parse_currency("100.50").currency
        <CurrencyCode.INR: 'INR'>
        >>> parse_currency("")
        ParsedAmount(value=0.0, currency=<CurrencyCode.INR: 'INR'>)

    Thread Safety:
        Thread-safe. Uses an immutable module-level parser.
    """
    return _default_parser.parse(value)


def to_canonical(amount: ParsedAmount) -> str:
    """Render amount in canonical form using the default marker table.

    Example:
        >>> to_canonical(parse_currency("INR 1,23,456.78"))
        '₹123456.78'
    """
    return _default_parser.canonical_form(amount)
