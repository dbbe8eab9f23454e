"""ParsedAmount value object.

Immutable result of parsing one monetary string. Constructed fresh per
call; carries no identity beyond its two fields.

Python 3.13+.
"""

from dataclasses import dataclass
from decimal import Decimal

from amountlex.enums import CurrencyCode

__all__ = ["ParsedAmount"]


@dataclass(frozen=True, slots=True)
class ParsedAmount:
    """Signed amount and the currency it was tagged with.

    ``value`` is the raw decimal as written, converted to float. No
    minor-unit rounding is applied.

    Attributes:
        value: Signed base-10 quantity
        currency: Detected (or default) currency code
    """

    value: float
    currency: CurrencyCode

    @property
    def canonical_numeral(self) -> str:
        """Ungrouped, marker-free numeral that re-parses to ``value``.

        Uses the shortest round-trip repr, rendered without an exponent so
        that the numeral normalizer sees only digits, sign and point.

        Example:
            >>> ParsedAmount(1234.56, CurrencyCode.INR).canonical_numeral
            '1234.56'
            >>> ParsedAmount(1e16, CurrencyCode.USD).canonical_numeral
            '10000000000000000'
        """
        if self.value == 0:
            return "0"
        numeral = format(Decimal(repr(self.value)), "f")
        if "." in numeral:
            numeral = numeral.rstrip("0").rstrip(".")
        return numeral
