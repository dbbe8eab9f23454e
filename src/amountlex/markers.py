"""Currency marker table.

Detection is driven by an ordered table of CurrencyMarker entries rather
than by per-currency branches. The parser scans every symbol in table order
first, then every alphabetic prefix in table order; the first hit wins.

Currency codes are validated against Unicode CLDR via Babel when a marker
is constructed, so a typo in a marker table fails at import time instead
of silently tagging amounts with a non-existent currency.

Python 3.13+.
"""

from dataclasses import dataclass

from babel.numbers import is_currency

from amountlex.enums import CurrencyCode

__all__ = [
    "DEFAULT_MARKERS",
    "CurrencyMarker",
]


@dataclass(frozen=True, slots=True)
class CurrencyMarker:
    """Textual markers that tag an amount with one currency.

    Attributes:
        code: Currency the markers resolve to
        symbols: Symbols matched anywhere in the input (e.g. "₹", "$")
        prefixes: Alphabetic prefixes matched case-insensitively at the
            start of the input (e.g. "INR"); stored upper-case

    Raises:
        ValueError: If code is unknown to CLDR, no marker text is given,
            or any symbol/prefix is empty
    """

    code: CurrencyCode
    symbols: tuple[str, ...] = ()
    prefixes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not is_currency(str(self.code)):
            msg = f"Unknown ISO 4217 currency code: {self.code!r}"
            raise ValueError(msg)
        if not self.symbols and not self.prefixes:
            msg = f"CurrencyMarker for {self.code} needs at least one symbol or prefix"
            raise ValueError(msg)
        if any(not text for text in (*self.symbols, *self.prefixes)):
            msg = f"CurrencyMarker for {self.code} contains an empty symbol or prefix"
            raise ValueError(msg)
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "prefixes", tuple(p.upper() for p in self.prefixes))

    @property
    def primary(self) -> str:
        """Marker text used when rendering the canonical form.

        First symbol if any, otherwise first prefix followed by a space.
        """
        if self.symbols:
            return self.symbols[0]
        return f"{self.prefixes[0]} "

    def find_symbol(self, text: str) -> tuple[int, str] | None:
        """Locate the first of this marker's symbols present in text.

        Returns:
            (index, symbol) of the leftmost occurrence of the first matching
            symbol in declaration order, or None
        """
        for symbol in self.symbols:
            index = text.find(symbol)
            if index != -1:
                return (index, symbol)
        return None

    def match_prefix(self, text: str) -> str | None:
        """Return the prefix text starts with (case-insensitive), or None."""
        head = text.upper()
        for prefix in self.prefixes:
            if head.startswith(prefix):
                return prefix
        return None


# Detection order matters: Rupee before Dollar, symbols before prefixes,
# "Rs." before "Rs" so the abbreviation dot goes with the marker.
DEFAULT_MARKERS: tuple[CurrencyMarker, ...] = (
    CurrencyMarker(CurrencyCode.INR, symbols=("₹", "Rs.", "Rs"), prefixes=("INR",)),
    CurrencyMarker(CurrencyCode.USD, symbols=("$",), prefixes=("USD",)),
)
