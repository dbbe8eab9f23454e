"""Shared constants for AmountLex.

Centralized limits and character classes used by the parsing pipeline.
Placing them here avoids circular imports between markers and parsing.

Constants are grouped by domain:
- Input limits: bound the work done per untrusted record
- Numeral alphabet: characters that survive numeral normalization

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_AMOUNT_INPUT_LENGTH",
    # Numeral alphabet
    "ASCII_DIGITS",
    "DECIMAL_POINT",
    "MINUS_SIGN",
    "MINUS_SIGN_VARIANTS",
    "NUMERAL_ALPHABET",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum trimmed input length accepted by the default parser.
# Export cells holding a single amount are a few dozen characters at most;
# anything past this is a mis-split record and falls back.
MAX_AMOUNT_INPUT_LENGTH: int = 256

# ============================================================================
# NUMERAL ALPHABET
# ============================================================================

ASCII_DIGITS: str = "0123456789"

DECIMAL_POINT: str = "."

MINUS_SIGN: str = "-"

# Sign characters folded to MINUS_SIGN before filtering.
# U+2212 MINUS SIGN shows up in HTML statement exports.
MINUS_SIGN_VARIANTS: frozenset[str] = frozenset({"−"})

# Everything else (commas, spaces, letters, stray symbols) is noise.
NUMERAL_ALPHABET: frozenset[str] = frozenset(ASCII_DIGITS + DECIMAL_POINT + MINUS_SIGN)
