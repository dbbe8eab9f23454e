"""AmountLex - locale-ambiguous currency string parsing for financial exports.

Turns free-text monetary cells ("₹1,23,456.78", "INR 299.00", "$ 25.00")
into a canonical ParsedAmount(value, currency). Parsing never raises:
malformed records become a zero-valued, default-currency fallback so a
batch keeps going after any one bad record.

Public API:
    parse_currency - Parse one monetary string to ParsedAmount
    parse_currencies - Parse many, collecting fallbacks as data
    to_canonical - Render ParsedAmount as marker + ungrouped numeral
    CurrencyParser - Parser with its own default currency and marker table
    CurrencyMarker - Marker table entry (symbols and prefixes for one currency)
    ParsedAmount - Immutable (value, currency) result
    CurrencyCode - Supported currencies (INR, USD)
    FallbackReason - Why a record fell back

Submodules:
    amountlex.parsing - Parser, batch helper and guards
    amountlex.markers - Default marker table, CLDR validation
    amountlex.cli - Command-line front end
"""

from .amount import ParsedAmount
from .enums import CurrencyCode, FallbackReason
from .markers import DEFAULT_MARKERS, CurrencyMarker
from .parsing import (
    CurrencyParser,
    ParseFallback,
    is_parseable_amount,
    is_valid_amount,
    parse_currencies,
    parse_currency,
    to_canonical,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("amountlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_MARKERS",
    "CurrencyCode",
    "CurrencyMarker",
    "CurrencyParser",
    "FallbackReason",
    "ParseFallback",
    "ParsedAmount",
    "__version__",
    "is_parseable_amount",
    "is_valid_amount",
    "parse_currencies",
    "parse_currency",
    "to_canonical",
]
