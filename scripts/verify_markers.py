#!/usr/bin/env python3
"""Verify the default currency marker table against Babel CLDR data.

For every marker in amountlex.markers.DEFAULT_MARKERS, compares the marker's
symbols with the symbols CLDR assigns to the same currency in a sample of
locales where that currency is in everyday use.

Checks:
    1. Structural: A marker's primary symbol that CLDR never uses for its
       currency. The primary symbol is the one canonical forms are written
       with, so it must be the CLDR one.
    2. Aliases: Further marker symbols CLDR does not list (export spellings
       such as "Rs." for INR). Informational, shown only with --verbose.
    3. Coverage gaps: A CLDR symbol for the currency that no marker lists.
       Informational - CLDR symbols such as "US$" may be deliberately
       left out. Shown only with --verbose.

Exit codes:
    0: All checks passed (coverage gaps are warnings, not failures).
    1: Structural errors (primary symbols unknown to CLDR, import failures).

Usage:
    verify_markers.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys

# Locales where each currency is in everyday use
_SAMPLE_LOCALES: dict[str, tuple[str, ...]] = {
    "INR": ("en_IN", "hi_IN", "bn_IN", "ta_IN", "te_IN", "mr_IN", "gu_IN", "kn_IN"),
    "USD": ("en_US", "es_US", "en_IN", "en_GB", "hi_IN"),
}


def _cldr_symbols(code: str) -> set[str]:
    """Collect the symbols CLDR uses for code across the sample locales."""
    from babel.numbers import get_currency_symbol  # noqa: PLC0415

    return {
        get_currency_symbol(code, locale=locale)
        for locale in _SAMPLE_LOCALES.get(code, ("en_US",))
    } - {code}


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the default currency marker table against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show alias symbols and CLDR symbols that no marker lists.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run marker verification checks."""
    args = _parse_args(argv)

    try:
        import babel  # noqa: PLC0415, F401
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from amountlex.markers import DEFAULT_MARKERS  # noqa: PLC0415

    errors: list[str] = []
    aliases: list[str] = []
    gaps: list[str] = []
    for marker in DEFAULT_MARKERS:
        code = str(marker.code)
        known = _cldr_symbols(code)
        if marker.primary not in known:
            errors.append(
                f"{code}: primary symbol {marker.primary!r} not used by CLDR "
                f"(known: {sorted(known)})"
            )
        aliases.extend(
            f"{code}: symbol {symbol!r} is an alias unknown to CLDR"
            for symbol in marker.symbols[1:]
            if symbol not in known
        )
        gaps.extend(
            f"{code}: CLDR symbol {symbol!r} has no marker"
            for symbol in sorted(known - set(marker.symbols))
        )

    for line in errors:
        print(f"[ERROR] {line}")
    if args.verbose:
        for line in aliases:
            print(f"[ALIAS] {line}")
        for line in gaps:
            print(f"[GAP] {line}")

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    print(f"[PASS] {len(DEFAULT_MARKERS)} marker(s) checked, {len(gaps)} coverage gap(s).")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
