#!/usr/bin/env python3
"""Currency String Parsing Fuzzer (Atheris).

Targets: amountlex.parsing.currency.CurrencyParser.explain
Asserts the parser's totality contract on arbitrary input:
- never raises
- value is always a finite float
- currency is always a CurrencyCode
- a reported fallback always equals (0.0, default currency)

Patterns mix structured export cells (marker + grouped numeral) with raw
unicode so libFuzzer spends time both inside and outside the happy path.

Usage:
    python fuzz_atheris/fuzz_amount.py [--report-interval N] [libFuzzer args...]

Requires Python 3.13+ and atheris (pip install amountlex[fuzz]).
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from collections import Counter

try:
    import atheris
except ImportError:
    print("ERROR: atheris is not installed. Install with: pip install amountlex[fuzz]",
          file=sys.stderr)
    sys.exit(1)

logging.getLogger("amountlex").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["amountlex"]):
    from amountlex.amount import ParsedAmount
    from amountlex.enums import CurrencyCode
    from amountlex.parsing.currency import CurrencyParser

MARKERS: tuple[str, ...] = ("₹", "₹ ", "$", "$ ", "INR ", "USD", "usd ", "Rs.", "EUR ", "")
SEPARATORS: tuple[str, ...] = (",", ",", ",", " ", ".", "'", "")
SIGNS: tuple[str, ...] = ("", "", "-", "−", "--", "+")

_PARSER = CurrencyParser()
_FALLBACK = ParsedAmount(0.0, _PARSER.default_currency)
_pattern_counts: Counter[str] = Counter()
_report_interval = 10_000


def _structured_cell(fdp: atheris.FuzzedDataProvider) -> str:
    """Marker, sign and a digit run split by arbitrary separators."""
    groups = [
        str(fdp.ConsumeIntInRange(0, 999)) for _ in range(fdp.ConsumeIntInRange(1, 6))
    ]
    separator = SEPARATORS[fdp.ConsumeIntInRange(0, len(SEPARATORS) - 1)]
    numeral = separator.join(groups)
    if fdp.ConsumeBool():
        numeral += f".{fdp.ConsumeIntInRange(0, 99):02d}"
    marker = MARKERS[fdp.ConsumeIntInRange(0, len(MARKERS) - 1)]
    sign = SIGNS[fdp.ConsumeIntInRange(0, len(SIGNS) - 1)]
    return f"{marker}{sign}{numeral}"


def test_one_input(data: bytes) -> None:
    """Atheris entry point: one parse per input."""
    fdp = atheris.FuzzedDataProvider(data)
    if fdp.ConsumeBool():
        pattern = "structured"
        text = _structured_cell(fdp)
    else:
        pattern = "raw_unicode"
        text = fdp.ConsumeUnicode(fdp.ConsumeIntInRange(0, 300))

    amount, reason = _PARSER.explain(text)

    if not math.isfinite(amount.value):
        msg = f"Non-finite value {amount.value!r} for input {text!r}"
        raise AssertionError(msg)
    if not isinstance(amount.currency, CurrencyCode):
        msg = f"Unsupported currency {amount.currency!r} for input {text!r}"
        raise AssertionError(msg)
    if reason is not None and amount != _FALLBACK:
        msg = f"Fallback {reason} returned {amount!r} for input {text!r}"
        raise AssertionError(msg)

    _pattern_counts[f"{pattern}:{'fallback' if reason else 'parsed'}"] += 1
    if _pattern_counts.total() % _report_interval == 0:
        print(f"[amount-fuzz] {dict(_pattern_counts)}", file=sys.stderr)


def main() -> None:
    """Run the fuzzer, passing unrecognized arguments to libFuzzer."""
    global _report_interval  # noqa: PLW0603

    parser = argparse.ArgumentParser(
        description="Currency string parsing fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--report-interval",
        type=int,
        default=10_000,
        help="Print pattern counts every N iterations (default: 10000)",
    )
    args, remaining = parser.parse_known_args()
    _report_interval = args.report_interval

    sys.argv = [sys.argv[0], *remaining]
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
