"""Command-line front end: parse monetary strings from arguments or stdin.

Output is one JSON object per record:
    {"input": "₹1,234.56", "value": 1234.56, "currency": "INR"}
Records that fell back also carry "fallback": "<reason>".

Exit codes:
    0: All records parsed (or fallbacks tolerated).
    1: --strict given and at least one record fell back.
    2: Usage error (argparse).

Usage:
    amountlex [--canonical] [--strict] [--default-currency CODE]
              [--workers N] [-v] [VALUE ...]

Python 3.13+.
"""

import argparse
import json
import logging
import sys

from amountlex.enums import CurrencyCode
from amountlex.parsing import CurrencyParser, parse_currencies

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="amountlex",
        description="Parse locale-ambiguous monetary strings into value and currency.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="Monetary strings to parse. Reads one per line from stdin when omitted.",
    )
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="Print the canonical form (marker + ungrouped numeral) instead of JSON.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any record falls back to the default.",
    )
    parser.add_argument(
        "--default-currency",
        choices=[str(code) for code in CurrencyCode],
        default=str(CurrencyCode.INR),
        help="Currency for unmarked and unparseable records (default: %(default)s).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Parse records on a thread pool of this size.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log fallbacks and batch summary to stderr.",
    )
    args = parser.parse_args(argv)
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def _read_stdin() -> list[str]:
    return [line.rstrip("\r\n") for line in sys.stdin]


def main(argv: list[str] | None = None) -> int:
    """Parse the given records and print one result per line."""
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    records = args.values if args.values else _read_stdin()
    parser = CurrencyParser(default_currency=CurrencyCode(args.default_currency))
    amounts, fallbacks = parse_currencies(records, parser=parser, max_workers=args.workers)
    reasons = {fallback.index: fallback.reason for fallback in fallbacks}

    for index, (record, amount) in enumerate(zip(records, amounts, strict=True)):
        if args.canonical:
            print(parser.canonical_form(amount))
            continue
        payload: dict[str, object] = {
            "input": record,
            "value": amount.value,
            "currency": str(amount.currency),
        }
        if index in reasons:
            payload["fallback"] = str(reasons[index])
        print(json.dumps(payload, ensure_ascii=False))

    if args.strict and fallbacks:
        logger.warning("%d of %d records fell back", len(fallbacks), len(records))
        return 1
    return 0
