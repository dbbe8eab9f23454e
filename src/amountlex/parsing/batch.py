"""Batch parsing over a whole export's worth of records.

API: parse_currencies() returns tuple[tuple[ParsedAmount, ...], tuple[ParseFallback, ...]].
Never raises for bad records - each one falls back and is reported in the
second element, so one malformed cell never halts the batch.

Thread-safe. Parsing is pure, so records can be fanned out across a
thread pool with no coordination; output order always matches input order.

Python 3.13+.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from amountlex.amount import ParsedAmount
from amountlex.enums import FallbackReason

from .currency import CurrencyParser, _default_parser

__all__ = [
    "ParseFallback",
    "parse_currencies",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseFallback:
    """One record that produced the fallback amount.

    Attributes:
        index: Position of the record in the input sequence
        input_value: The raw record as received
        reason: Why the record could not be parsed
    """

    index: int
    input_value: object
    reason: FallbackReason


def parse_currencies(
    values: Iterable[str],
    *,
    parser: CurrencyParser | None = None,
    max_workers: int | None = None,
) -> tuple[tuple[ParsedAmount, ...], tuple[ParseFallback, ...]]:
    """Parse many monetary strings, collecting fallbacks as data.

    Args:
        values: Raw cell texts in record order
        parser: Parser to apply (default: the module parser)
        max_workers: Thread pool size; None or 1 parses in the calling thread

    Returns:
        Tuple of (amounts, fallbacks):
        - amounts: One ParsedAmount per input, in input order
        - fallbacks: ParseFallback for every record that fell back

    Raises:
        ValueError: If max_workers is less than 1

    Example:
        >>> amounts, fallbacks = parse_currencies(["₹1,234.56", "n/a", "$5"])
        >>> [a.value for a in amounts]
        [1234.56, 0.0, 5.0]
        >>> [(f.index, str(f.reason)) for f in fallbacks]
        [(1, 'no_digits')]
    """
    if max_workers is not None and max_workers < 1:
        msg = f"max_workers must be at least 1, got {max_workers}"
        raise ValueError(msg)

    active = parser or _default_parser
    records = list(values)

    if max_workers is None or max_workers == 1:
        outcomes = [active.explain(record) for record in records]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(active.explain, records))

    amounts: list[ParsedAmount] = []
    fallbacks: list[ParseFallback] = []
    for index, (record, (amount, reason)) in enumerate(zip(records, outcomes, strict=True)):
        amounts.append(amount)
        if reason is not None:
            fallbacks.append(ParseFallback(index, record, reason))
            logger.debug("Record %d fell back (%s): %r", index, reason, record)

    logger.debug(
        "Parsed %d amounts, %d fell back to %s",
        len(amounts), len(fallbacks), active.default_currency,
    )
    return (tuple(amounts), tuple(fallbacks))
