"""Concurrent access tests.

A single CurrencyParser is shared across threads with no locking:
- Concurrent parse() calls on the same and on different inputs
- Consistent results across threads
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from amountlex.amount import ParsedAmount
from amountlex.enums import CurrencyCode
from amountlex.parsing import CurrencyParser, parse_currency


class TestConcurrentParseBasic:
    """Essential thread safety tests that run in every build."""

    def test_concurrent_same_input(self) -> None:
        """Many threads parsing the same string agree."""
        parser = CurrencyParser()
        results: list[ParsedAmount] = []
        lock = threading.Lock()

        def parse() -> None:
            amount = parser.parse("₹10,00,000.00")
            with lock:
                results.append(amount)

        threads = [threading.Thread(target=parse) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [ParsedAmount(1000000.0, CurrencyCode.INR)] * 20

    def test_concurrent_distinct_inputs(self) -> None:
        """Each thread gets the result for its own input."""
        inputs = {f"$ {n:,}.25": float(f"{n}.25") for n in range(0, 200_000, 997)}

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(parse_currency, text): text for text in inputs}
            for future in as_completed(futures):
                text = futures[future]
                assert future.result() == ParsedAmount(inputs[text], CurrencyCode.USD)


@pytest.mark.fuzz
class TestConcurrentParseIntensive:
    """Property-based concurrency tests (fuzz-marked)."""

    @given(texts=st.lists(st.text(max_size=40), min_size=1, max_size=50))
    @settings(max_examples=200, deadline=None)
    def test_threaded_results_match_sequential(self, texts: list[str]) -> None:
        """Parsing on a pool gives the same results as parsing inline."""
        parser = CurrencyParser()
        expected = [parser.parse(text) for text in texts]

        with ThreadPoolExecutor(max_workers=4) as executor:
            actual = list(executor.map(parser.parse, texts))

        assert actual == expected
