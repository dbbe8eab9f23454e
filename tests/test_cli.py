"""Tests for the amountlex command-line front end."""

import io
import json

import pytest

from amountlex.cli import main


def _json_lines(output: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in output.splitlines()]


class TestCliOutput:
    """JSON and canonical output modes."""

    def test_json_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        """One JSON object per argument."""
        assert main(["₹1,234.56", "$ 25.00"]) == 0
        assert _json_lines(capsys.readouterr().out) == [
            {"input": "₹1,234.56", "value": 1234.56, "currency": "INR"},
            {"input": "$ 25.00", "value": 25.0, "currency": "USD"},
        ]

    def test_fallback_reason_included(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Fallback records carry their reason."""
        assert main(["invalid"]) == 0
        assert _json_lines(capsys.readouterr().out) == [
            {"input": "invalid", "value": 0.0, "currency": "INR", "fallback": "no_digits"},
        ]

    def test_canonical(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--canonical prints marker plus ungrouped numeral."""
        assert main(["--canonical", "INR 1,23,456.78", "$1,234,567.89"]) == 0
        assert capsys.readouterr().out.splitlines() == ["₹123456.78", "$1234567.89"]

    def test_reads_stdin(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without arguments, records come from stdin, one per line."""
        monkeypatch.setattr("sys.stdin", io.StringIO("₹10,00,000.00\r\n100.50\n"))
        assert main([]) == 0
        values = [row["value"] for row in _json_lines(capsys.readouterr().out)]
        assert values == [1000000.0, 100.5]

    def test_default_currency(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--default-currency changes the tag for unmarked input."""
        assert main(["--default-currency", "USD", "100"]) == 0
        assert _json_lines(capsys.readouterr().out)[0]["currency"] == "USD"

    def test_workers(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--workers keeps output order."""
        records = [f"₹{n}" for n in range(30)]
        assert main(["--workers", "4", *records]) == 0
        values = [row["value"] for row in _json_lines(capsys.readouterr().out)]
        assert values == [float(n) for n in range(30)]


class TestCliExitCodes:
    """Exit status handling."""

    def test_strict_fails_on_fallback(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--strict returns 1 when any record fell back."""
        assert main(["--strict", "₹5", ""]) == 1
        capsys.readouterr()

    def test_strict_passes_clean_batch(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--strict returns 0 when every record parsed."""
        assert main(["--strict", "₹5", "₹0.00"]) == 0
        capsys.readouterr()

    def test_invalid_workers(self) -> None:
        """--workers 0 is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--workers", "0", "₹5"])
        assert exc_info.value.code == 2

    def test_unknown_default_currency(self) -> None:
        """Unsupported currency codes are rejected by argparse."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--default-currency", "EUR", "5"])
        assert exc_info.value.code == 2
