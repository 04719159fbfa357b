"""
Tests for the severity ledger.

Tests cover:
- Finding rendering with and without detail lines
- Per-severity counters and the exit status
- Header, section rule and summary line
- Color resolution for terminals and redirected output
"""

import io
from unittest.mock import patch

import pytest

from hostvalidate.hv_logging import COLORS
from hostvalidate.ledger import Finding, Severity, SeverityLedger, is_interactive_terminal


class TestSeverity:
    """Tests for Severity labels."""

    @pytest.mark.parametrize("severity,label", [
        (Severity.OK, "[  OK  ]"),
        (Severity.WARN, "[ WARN ]"),
        (Severity.FAIL, "[ FAIL ]"),
        (Severity.INFO, "[ INFO ]"),
    ])
    def test_labels(self, severity, label):
        assert severity.label == label

    def test_labels_share_width(self):
        """Labels should line up in a column."""
        assert len({len(severity.label) for severity in Severity}) == 1


class TestRecord:
    """Tests for recording findings."""

    def test_record_renders_label_and_message(self, ledger, output):
        ledger.ok("mx_dma module loaded")
        assert output.getvalue() == "  [  OK  ] mx_dma module loaded\n"

    def test_record_renders_details_indented(self, ledger, output):
        """Detail lines should be indented under the message text."""
        ledger.ok("CXL region detected", details=["region0  size=64.0GB", "region1  size=0B"])
        lines = output.getvalue().splitlines()
        assert lines == [
            "  [  OK  ] CXL region detected",
            "           region0  size=64.0GB",
            "           region1  size=0B",
        ]

    def test_record_returns_finding(self, ledger):
        finding = ledger.warn("xtop not found in PATH", details=["a"])
        assert finding == Finding(Severity.WARN, "xtop not found in PATH", ("a",))

    def test_finding_is_immutable(self, ledger):
        finding = ledger.info("Kernel        6.8.0")
        with pytest.raises(AttributeError):
            finding.message = "changed"

    def test_empty_message_accepted(self, ledger, output):
        ledger.info("")
        assert output.getvalue() == "  [ INFO ] \n"

    def test_no_details_means_single_line(self, ledger, output):
        ledger.fail("libpxl package not installed", details=[])
        assert output.getvalue().count("\n") == 1

    def test_each_record_is_flushed(self):
        class Stream(io.StringIO):
            flushes = 0

            def flush(self):
                Stream.flushes += 1

        ledger = SeverityLedger(stream=Stream(), use_colors=False)
        ledger.ok("one")
        ledger.ok("two")
        assert Stream.flushes == 2


class TestCounters:
    """Tests for per-severity counters and the exit status."""

    def test_counts_start_at_zero(self, ledger):
        assert ledger.counts == {sev: 0 for sev in Severity}
        assert ledger.total == 0

    def test_each_call_increments_one_counter(self, ledger):
        ledger.ok("a")
        ledger.ok("b")
        ledger.warn("c")
        ledger.info("d")
        assert ledger.ok_count == 2
        assert ledger.warn_count == 1
        assert ledger.fail_count == 0
        assert ledger.info_count == 1
        assert ledger.count(Severity.OK) == 2
        assert ledger.total == 4

    def test_details_do_not_count(self, ledger):
        ledger.ok("devices", details=["[0]", "[1]", "[2]"])
        assert ledger.total == 1

    def test_summarize_zero_without_fail(self, ledger):
        """WARN and INFO findings should not affect the exit status."""
        ledger.warn("a")
        ledger.info("b")
        assert ledger.summarize() == 0

    def test_summarize_one_with_fail(self, ledger):
        ledger.ok("a")
        ledger.fail("b")
        assert ledger.summarize() == 1

    def test_summarize_one_for_many_fails(self, ledger):
        for _ in range(5):
            ledger.fail("x")
        assert ledger.summarize() == 1


class TestTranscript:
    """Tests for uncounted transcript structure."""

    def test_header(self, ledger, output):
        ledger.header("XCENA Host Environment Validation", "2026-01-02 03:04:05")
        assert output.getvalue() == (
            "\n  XCENA Host Environment Validation\n  2026-01-02 03:04:05\n"
        )
        assert ledger.total == 0

    def test_section_rule_padded(self, ledger, output):
        ledger.section("Driver")
        assert output.getvalue() == "\n--- Driver " + "-" * 34 + "\n"

    def test_section_rule_constant_width(self, ledger, output):
        """Rules for titles of different length should end in the same column."""
        ledger.section("Driver")
        ledger.section("System Environment")
        rules = [line for line in output.getvalue().splitlines() if line]
        assert len(rules[0]) == len(rules[1])

    def test_section_long_title_has_no_padding(self, ledger, output):
        ledger.section("x" * 50)
        assert output.getvalue() == "\n--- " + "x" * 50 + " \n"

    def test_summary_line(self, ledger):
        ledger.ok("a")
        ledger.warn("b")
        ledger.fail("c")
        ledger.info("d")
        ledger.info("e")
        assert ledger.summary_line() == "Summary: 1 OK, 1 WARN, 1 FAIL, 2 INFO"

    def test_print_summary(self, ledger, output):
        ledger.print_summary()
        assert output.getvalue() == "\n  Summary: 0 OK, 0 WARN, 0 FAIL, 0 INFO\n\n"


class TestColors:
    """Tests for color resolution."""

    def test_no_escape_codes_when_disabled(self, ledger, output):
        ledger.section("PCI / Hardware")
        ledger.fail("No XCENA PCI device detected (vendor 20a6)", details=["x"])
        assert "\033[" not in output.getvalue()

    def test_colored_label(self):
        output = io.StringIO()
        ledger = SeverityLedger(stream=output, use_colors=True)
        ledger.fail("boom", details=["detail"])
        text = output.getvalue()
        assert f"{COLORS.red.value}[ FAIL ]" in text
        assert f"{COLORS.dim.value}detail{COLORS.normal.value}" in text

    def test_colored_and_plain_text_match(self):
        """Apart from escape codes the transcript should be identical."""
        plain, colored = io.StringIO(), io.StringIO()
        for stream, use_colors in ((plain, False), (colored, True)):
            ledger = SeverityLedger(stream=stream, use_colors=use_colors)
            ledger.section("Driver")
            ledger.ok("mx_dma module loaded", details=["d"])
            ledger.print_summary()
        stripped = colored.getvalue()
        for color in COLORS:
            stripped = stripped.replace(color.value, "")
        assert stripped == plain.getvalue()

    def test_colors_resolved_once_from_stream(self):
        with patch('hostvalidate.ledger.is_interactive_terminal', return_value=True) as mock_tty:
            ledger = SeverityLedger(stream=io.StringIO())
            ledger.ok("a")
            ledger.warn("b")
        assert ledger.use_colors is True
        mock_tty.assert_called_once()

    def test_stringio_is_not_a_terminal(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
        assert is_interactive_terminal(io.StringIO()) is False
