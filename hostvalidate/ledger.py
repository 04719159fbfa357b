"""
Severity ledger for hostvalidate findings.

The ledger is the only shared state of a run. Probes hand it one Finding per
resolved check; it prints the finding with its detail lines and bumps the
matching counter. The exit status is derived from the FAIL counter alone.

Color codes are resolved once, when the ledger is created, from whether the
output stream is an interactive terminal. Redirected output gets empty codes,
so the text is identical apart from escape sequences.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, TextIO, Tuple

from rich.console import Console

from hostvalidate.config import EXIT_CODE, SECTION_WIDTH
from hostvalidate.hv_logging import COLORS

DETAIL_INDENT = " " * 11


class Severity(enum.Enum):
    """Classification of a single finding."""
    OK = "OK"
    WARN = "WARN"
    FAIL = "FAIL"
    INFO = "INFO"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Severity.OK: "[  OK  ]",
    Severity.WARN: "[ WARN ]",
    Severity.FAIL: "[ FAIL ]",
    Severity.INFO: "[ INFO ]",
}

_SEVERITY_COLORS = {
    Severity.OK: COLORS.green,
    Severity.WARN: COLORS.yellow,
    Severity.FAIL: COLORS.red,
    Severity.INFO: COLORS.dim,
}


@dataclass(frozen=True)
class Finding:
    """One classified observation about a single checked condition.

    Attributes:
        severity: OK, WARN, FAIL or INFO.
        message: Main line text.
        details: Auxiliary lines rendered indented beneath the message.
    """
    severity: Severity
    message: str
    details: Tuple[str, ...] = ()


def is_interactive_terminal(stream: Optional[TextIO] = None) -> bool:
    """Detect if a stream is an interactive terminal.

    Args:
        stream: Stream to inspect; defaults to stdout.

    Returns:
        True if output goes to an interactive terminal, False otherwise.
    """
    console = Console(file=stream or sys.stdout)
    return console.is_terminal


class SeverityLedger:
    """Counts findings per severity and renders them to a stream.

    Example:
        >>> ledger = SeverityLedger(use_colors=False)
        >>> _ = ledger.fail("mx_dma module not loaded")
          [ FAIL ] mx_dma module not loaded
        >>> ledger.summarize()
        1
    """

    def __init__(self, stream: Optional[TextIO] = None, use_colors: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stdout
        if use_colors is None:
            use_colors = is_interactive_terminal(self.stream)
        self.use_colors = use_colors

        if use_colors:
            self._colors = {sev: color.value for sev, color in _SEVERITY_COLORS.items()}
            self._bold = COLORS.bold.value
            self._dim = COLORS.dim.value
            self._reset = COLORS.normal.value
        else:
            self._colors = {sev: "" for sev in Severity}
            self._bold = self._dim = self._reset = ""

        self._counts: Dict[Severity, int] = {sev: 0 for sev in Severity}

    # ------------------------------------------------------------------
    # Findings
    # ------------------------------------------------------------------

    def record(self, severity: Severity, message: str,
               details: Optional[Iterable[str]] = None) -> Finding:
        """Print a finding with its detail lines and count it.

        Args:
            severity: Severity of the finding.
            message: Main line text; any string is accepted.
            details: Optional auxiliary lines.

        Returns:
            The immutable Finding that was recorded.
        """
        finding = Finding(
            severity=severity,
            message=str(message),
            details=tuple(str(d) for d in details) if details else (),
        )

        lines = [f"  {self._colors[severity]}{severity.label:<8}{self._reset} {finding.message}"]
        for detail in finding.details:
            lines.append(f"{DETAIL_INDENT}{self._dim}{detail}{self._reset}")
        self._write("\n".join(lines) + "\n")

        self._counts[severity] += 1
        return finding

    def ok(self, message: str, details: Optional[Iterable[str]] = None) -> Finding:
        return self.record(Severity.OK, message, details)

    def warn(self, message: str, details: Optional[Iterable[str]] = None) -> Finding:
        return self.record(Severity.WARN, message, details)

    def fail(self, message: str, details: Optional[Iterable[str]] = None) -> Finding:
        return self.record(Severity.FAIL, message, details)

    def info(self, message: str, details: Optional[Iterable[str]] = None) -> Finding:
        return self.record(Severity.INFO, message, details)

    # ------------------------------------------------------------------
    # Transcript structure (not counted)
    # ------------------------------------------------------------------

    def header(self, title: str, timestamp: str) -> None:
        self._write(f"\n{self._bold}  {title}{self._reset}\n  {timestamp}\n")

    def section(self, title: str) -> None:
        """Print a section rule such as ``--- Driver ------...``."""
        dashes = "-" * max(SECTION_WIDTH - len(title), 0)
        self._write(f"\n{self._bold}--- {title} {self._reset}{self._dim}{dashes}{self._reset}\n")

    def summary_line(self) -> str:
        return (
            f"Summary: {self.ok_count} OK, {self.warn_count} WARN, "
            f"{self.fail_count} FAIL, {self.info_count} INFO"
        )

    def print_summary(self) -> None:
        color = self._colors[Severity.FAIL] if self.fail_count else self._colors[Severity.OK]
        self._write(f"\n  {color}{self.summary_line()}{self._reset}\n\n")

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    def count(self, severity: Severity) -> int:
        return self._counts[severity]

    @property
    def counts(self) -> Dict[Severity, int]:
        return dict(self._counts)

    @property
    def ok_count(self) -> int:
        return self._counts[Severity.OK]

    @property
    def warn_count(self) -> int:
        return self._counts[Severity.WARN]

    @property
    def fail_count(self) -> int:
        return self._counts[Severity.FAIL]

    @property
    def info_count(self) -> int:
        return self._counts[Severity.INFO]

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def summarize(self) -> int:
        """Return the process exit code: 1 if anything failed, else 0."""
        if self.fail_count > 0:
            return int(EXIT_CODE.FAILURE)
        return int(EXIT_CODE.SUCCESS)

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()
