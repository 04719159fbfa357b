"""
Sequential probe runner.
"""

from datetime import datetime
from typing import List, Optional

from hostvalidate.collectors.host import HostEnvironment
from hostvalidate.config import REPORT_TITLE
from hostvalidate.ledger import SeverityLedger
from hostvalidate.probes import Probe
from hostvalidate.registry import ProbeRegistry


class ProbeRunner:
    """
    Runs probes one at a time in a fixed order against a single ledger.

    Args:
        ledger: Ledger receiving every finding of the run.
        host: Host seam handed to each probe.
        probes: Probes to run; the registered set by default.
        logger: Optional logger for progress messages.
    """

    def __init__(self, ledger: SeverityLedger, host: HostEnvironment,
                 probes: Optional[List[Probe]] = None, logger=None):
        self.ledger = ledger
        self.host = host
        self.probes = probes if probes is not None else ProbeRegistry.create_all()
        self.logger = logger or host.logger

    def run(self, timestamp: Optional[str] = None) -> int:
        """
        Run every probe exactly once and print the summary.

        Args:
            timestamp: Header timestamp; the current local time by default.

        Returns:
            Exit code: 1 if any FAIL finding was recorded, else 0.
        """
        if timestamp is None:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        self.ledger.header(REPORT_TITLE, timestamp)

        for probe in self.probes:
            self.logger.debug(f"Running probe: {probe.name}")
            self.ledger.section(probe.title)
            probe.run(self.ledger, self.host)

        self.ledger.print_summary()
        exit_code = self.ledger.summarize()
        self.logger.debug(f"{self.ledger.summary_line()} -> exit code {exit_code}")
        return exit_code
