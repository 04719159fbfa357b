#!/usr/bin/env python3
"""
hostvalidate - Main Entry Point

Runs the full probe set once and exits with 0 when nothing failed and 1 when
at least one check reported FAIL. Takes no arguments.

Usage:
    hostvalidate
    hostvalidate 2>&1 | tee validate.log
"""

import signal
import sys

from hostvalidate.collectors.host import HostEnvironment
from hostvalidate.config import EXIT_CODE, get_command_timeout, get_stream_log_level
from hostvalidate.hv_logging import setup_logging
from hostvalidate.ledger import SeverityLedger
from hostvalidate.runner import ProbeRunner

logger = setup_logging("hostvalidate", stream_log_level=get_stream_log_level())


def signal_handler(sig, frame):
    """Handle SIGINT (Ctrl+C) and SIGTERM."""
    signal_name = signal.Signals(sig).name
    logger.warning(f"Received signal {signal_name} ({sig})")
    sys.exit(EXIT_CODE.INTERRUPTED)


def main() -> int:
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    host = HostEnvironment(logger=logger, timeout=get_command_timeout())
    ledger = SeverityLedger()
    return ProbeRunner(ledger, host, logger=logger).run()


if __name__ == "__main__":
    sys.exit(main())
