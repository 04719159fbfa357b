"""
Probe interface definition for hostvalidate.

A probe is one self-contained group of related checks against a single
subsystem. It reads the host through collectors and reports findings to the
ledger; it keeps no state between runs.
"""

from abc import ABC, abstractmethod

from hostvalidate.collectors.host import HostEnvironment
from hostvalidate.ledger import SeverityLedger


class Probe(ABC):
    """Interface for host probes.

    Subclasses set ``name`` (registry key) and ``title`` (section heading)
    and implement ``run``. Every sub-check inside ``run`` resolves to its own
    finding; a missing tool or empty result lowers that finding's severity
    but never stops the remaining sub-checks.

    Example:
        class KernelProbe(Probe):
            name = 'kernel'
            title = 'Kernel'

            def run(self, ledger, host):
                ledger.info(f"Kernel        {host.os_info.release}")
    """

    name: str = ""
    title: str = ""

    @abstractmethod
    def run(self, ledger: SeverityLedger, host: HostEnvironment) -> None:
        """Run every check of this probe once.

        Args:
            ledger: Ledger receiving the findings.
            host: Host seam used for all reads.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
