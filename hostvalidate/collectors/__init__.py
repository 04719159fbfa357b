"""
Adapters over the external tools and OS interfaces hostvalidate reads.

Collectors return typed records, raw text or None. Collaborator failures are
absorbed here; classifying the result is left to the probes.

Public exports:
    HostEnvironment: The OS seam every collector goes through
    CommandResult: Captured output of one command
"""

from hostvalidate.collectors.host import CommandResult, HostEnvironment

__all__ = [
    "CommandResult",
    "HostEnvironment",
]
