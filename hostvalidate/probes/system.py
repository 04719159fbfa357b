"""
System Environment probe: purely informational.
"""

from hostvalidate.collectors import system
from hostvalidate.formatting import human_size
from hostvalidate.probes.base import Probe


class SystemProbe(Probe):
    name = "system"
    title = "System Environment"

    def run(self, ledger, host):
        ledger.info(f"OS            {system.os_pretty_name(host)}")
        ledger.info(f"Kernel        {system.kernel_release(host)}")

        if system.in_container(host):
            ledger.info("Environment   Docker")
        else:
            ledger.info("Environment   Native")

        cpus = system.logical_cpu_count()
        if cpus:
            ledger.info(f"CPU           {cpus} logical cores")

        memory = system.total_memory_bytes()
        if memory:
            ledger.info(f"Memory        {human_size(memory)}")
