"""
Probe implementations for hostvalidate.

This module exports the probe classes and registers them with the
ProbeRegistry in the order they run.
"""

from hostvalidate.probes.base import Probe
from hostvalidate.probes.system import SystemProbe
from hostvalidate.probes.pci import PciProbe
from hostvalidate.probes.driver import DriverProbe
from hostvalidate.probes.cxl_dax import CxlDaxProbe
from hostvalidate.probes.pxl import PxlLibraryProbe
from hostvalidate.probes.cli_tools import CliToolsProbe
from hostvalidate.probes.toolchain import ToolchainProbe
from hostvalidate.registry import ProbeRegistry


def register_probes():
    """Register all probes with the ProbeRegistry in run order.

    This function is called at module import time so the default probe set
    is available to the runner.
    """
    ProbeRegistry.register(
        name=SystemProbe.name,
        probe_class=SystemProbe,
        description="OS, kernel, container status, CPU and memory"
    )
    ProbeRegistry.register(
        name=PciProbe.name,
        probe_class=PciProbe,
        description="XCENA PCI devices (vendor 20a6)"
    )
    ProbeRegistry.register(
        name=DriverProbe.name,
        probe_class=DriverProbe,
        description="mx_dma kernel module and device nodes"
    )
    ProbeRegistry.register(
        name=CxlDaxProbe.name,
        probe_class=CxlDaxProbe,
        description="CXL tooling, modules, regions and DAX devices"
    )
    ProbeRegistry.register(
        name=PxlLibraryProbe.name,
        probe_class=PxlLibraryProbe,
        description="libpxl package and pxl_resourced service"
    )
    ProbeRegistry.register(
        name=CliToolsProbe.name,
        probe_class=CliToolsProbe,
        description="xcena_cli device inventory and xtop"
    )
    ProbeRegistry.register(
        name=ToolchainProbe.name,
        probe_class=ToolchainProbe,
        description="MU library and MU LLVM toolchain"
    )


# Register probes at import time
register_probes()

__all__ = [
    'Probe',
    'SystemProbe',
    'PciProbe',
    'DriverProbe',
    'CxlDaxProbe',
    'PxlLibraryProbe',
    'CliToolsProbe',
    'ToolchainProbe',
    'register_probes',
]
