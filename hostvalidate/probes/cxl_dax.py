"""
CXL / DAX probe: tooling, firmware tables, kernel modules, regions and DAX
devices backing the memory expansion.
"""

from hostvalidate.collectors.hardware import loaded_modules
from hostvalidate.collectors.memory import cxl_region_listing, list_dax_devices, parse_cxl_regions
from hostvalidate.config import CEDT_TABLE, CXL_BIN, CXL_MODULE_PREFIX, DAX_DEV_GLOB, DAXCTL_BIN
from hostvalidate.environment import get_install_instruction
from hostvalidate.parsers import is_empty_listing
from hostvalidate.probes.base import Probe


class CxlDaxProbe(Probe):
    name = "cxl_dax"
    title = "CXL / DAX"

    def run(self, ledger, host):
        self._check_tool(ledger, host, CXL_BIN)
        self._check_tool(ledger, host, DAXCTL_BIN)
        self._check_cedt(ledger, host)
        self._check_modules(ledger, host)
        self._check_regions(ledger, host)
        self._check_dax_devices(ledger, host)

    def _check_tool(self, ledger, host, tool):
        if host.which(tool):
            ledger.ok(f"{tool} command found")
        else:
            hint = get_install_instruction(tool, host.os_info)
            ledger.warn(f"{tool} command not found ({hint})")

    def _check_cedt(self, ledger, host):
        if host.is_file(CEDT_TABLE):
            ledger.ok("CEDT ACPI table present")
        else:
            ledger.info("CEDT ACPI table not found")

    def _check_modules(self, ledger, host):
        modules = sorted(m for m in loaded_modules(host) if m.startswith(CXL_MODULE_PREFIX))
        if not modules:
            ledger.warn("No CXL kernel modules loaded")
        else:
            ledger.ok("CXL kernel modules loaded", details=[", ".join(modules)])

    def _check_regions(self, ledger, host):
        raw = cxl_region_listing(host)
        if is_empty_listing(raw):
            ledger.fail(f"No CXL regions found ({CXL_BIN} list -R)")
            return

        regions = parse_cxl_regions(raw) or []
        ledger.ok("CXL region detected", details=[region.describe() for region in regions])

    def _check_dax_devices(self, ledger, host):
        devices = list_dax_devices(host, DAX_DEV_GLOB)
        if not devices:
            ledger.fail(f"No DAX device found ({DAX_DEV_GLOB})")
            return

        ledger.ok("DAX device found", details=[device.describe() for device in devices])
