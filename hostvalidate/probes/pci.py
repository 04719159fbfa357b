"""
PCI / Hardware probe: is an XCENA card visible on the bus?
"""

from hostvalidate.collectors.hardware import list_pci_devices
from hostvalidate.config import PCIE_VENDOR_ID
from hostvalidate.environment import get_install_instruction
from hostvalidate.probes.base import Probe


class PciProbe(Probe):
    name = "pci"
    title = "PCI / Hardware"

    def __init__(self, vendor_id: str = PCIE_VENDOR_ID):
        self.vendor_id = vendor_id

    def run(self, ledger, host):
        devices = list_pci_devices(host, self.vendor_id)

        if devices is None:
            # Without lspci the card cannot be detected at all
            hint = get_install_instruction("pciutils", host.os_info)
            ledger.fail(f"lspci not found ({hint}), cannot detect XCENA PCI device")
            return

        if not devices:
            ledger.fail(f"No XCENA PCI device detected (vendor {self.vendor_id})")
            return

        ledger.ok("XCENA PCI device detected", details=devices)
