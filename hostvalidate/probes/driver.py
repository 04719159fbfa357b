"""
Driver probe: the mx_dma kernel module and its device nodes.
"""

from hostvalidate.collectors.hardware import list_directory, loaded_modules, unreadable_paths
from hostvalidate.config import DRIVER_DEV_DIR, DRIVER_DEV_GLOB, DRIVER_MODULE
from hostvalidate.probes.base import Probe


class DriverProbe(Probe):
    name = "driver"
    title = "Driver"

    def run(self, ledger, host):
        self._check_module(ledger, host)
        self._check_device_dir(ledger, host)
        self._check_permissions(ledger, host)

    def _check_module(self, ledger, host):
        if DRIVER_MODULE in loaded_modules(host):
            ledger.ok(f"{DRIVER_MODULE} module loaded")
        else:
            ledger.fail(f"{DRIVER_MODULE} module not loaded")

    def _check_device_dir(self, ledger, host):
        if not host.is_dir(DRIVER_DEV_DIR):
            ledger.fail(f"{DRIVER_DEV_DIR}/ directory not found")
            return

        if not list_directory(host, DRIVER_DEV_DIR):
            ledger.fail(f"{DRIVER_DEV_DIR}/ is empty")
        else:
            ledger.ok(f"{DRIVER_DEV_DIR}/ devices found")

    def _check_permissions(self, ledger, host):
        # No nodes means the directory check above already reported it
        nodes = [path for path in host.glob(DRIVER_DEV_GLOB) if host.exists(path)]
        if not nodes:
            return

        if unreadable_paths(host, nodes):
            ledger.warn(f"Some {DRIVER_DEV_DIR}/ files are not readable by current user")
        else:
            ledger.ok(f"{DRIVER_DEV_DIR}/ device permissions OK")
