"""
PXL Library probe: the libpxl package and the pxl_resourced daemon.
"""

from hostvalidate.collectors.software import package_status, service_manager_available, service_state
from hostvalidate.config import PXL_PACKAGE, PXL_SERVICE
from hostvalidate.probes.base import Probe


class PxlLibraryProbe(Probe):
    name = "pxl"
    title = "PXL Library"

    def run(self, ledger, host):
        status = package_status(host, PXL_PACKAGE)
        if not status.installed:
            ledger.fail(f"{PXL_PACKAGE} package not installed")
        else:
            ledger.ok(f"{PXL_PACKAGE} installed (v{status.version or 'unknown'})")

        if not service_manager_available(host):
            ledger.info("systemctl not available, skipping service checks")
            return

        active = service_state(host, PXL_SERVICE, "is-active")
        if active == "active":
            ledger.ok(f"{PXL_SERVICE} service active")
        else:
            ledger.fail(f"{PXL_SERVICE} service not active ({active or 'unknown'})")

        enabled = service_state(host, PXL_SERVICE, "is-enabled")
        if enabled == "enabled":
            ledger.ok(f"{PXL_SERVICE} service enabled")
        else:
            ledger.warn(f"{PXL_SERVICE} service not enabled ({enabled or 'unknown'})")
