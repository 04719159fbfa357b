"""
CLI & Tools probe: xcena_cli with its device inventory, and xtop.
"""

from hostvalidate.collectors.software import device_count, device_info_text, parse_device_info
from hostvalidate.config import XCENA_CLI_BIN, XTOP_BIN
from hostvalidate.probes.base import Probe


class CliToolsProbe(Probe):
    name = "cli_tools"
    title = "CLI & Tools"

    def run(self, ledger, host):
        if not host.which(XCENA_CLI_BIN):
            ledger.fail(f"{XCENA_CLI_BIN} not found in PATH")
        else:
            ledger.ok(f"{XCENA_CLI_BIN} found")
            self._check_devices(ledger, host)

        if host.which(XTOP_BIN):
            ledger.ok(f"{XTOP_BIN} found")
        else:
            ledger.warn(f"{XTOP_BIN} not found in PATH")

    def _check_devices(self, ledger, host):
        count = device_count(host)
        if not count:
            ledger.info("No devices detected")
            return

        details = []
        failed = []
        for index in range(count):
            text = device_info_text(host, index)
            if not text.strip():
                failed.append(index)
                continue
            info = parse_device_info(index, text)
            if info is not None:
                details.append(info.describe())

        ledger.ok(f"Number of devices : {count}", details=details)
        for index in failed:
            ledger.warn(f"Device {index}: failed to get device-info")
