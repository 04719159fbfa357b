"""
PCI inventory, kernel modules and device nodes.
"""

from typing import List, Optional

from hostvalidate.collectors.base import try_run, try_stdout
from hostvalidate.collectors.host import HostEnvironment
from hostvalidate.errors import CollectorError


def list_pci_devices(host: HostEnvironment, vendor_id: str) -> Optional[List[str]]:
    """
    List PCI devices of one vendor, one ``lspci -nn`` line per device.

    Args:
        host: Host seam.
        vendor_id: Hex vendor id without the ``0x`` prefix, e.g. '20a6'.

    Returns:
        Device lines (possibly empty), or None if lspci is not available.
    """
    if not host.which("lspci"):
        return None
    result = try_run(host, ["lspci", "-nn", "-d", f"{vendor_id}:"])
    if result is None:
        return None
    return [line for line in result.stdout.splitlines() if line.strip()]


def loaded_modules(host: HostEnvironment) -> List[str]:
    """
    Names of loaded kernel modules as reported by ``lsmod``.

    The first whitespace-separated token of every line is the module name;
    the ``Module Size Used by`` header is skipped. An unavailable lsmod
    yields an empty list.
    """
    modules = []
    for line in try_stdout(host, ["lsmod"]).splitlines():
        tokens = line.split()
        if not tokens or tokens[0] == "Module":
            continue
        modules.append(tokens[0])
    return modules


def list_directory(host: HostEnvironment, path: str) -> Optional[List[str]]:
    """Entries of a directory, or None if it cannot be listed."""
    try:
        return host.listdir(path)
    except CollectorError as e:
        host.logger.debug(str(e))
        return None


def unreadable_paths(host: HostEnvironment, paths: List[str]) -> List[str]:
    """Subset of paths the current user cannot read."""
    return [path for path in paths if not host.is_readable(path)]
