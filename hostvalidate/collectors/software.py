"""
Package database, service manager and the XCENA command-line tools.
"""

from dataclasses import dataclass
from typing import Optional

from hostvalidate.collectors.base import try_run, try_stdout
from hostvalidate.collectors.host import HostEnvironment
from hostvalidate.config import DEVICE_INFO_LABELS, XCENA_CLI_BIN
from hostvalidate.parsers import parse_device_count, parse_labeled_fields


@dataclass
class PackageStatus:
    installed: bool
    version: Optional[str] = None


@dataclass
class XcenaDeviceInfo:
    """Fields of ``xcena_cli device-info <index>`` used in the report."""
    index: int
    target: Optional[str] = None
    bdf: Optional[str] = None
    computable: Optional[str] = None

    def describe(self) -> str:
        return (
            f"[{self.index}] {self.target or 'unknown'}  BDF={self.bdf or 'unknown'}  "
            f"computable={self.computable or 'unknown'}"
        )


# ----------------------------------------------------------------------
# Packages
# ----------------------------------------------------------------------

def package_status(host: HostEnvironment, package: str) -> PackageStatus:
    """
    Look a package up in the host package database.

    dpkg is used when present (``dpkg -l`` for presence, ``dpkg-query`` for
    the version); rpm-based hosts fall back to ``rpm -q``. A host with
    neither reports the package as not installed.
    """
    if host.which("dpkg"):
        listing = try_stdout(host, ["dpkg", "-l"])
        if not any(package in line for line in listing.splitlines()):
            return PackageStatus(installed=False)
        version = try_stdout(host, ["dpkg-query", "-W", "-f=${Version}", package]).strip()
        return PackageStatus(installed=True, version=version or None)

    if host.which("rpm"):
        result = try_run(host, ["rpm", "-q", "--queryformat", "%{VERSION}-%{RELEASE}", package])
        if result is None or not result.succeeded:
            return PackageStatus(installed=False)
        return PackageStatus(installed=True, version=result.stdout.strip() or None)

    host.logger.debug("Neither dpkg nor rpm found; cannot query packages")
    return PackageStatus(installed=False)


# ----------------------------------------------------------------------
# Services
# ----------------------------------------------------------------------

def service_manager_available(host: HostEnvironment) -> bool:
    return host.which("systemctl") is not None


def service_state(host: HostEnvironment, service: str, query: str) -> Optional[str]:
    """
    Ask systemd for one state of a service.

    Args:
        host: Host seam.
        service: Unit name, e.g. 'pxl_resourced'.
        query: 'is-active' or 'is-enabled'.

    Returns:
        The state word ('active', 'inactive', 'enabled', ...) or None when
        systemctl printed nothing. The exit code is ignored because systemctl
        exits non-zero for every state but the positive one.
    """
    state = try_stdout(host, ["systemctl", query, service]).strip()
    return state or None


# ----------------------------------------------------------------------
# xcena_cli
# ----------------------------------------------------------------------

def device_count(host: HostEnvironment) -> Optional[int]:
    """Number of devices reported by ``xcena_cli num-device``, None if unknown."""
    return parse_device_count(try_stdout(host, [XCENA_CLI_BIN, "num-device"]))


def device_info_text(host: HostEnvironment, index: int) -> str:
    return try_stdout(host, [XCENA_CLI_BIN, "device-info", str(index)])


def parse_device_info(index: int, text: str) -> Optional[XcenaDeviceInfo]:
    """Device fields from ``device-info`` text, None if no known label is present."""
    target_label, bdf_label, computable_label = DEVICE_INFO_LABELS
    fields = parse_labeled_fields(text, DEVICE_INFO_LABELS)
    if all(value is None for value in fields.values()):
        return None
    return XcenaDeviceInfo(
        index=index,
        target=fields[target_label],
        bdf=fields[bdf_label],
        computable=fields[computable_label],
    )
