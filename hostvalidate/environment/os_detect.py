"""
OS detection utilities for hostvalidate.

This module provides operating system and Linux distribution detection for
the System Environment report and for OS-specific installation hints.

Public exports:
    OSInfo: Data class containing operating system information
    detect_os: Function to detect current OS and distribution
"""

import platform
from dataclasses import dataclass
from typing import Optional

import distro


@dataclass
class OSInfo:
    """
    Operating system information.

    Attributes:
        system: Operating system type ('Linux', 'Darwin', 'Windows')
        release: OS kernel release version
        machine: Machine architecture ('x86_64', 'aarch64', etc.)
        distro_id: Linux distribution ID ('ubuntu', 'rhel', 'debian', etc.)
        distro_name: Distribution name ('Ubuntu', 'Red Hat Enterprise Linux')
        distro_version: Distribution version ('22.04', '9.3', etc.)
        pretty_name: Human-readable name, e.g. 'Ubuntu 22.04.4 LTS'
    """
    system: str
    release: str
    machine: str
    distro_id: Optional[str] = None
    distro_name: Optional[str] = None
    distro_version: Optional[str] = None
    pretty_name: Optional[str] = None


def detect_os() -> OSInfo:
    """
    Detect the current operating system and Linux distribution.

    Uses the `platform` module for basic OS info and the `distro` package,
    which reads /etc/os-release and falls back to lsb_release, for the Linux
    distribution details.

    Returns:
        OSInfo: Detected operating system information

    Examples:
        >>> info = detect_os()
        >>> info.system
        'Linux'
        >>> info.pretty_name
        'Ubuntu 22.04.4 LTS'
    """
    info = OSInfo(
        system=platform.system(),
        release=platform.release(),
        machine=platform.machine(),
    )

    if info.system == 'Linux':
        info.distro_id = distro.id() or None
        info.distro_name = distro.name() or None
        info.distro_version = distro.version() or None
        info.pretty_name = distro.name(pretty=True) or None

    return info
