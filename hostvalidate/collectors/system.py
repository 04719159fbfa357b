"""
System environment facts: OS name, kernel, container status, CPU and memory.
"""

from typing import Optional

import psutil

from hostvalidate.collectors.base import try_stdout
from hostvalidate.collectors.host import HostEnvironment
from hostvalidate.config import CONTAINER_SENTINEL, is_forced_container


def os_pretty_name(host: HostEnvironment) -> str:
    """OS display name from os-release, then ``lsb_release -ds``, else 'unknown'."""
    name = host.os_info.pretty_name
    if name:
        return name
    if host.which("lsb_release"):
        name = try_stdout(host, ["lsb_release", "-ds"]).strip().strip('"')
        if name:
            return name
    return "unknown"


def kernel_release(host: HostEnvironment) -> str:
    return host.os_info.release or "unknown"


def in_container(host: HostEnvironment) -> bool:
    """True when IN_DOCKER=1 or the container sentinel file exists."""
    return is_forced_container(host.environ) or host.exists(CONTAINER_SENTINEL)


def logical_cpu_count() -> Optional[int]:
    return psutil.cpu_count(logical=True)


def total_memory_bytes() -> Optional[int]:
    try:
        return psutil.virtual_memory().total
    except (OSError, RuntimeError):
        return None
