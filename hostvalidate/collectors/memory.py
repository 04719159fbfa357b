"""
CXL regions and DAX devices.

Region and device metadata come from the JSON output of ``cxl list -R`` and
``daxctl list``. When that output does not parse, the metadata is simply
absent; presence of the raw output is still reported to the caller.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from hostvalidate.collectors.base import try_stdout
from hostvalidate.collectors.host import HostEnvironment
from hostvalidate.config import CXL_BIN, DAXCTL_BIN
from hostvalidate.errors import CollectorError
from hostvalidate.formatting import human_size
from hostvalidate.parsers import parse_json_records


@dataclass
class CxlRegion:
    """One CXL region as listed by ``cxl list -R``."""
    name: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    decode_state: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'CxlRegion':
        return cls(
            name=record.get("region"),
            size=record.get("size"),
            type=record.get("type"),
            decode_state=record.get("decode_state"),
        )

    def describe(self) -> str:
        return (
            f"{_text(self.name)}  size={human_size(self.size)}  "
            f"type={_text(self.type)}  state={_text(self.decode_state)}"
        )


@dataclass
class DaxDevice:
    """
    One DAX character device.

    Attributes:
        name: Device name, e.g. 'dax0.0'.
        path: Device node path.
        perm: Octal permission bits, '' if the node could not be stat'ed.
        size: Size in bytes from daxctl, if known.
        mode: Mode from daxctl ('devdax', 'system-ram'), if known.
    """
    name: str
    path: str
    perm: str = ""
    size: Optional[int] = None
    mode: Optional[str] = None

    def describe(self) -> str:
        line = f"{self.name}  perm={self.perm}"
        if self.size not in (None, ""):
            line += f"  size={human_size(self.size)}"
        if self.mode:
            line += f"  mode={self.mode}"
        return line


def _text(value: Any) -> str:
    return "unknown" if value is None else str(value)


def cxl_region_listing(host: HostEnvironment) -> str:
    """Raw ``cxl list -R`` output, '' when the tool is missing or fails to run."""
    if not host.which(CXL_BIN):
        return ""
    return try_stdout(host, [CXL_BIN, "list", "-R"])


def parse_cxl_regions(raw: str) -> Optional[List[CxlRegion]]:
    """Regions from ``cxl list -R`` JSON, or None if the output does not parse."""
    records = parse_json_records(raw)
    if records is None:
        return None
    return [CxlRegion.from_record(record) for record in records]


def daxctl_records(host: HostEnvironment) -> Dict[str, Dict[str, Any]]:
    """``daxctl list`` records keyed by chardev name; empty when unavailable."""
    if not host.which(DAXCTL_BIN):
        return {}
    records = parse_json_records(try_stdout(host, [DAXCTL_BIN, "list"])) or []
    return {
        str(record["chardev"]): record
        for record in records
        if record.get("chardev")
    }


def list_dax_devices(host: HostEnvironment, pattern: str) -> List[DaxDevice]:
    """
    Enumerate DAX device nodes and merge in daxctl metadata.

    Args:
        host: Host seam.
        pattern: Glob for the device nodes, e.g. '/dev/dax*'.

    Returns:
        One DaxDevice per existing node, in glob order.
    """
    paths = [path for path in host.glob(pattern) if host.exists(path)]
    if not paths:
        return []

    records = daxctl_records(host)
    devices = []
    for path in paths:
        name = os.path.basename(path)
        try:
            perm = host.permission_bits(path)
        except CollectorError as e:
            host.logger.debug(str(e))
            perm = ""
        record = records.get(name, {})
        devices.append(DaxDevice(
            name=name,
            path=path,
            perm=perm,
            size=record.get("size"),
            mode=record.get("mode"),
        ))
    return devices
