"""
Fixed locations, tool names and environment settings for hostvalidate.

Everything the probes look at lives here so that a host with a different
layout only needs changes in one place. Environment readers are total:
unset or malformed values fall back to the defaults below.
"""

import enum
import os
from typing import Mapping, Optional


class EXIT_CODE(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


# Run header
REPORT_TITLE = "XCENA Host Environment Validation"
SECTION_WIDTH = 40

# System environment
CONTAINER_ENV_VAR = "IN_DOCKER"
CONTAINER_SENTINEL = "/.dockerenv"

# PCI
PCIE_VENDOR_ID = "20a6"

# Driver
DRIVER_MODULE = "mx_dma"
DRIVER_DEV_DIR = "/dev/mx_dma"
DRIVER_DEV_GLOB = "/dev/mx_dma/mx_dma*"

# CXL / DAX
CXL_BIN = "cxl"
DAXCTL_BIN = "daxctl"
CEDT_TABLE = "/sys/firmware/acpi/tables/CEDT"
CXL_MODULE_PREFIX = "cxl"
DAX_DEV_GLOB = "/dev/dax*"

# PXL library
PXL_PACKAGE = "libpxl"
PXL_SERVICE = "pxl_resourced"

# CLI & tools
XCENA_CLI_BIN = "xcena_cli"
XTOP_BIN = "xtop"
DEVICE_INFO_LABELS = ("Target", "BDF", "Computable")

# MU toolchain
MU_LIBRARY_ROOT = "/usr/local/mu_library"
MU_LIB_PATH = os.path.join(MU_LIBRARY_ROOT, "mu")
MU_ENV_SCRIPT = os.path.join(MU_LIB_PATH, "script", "min_llvm_version_env.sh")
MU_LLVM_ROOT = os.path.join(MU_LIBRARY_ROOT, "mu_llvm")
MU_ENV_VARS = ("XCENA_LLVM_VERSION", "MU_REVISION")

# Runtime settings
LOG_LEVEL_ENV_VAR = "HOSTVALIDATE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
CMD_TIMEOUT_ENV_VAR = "HOSTVALIDATE_CMD_TIMEOUT"
DEFAULT_CMD_TIMEOUT = 30.0


def get_stream_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the stderr log level name requested through the environment."""
    environ = os.environ if environ is None else environ
    value = (environ.get(LOG_LEVEL_ENV_VAR) or "").strip().upper()
    if value in ("CRITICAL", "ERROR", "WARNING", "RESULT", "STATUS", "INFO", "VERBOSE", "DEBUG"):
        return value
    return DEFAULT_LOG_LEVEL


def get_command_timeout(environ: Optional[Mapping[str, str]] = None) -> float:
    """
    Return the per-command timeout in seconds.

    Non-numeric or non-positive values fall back to DEFAULT_CMD_TIMEOUT.
    """
    environ = os.environ if environ is None else environ
    try:
        timeout = float(environ.get(CMD_TIMEOUT_ENV_VAR, DEFAULT_CMD_TIMEOUT))
    except (TypeError, ValueError):
        return DEFAULT_CMD_TIMEOUT
    if timeout <= 0:
        return DEFAULT_CMD_TIMEOUT
    return timeout


def is_forced_container(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when IN_DOCKER is set to a value equal to 1 (e.g. '1' or '01')."""
    environ = os.environ if environ is None else environ
    try:
        return int(environ.get(CONTAINER_ENV_VAR, "0")) == 1
    except (TypeError, ValueError):
        return False
