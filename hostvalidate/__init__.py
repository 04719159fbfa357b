"""
hostvalidate - read-only environment validation for XCENA accelerator hosts.

Runs a fixed sequence of probes (system, PCI, driver, CXL/DAX, PXL library,
CLI tools, MU toolchain), prints a classified transcript and exits with 1
when any probe reports a FAIL finding.
"""

__version__ = "1.0.0"
