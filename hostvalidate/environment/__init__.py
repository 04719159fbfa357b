"""
Operating system detection for hostvalidate.

This module provides utilities for detecting the operating system and Linux
distribution, and for producing OS-specific installation hints for the host
tools the probes rely on.

Public exports:
    OSInfo: Data class containing operating system information
    detect_os: Function to detect current OS and distribution
    get_install_instruction: Function to get OS-specific install commands
    INSTALL_INSTRUCTIONS: Dictionary of install commands by OS/dependency
"""

from hostvalidate.environment.os_detect import OSInfo, detect_os
from hostvalidate.environment.install_hints import (
    get_install_instruction,
    INSTALL_INSTRUCTIONS,
)

__all__ = [
    # OS detection
    "OSInfo",
    "detect_os",
    # Install hints
    "get_install_instruction",
    "INSTALL_INSTRUCTIONS",
]
