"""
OS-specific installation hints for the host tools hostvalidate probes.

Public exports:
    INSTALL_INSTRUCTIONS: Dictionary mapping (dependency, system, distro) to install commands
    get_install_instruction: Function to get the appropriate install command
"""

from typing import Optional

from hostvalidate.environment.os_detect import OSInfo


# Installation instructions keyed by (dependency, system, distro_id)
# None values act as wildcards for less-specific lookups
INSTALL_INSTRUCTIONS: dict[tuple[str, Optional[str], Optional[str]], str] = {
    # lspci
    ('pciutils', 'Linux', 'ubuntu'): 'sudo apt-get install pciutils',
    ('pciutils', 'Linux', 'debian'): 'sudo apt-get install pciutils',
    ('pciutils', 'Linux', 'rhel'): 'sudo dnf install pciutils',
    ('pciutils', 'Linux', 'centos'): 'sudo yum install pciutils',
    ('pciutils', 'Linux', 'fedora'): 'sudo dnf install pciutils',
    ('pciutils', 'Linux', None): 'install pciutils',

    # cxl command (shipped with ndctl)
    ('cxl', 'Linux', 'ubuntu'): 'sudo apt-get install cxl',
    ('cxl', 'Linux', 'debian'): 'sudo apt-get install cxl',
    ('cxl', 'Linux', 'rhel'): 'sudo dnf install cxl-cli',
    ('cxl', 'Linux', 'fedora'): 'sudo dnf install cxl-cli',
    ('cxl', 'Linux', None): 'install ndctl/cxl-cli',

    # daxctl
    ('daxctl', 'Linux', 'ubuntu'): 'sudo apt-get install daxctl',
    ('daxctl', 'Linux', 'debian'): 'sudo apt-get install daxctl',
    ('daxctl', 'Linux', 'rhel'): 'sudo dnf install daxctl',
    ('daxctl', 'Linux', 'fedora'): 'sudo dnf install daxctl',
    ('daxctl', 'Linux', None): 'install daxctl',
}


def get_install_instruction(dependency: str, os_info: Optional[OSInfo]) -> str:
    """
    Get the OS-specific installation instruction for a dependency.

    Looks up installation instructions in order of specificity:
    1. (dependency, system, distro_id) - Most specific
    2. (dependency, system, None) - System-specific, any distro
    3. (dependency, None, None) - Generic, any system

    Args:
        dependency: The dependency name ('pciutils', 'cxl', 'daxctl')
        os_info: OSInfo instance with detected OS information, or None

    Returns:
        Installation instruction string appropriate for the OS

    Examples:
        >>> ubuntu = OSInfo(system='Linux', release='', machine='x86_64',
        ...                 distro_id='ubuntu')
        >>> get_install_instruction('daxctl', ubuntu)
        'sudo apt-get install daxctl'
    """
    system = os_info.system if os_info else None
    distro_id = os_info.distro_id if os_info else None

    lookups = [
        (dependency, system, distro_id),
        (dependency, system, None),
        (dependency, None, None),
    ]

    for key in lookups:
        if key in INSTALL_INSTRUCTIONS:
            return INSTALL_INSTRUCTIONS[key]

    return f"install {dependency}"
