"""
Shared helpers for collectors.
"""

from typing import Dict, List, Optional

from hostvalidate.collectors.host import CommandResult, HostEnvironment
from hostvalidate.errors import CollectorError


def try_run(host: HostEnvironment, command: List[str],
            env: Optional[Dict[str, str]] = None) -> Optional[CommandResult]:
    """
    Run a command, absorbing collaborator failures.

    Returns:
        The CommandResult, or None if the command could not be run at all.
        Timeouts are logged as warnings, other failures at debug level.
    """
    try:
        return host.run(command, env=env)
    except CollectorError as e:
        if e.is_timeout:
            host.logger.warning(str(e))
        else:
            host.logger.debug(str(e))
        return None


def try_stdout(host: HostEnvironment, command: List[str],
               env: Optional[Dict[str, str]] = None) -> str:
    """Stdout of a command regardless of its exit code, or '' if it could not run."""
    result = try_run(host, command, env=env)
    if result is None:
        return ""
    return result.stdout
