"""
MU toolchain environment script.
"""

from typing import Dict, Iterable, Optional

from hostvalidate.collectors.base import try_run
from hostvalidate.collectors.host import HostEnvironment


def source_env_script(host: HostEnvironment, script: str,
                      names: Iterable[str]) -> Dict[str, Optional[str]]:
    """
    Source a shell script in a clean bash and read back variables.

    The named variables are removed from the inherited environment first, so
    only values defined by the script itself are reported.

    Args:
        host: Host seam.
        script: Path of the script to source.
        names: Variable names to read after sourcing.

    Returns:
        Mapping of every name to its value, or None when unset or empty.
        All values are None if bash is unavailable or the script cannot run.
    """
    names = list(names)
    values: Dict[str, Optional[str]] = {name: None for name in names}

    if not host.which("bash"):
        host.logger.debug("bash not found; cannot source the toolchain env script")
        return values

    expansions = " ".join(f'"${{{name}:-}}"' for name in names)
    snippet = f'source "$1" >/dev/null 2>&1; printf "%s\\0" {expansions}'
    env = {key: value for key, value in host.environ.items() if key not in values}

    result = try_run(host, ["bash", "-c", snippet, "hostvalidate", script], env=env)
    if result is None:
        return values

    reported = result.stdout.split("\0")
    for name, value in zip(names, reported):
        values[name] = value or None
    return values
