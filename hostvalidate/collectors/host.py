"""
The host seam: everything hostvalidate reads from the operating system goes
through a HostEnvironment.

Probes and collectors never call subprocess, os or glob directly. Tests
replace the whole seam with a scripted fake.
"""

import glob
import logging
import os
import shutil
import stat
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from hostvalidate.config import DEFAULT_CMD_TIMEOUT
from hostvalidate.environment import OSInfo, detect_os
from hostvalidate.errors import CollectorError, ErrorCode


@dataclass
class CommandResult:
    """Captured output of one external command."""
    stdout: str
    stderr: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class HostEnvironment:
    """
    Read-only access to the local host.

    Commands run synchronously with a bounded timeout. Any failure to run a
    command or to query the filesystem is raised as CollectorError; a command
    that runs and exits non-zero is not an error and is returned as-is.

    Args:
        logger: Logger for command tracing; a module logger if omitted.
        timeout: Per-command timeout in seconds.
        environ: Environment mapping used for lookups and child processes.
    """

    def __init__(self, logger=None, timeout: float = DEFAULT_CMD_TIMEOUT,
                 environ: Optional[Mapping[str, str]] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout
        self.environ = dict(os.environ if environ is None else environ)
        self._os_info: Optional[OSInfo] = None

    @property
    def os_info(self) -> OSInfo:
        if self._os_info is None:
            self._os_info = detect_os()
        return self._os_info

    # ------------------------------------------------------------------
    # Environment and PATH
    # ------------------------------------------------------------------

    def getenv(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.environ.get(name, default)

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self.environ.get("PATH"))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def run(self, command: List[str], env: Optional[Dict[str, str]] = None) -> CommandResult:
        """
        Run a command and capture its output.

        Args:
            command: Argument vector; never passed through a shell.
            env: Full environment for the child; defaults to self.environ.

        Returns:
            CommandResult with decoded stdout/stderr and the exit code.

        Raises:
            CollectorError: If the command cannot be started or times out.
        """
        self.logger.debug(f"Executing command: {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                env=self.environ if env is None else env,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CollectorError(
                f"Command not found: {command[0]}",
                command=command,
                code=ErrorCode.COMMAND_NOT_FOUND
            ) from e
        except subprocess.TimeoutExpired as e:
            raise CollectorError(
                f"Command timed out after {self.timeout:g}s: {command[0]}",
                command=command,
                code=ErrorCode.COMMAND_TIMEOUT
            ) from e
        except OSError as e:
            raise CollectorError(
                f"Command could not be started: {command[0]}",
                command=command,
                stderr=str(e),
                code=ErrorCode.COMMAND_FAILED
            ) from e

        self.logger.debug(f"Command exited with code {result.returncode}: {command[0]}")
        return CommandResult(result.stdout, result.stderr, result.returncode)

    # ------------------------------------------------------------------
    # Filesystem
    # ------------------------------------------------------------------

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def listdir(self, path: str) -> List[str]:
        """
        List a directory.

        Raises:
            CollectorError: If the directory cannot be listed.
        """
        try:
            return sorted(os.listdir(path))
        except FileNotFoundError as e:
            raise CollectorError(f"Directory not found: {path}", path=path,
                                 code=ErrorCode.FS_PATH_NOT_FOUND) from e
        except PermissionError as e:
            raise CollectorError(f"Permission denied: {path}", path=path,
                                 code=ErrorCode.FS_PERMISSION_DENIED) from e
        except OSError as e:
            raise CollectorError(f"Cannot list directory: {path}", path=path,
                                 stderr=str(e), code=ErrorCode.FS_READ_FAILED) from e

    def glob(self, pattern: str) -> List[str]:
        return sorted(glob.glob(pattern))

    def permission_bits(self, path: str) -> str:
        """
        Return the permission bits of a path in octal, like ``stat -c %a``.

        Raises:
            CollectorError: If the path cannot be stat'ed.
        """
        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            raise CollectorError(f"Cannot stat {path}", path=path, stderr=str(e),
                                 code=ErrorCode.FS_READ_FAILED) from e
        return format(stat.S_IMODE(mode), "o")
