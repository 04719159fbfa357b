"""
Custom exceptions for hostvalidate.

Exceptions never reach the findings transcript. The host seam raises them
when a collaborator cannot be queried, and the collectors absorb them and
report absent data instead. Each error carries a machine-readable code, a
message, technical details and a suggestion, following one pattern.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class ErrorCode(Enum):
    """Machine-readable error codes for hostvalidate errors."""
    # Command execution errors (2xx)
    COMMAND_NOT_FOUND = "E201"
    COMMAND_TIMEOUT = "E202"
    COMMAND_FAILED = "E203"

    # File system errors (4xx)
    FS_PATH_NOT_FOUND = "E401"
    FS_PERMISSION_DENIED = "E402"
    FS_READ_FAILED = "E403"

    # Internal errors (9xx)
    INTERNAL_ERROR = "E901"


@dataclass
class HVError:
    """
    Structured error information for hostvalidate.

    Attributes:
        code: Machine-readable error code.
        message: User-facing error message.
        details: Technical details for debugging.
        suggestion: How to fix the issue.
        context: Additional context information.
    """
    code: ErrorCode
    message: str
    details: str = ""
    suggestion: str = ""
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Format error for display."""
        lines = [f"[{self.code.value}] {self.message}"]
        if self.details:
            lines.append(f"  Details: {self.details}")
        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")
        return "\n".join(lines)


class HostValidateException(Exception):
    """
    Base exception class for hostvalidate.

    All custom exceptions inherit from this class and provide
    structured error information.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR,
                 details: str = "", suggestion: str = "", **context):
        self.error = HVError(
            code=code,
            message=message,
            details=details,
            suggestion=suggestion,
            context=context
        )
        super().__init__(str(self.error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def suggestion(self) -> str:
        return self.error.suggestion


class CollectorError(HostValidateException):
    """
    Raised when an external collaborator cannot be queried.

    Examples:
        - Command not found on PATH
        - Command exceeded the per-command timeout
        - Directory listing or stat call failed
    """

    def __init__(self, message: str, command: Union[str, List[str], None] = None,
                 path: Optional[str] = None, stderr: Optional[str] = None,
                 suggestion: Optional[str] = None,
                 code: ErrorCode = ErrorCode.COMMAND_FAILED):
        if isinstance(command, list):
            command = " ".join(command)

        details_parts = []
        if command:
            # Truncate long commands
            cmd_display = command[:200] + "..." if len(command) > 200 else command
            details_parts.append(f"Command: {cmd_display}")
        if path:
            details_parts.append(f"Path: {path}")
        if stderr:
            stderr_display = stderr[:500] + "..." if len(stderr) > 500 else stderr
            details_parts.append(f"Error output: {stderr_display}")

        super().__init__(
            message=message,
            code=code,
            details="; ".join(details_parts),
            suggestion=suggestion or self._default_suggestion(code),
            command=command,
            path=path,
            stderr=stderr
        )

    @property
    def is_timeout(self) -> bool:
        return self.code == ErrorCode.COMMAND_TIMEOUT

    @staticmethod
    def _default_suggestion(code: ErrorCode) -> str:
        suggestions = {
            ErrorCode.COMMAND_NOT_FOUND: "Check that the tool is installed and in PATH",
            ErrorCode.COMMAND_TIMEOUT: "Raise HOSTVALIDATE_CMD_TIMEOUT or check why the tool hangs",
            ErrorCode.COMMAND_FAILED: "Run the command by hand to see its output",
            ErrorCode.FS_PATH_NOT_FOUND: "Verify the path exists",
            ErrorCode.FS_PERMISSION_DENIED: "Check file/directory permissions",
            ErrorCode.FS_READ_FAILED: "Check that the filesystem is readable",
        }
        return suggestions.get(code, "Re-run with HOSTVALIDATE_LOG_LEVEL=DEBUG for details")
