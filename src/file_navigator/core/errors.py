"""Error taxonomy for navigation operations."""
from enum import Enum
from pathlib import Path
from typing import Union


class ErrorKind(str, Enum):
    """Machine-readable failure kinds."""

    NOT_FOUND = "not_found"
    INVALID_PATTERN = "invalid_pattern"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_TOOL = "unknown_tool"


class NavigatorError(Exception):
    """Base class for all navigation failures."""

    kind = ErrorKind.INVALID_ARGUMENT


class NotFoundError(NavigatorError):
    """The file does not exist or cannot be read."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, file_path: Union[str, Path], reason: str = ""):
        self.file_path = str(file_path)
        self.reason = reason
        message = f"File not found: {self.file_path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidPatternError(NavigatorError, ValueError):
    """A regex search pattern failed to compile."""

    kind = ErrorKind.INVALID_PATTERN

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern: {reason}")


class InvalidArgumentError(NavigatorError, ValueError):
    """Malformed or missing tool arguments."""

    kind = ErrorKind.INVALID_ARGUMENT


class UnknownToolError(NavigatorError):
    """The requested tool name is not one the navigator provides."""

    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")
