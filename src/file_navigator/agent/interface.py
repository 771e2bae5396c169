"""Tool-call boundary between agents and the file navigator."""
import logging
import os
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Optional

from ..config import NavigatorConfig
from ..core.errors import (
    InvalidArgumentError,
    NavigatorError,
    NotFoundError,
    UnknownToolError,
)
from ..core.monitor import PerformanceMonitor
from ..core.navigator import FileNavigator, NavigationResult

logger = logging.getLogger(__name__)

# Tool name -> (required arguments, optional arguments)
TOOL_PARAMETERS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "go_to_line": (("filename", "line"), ("screen_height",)),
    "find": (("filename", "pattern"), ("is_regex",)),
    "next_match": (("filename",), ()),
    "prev_match": (("filename",), ()),
    "page_up": (("filename",), ()),
    "page_down": (("filename",), ()),
}

TOOL_NAMES = tuple(TOOL_PARAMETERS)


class AgentNavigator:
    """Agent-facing wrapper around :class:`FileNavigator`.

    Validates raw tool arguments, confirms the target file is readable
    before anything is dispatched, and returns plain text. Failures are
    logged here and re-raised as :class:`NavigatorError` subclasses; a file
    that is missing or unreadable is reported as an
    :class:`InvalidArgumentError` carrying the filename.
    """

    def __init__(
        self,
        navigator: Optional[FileNavigator] = None,
        config: Optional[NavigatorConfig] = None,
        monitor: Optional[PerformanceMonitor] = None,
    ):
        """Initialize agent navigator.

        Args:
            navigator: Navigator to dispatch to (a new one by default)
            config: Configuration for a newly created navigator
            monitor: Performance monitor recording command timings
        """
        self.navigator = navigator or FileNavigator(config=config)
        self.monitor = monitor or PerformanceMonitor()
        self.operation_log: list[dict[str, Any]] = []

    def call(self, tool_name: str, arguments: Optional[Mapping[str, Any]]) -> str:
        """Dispatch a tool call by name.

        Args:
            tool_name: One of :data:`TOOL_NAMES`
            arguments: Raw tool arguments, including ``filename``

        Returns:
            Result text

        Raises:
            UnknownToolError: If ``tool_name`` is not a navigator tool
            InvalidArgumentError: If the arguments are malformed
        """
        if tool_name not in TOOL_NAMES:
            raise UnknownToolError(tool_name)
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentError("Invalid arguments")

        required, optional = TOOL_PARAMETERS[tool_name]
        missing = [name for name in required if arguments.get(name) is None]
        if missing:
            raise InvalidArgumentError(
                f"Missing required argument(s) for {tool_name}: {', '.join(missing)}"
            )

        # Optional arguments passed as null fall back to their defaults
        kwargs = {
            name: arguments[name]
            for name in required + optional
            if arguments.get(name) is not None
        }
        handler: Callable[..., str] = getattr(self, tool_name)
        return handler(**kwargs)

    def go_to_line(
        self, filename: str, line: int, screen_height: Optional[int] = None
    ) -> str:
        """Show the page starting at ``line``."""

        def validate():
            _require_int("line", line)
            if screen_height is not None:
                _require_int("screen_height", screen_height, minimum=1)

        return self._run(
            "go_to_line",
            filename,
            lambda path: self.navigator.go_to_line(path, line, screen_height),
            details={"line": line, "screen_height": screen_height},
            validate=validate,
        )

    def find(self, filename: str, pattern: str, is_regex: bool = False) -> str:
        """Search for ``pattern`` and show the first match after the cursor."""

        def validate():
            if not isinstance(pattern, str):
                raise InvalidArgumentError("pattern must be a string")
            if not isinstance(is_regex, bool):
                raise InvalidArgumentError("is_regex must be a boolean")

        return self._run(
            "find",
            filename,
            lambda path: self.navigator.find(path, pattern, is_regex),
            details={"pattern": pattern, "is_regex": is_regex},
            validate=validate,
        )

    def next_match(self, filename: str) -> str:
        return self._run("next_match", filename, self.navigator.next_match)

    def prev_match(self, filename: str) -> str:
        return self._run("prev_match", filename, self.navigator.prev_match)

    def page_up(self, filename: str) -> str:
        return self._run("page_up", filename, self.navigator.page_up)

    def page_down(self, filename: str) -> str:
        return self._run("page_down", filename, self.navigator.page_down)

    def _validate_filename(self, filename: Any) -> str:
        """Check that ``filename`` names a readable regular file.

        Raises:
            InvalidArgumentError: If the name is malformed or the file is not accessible
        """
        if not isinstance(filename, str) or not filename:
            raise InvalidArgumentError("filename must be a non-empty string")

        path = Path(filename)
        if not path.is_file() or not os.access(path, os.R_OK):
            raise InvalidArgumentError(f"File not found: {filename}")

        return filename

    def _run(
        self,
        operation: str,
        filename: str,
        command: Callable[[str], NavigationResult],
        details: Optional[dict[str, Any]] = None,
        validate: Optional[Callable[[], None]] = None,
    ) -> str:
        """Validate, time and log one navigator command.

        Argument and filename checks run inside the monitored block so every
        boundary failure is counted and logged the same way.
        """
        try:
            with self.monitor.measure(operation):
                if validate is not None:
                    validate()
                path = self._validate_filename(filename)
                try:
                    result = command(path)
                except NotFoundError as e:
                    raise InvalidArgumentError(f"File not found: {filename}") from e

        except NavigatorError as e:
            logger.error(f"{operation} failed for {filename}: {e}")
            self._log_operation(f"failed_{operation}", filename, str(e))
            raise

        logger.debug(f"{operation} on {filename}: cursor at line {result.cursor_line}")
        self._log_operation(
            operation,
            filename,
            {**(details or {}), "cursor_line": result.cursor_line, "kind": result.kind.value},
        )
        return result.text

    def _log_operation(self, op_type: str, filename: str, details: Any):
        """Maintain audit trail for agent operations."""
        self.operation_log.append(
            {
                "timestamp": time.time(),
                "operation": op_type,
                "file": filename,
                "details": details,
            }
        )

    def get_operation_log(self) -> list[dict[str, Any]]:
        """Get operation log for debugging and audit purposes."""
        return self.operation_log.copy()

    def clear_operation_log(self):
        self.operation_log.clear()


def _require_int(name: str, value: Any, minimum: Optional[int] = None):
    # bool is an int subclass but never a valid line number
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer")
    if minimum is not None and value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}")
