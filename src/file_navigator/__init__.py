"""Cursor-based navigation and search over large text files with an agent-friendly API."""

from .core import (
    ErrorKind,
    InvalidArgumentError,
    InvalidPatternError,
    LineReader,
    NavigatorError,
    NotFoundError,
    StateStore,
    UnknownToolError,
    search,
)
from .core.navigator import FileNavigator, NavigationResult, ResultKind
from .config import NavigatorConfig
from .formats import ScreenFormatter
from .agent import AgentNavigator

__version__ = "0.1.0"

__all__ = [
    # Navigation
    "FileNavigator",
    "NavigationResult",
    "ResultKind",
    "StateStore",
    "NavigatorConfig",
    # Building blocks
    "LineReader",
    "search",
    "ScreenFormatter",
    # Errors
    "ErrorKind",
    "NavigatorError",
    "NotFoundError",
    "InvalidPatternError",
    "InvalidArgumentError",
    "UnknownToolError",
    # Agent interface
    "AgentNavigator",
]
