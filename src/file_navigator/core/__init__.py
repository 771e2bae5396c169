"""Core line access, search and navigation state."""

from .errors import (
    ErrorKind,
    InvalidArgumentError,
    InvalidPatternError,
    NavigatorError,
    NotFoundError,
    UnknownToolError,
)
from .line_reader import LineReader, LineStream, NumberedLine
from .monitor import OperationStats, PerformanceMonitor
from .search import MAX_SEARCH_RESULTS, MatchRecord, SearchOutcome, compile_pattern, search
from .state import ActiveSearch, NavigatorState, StateStore
from .window import get_total_lines, get_window

__all__ = [
    # Errors
    'ErrorKind',
    'NavigatorError',
    'NotFoundError',
    'InvalidPatternError',
    'InvalidArgumentError',
    'UnknownToolError',

    # Streaming line access
    'LineReader',
    'LineStream',
    'NumberedLine',
    'get_window',
    'get_total_lines',

    # Search
    'MAX_SEARCH_RESULTS',
    'MatchRecord',
    'SearchOutcome',
    'compile_pattern',
    'search',

    # Navigation state
    'ActiveSearch',
    'NavigatorState',
    'StateStore',

    # Timing
    'OperationStats',
    'PerformanceMonitor',
]
