"""Per-file navigation state and the store that holds it."""
from dataclasses import dataclass, field
from typing import Optional

from .search import MatchRecord, SearchOutcome

DEFAULT_PAGE_SIZE = 30


def clamp_line(line: int, total_lines: int) -> int:
    """Clamp a line number to ``[1, total_lines]``, or 1 for an empty file."""
    return max(1, min(line, total_lines))


@dataclass
class ActiveSearch:
    """The most recent search run against a file."""

    pattern: str
    is_regex: bool
    matches: list[MatchRecord] = field(default_factory=list)
    match_cursor: int = -1

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "ActiveSearch":
        return cls(
            pattern=outcome.pattern,
            is_regex=outcome.is_regex,
            matches=list(outcome.matches),
            match_cursor=outcome.landed_index,
        )

    @property
    def current(self) -> Optional[MatchRecord]:
        if self.match_cursor < 0:
            return None
        return self.matches[self.match_cursor]

    def step(self, offset: int) -> MatchRecord:
        """Move the match cursor cyclically by ``offset`` and return the match.

        Raises:
            IndexError: If there are no matches
        """
        if not self.matches:
            raise IndexError("no matches to step through")
        self.match_cursor = (self.match_cursor + offset) % len(self.matches)
        return self.matches[self.match_cursor]


@dataclass
class NavigatorState:
    """Cursor, page size and active search for one file."""

    file_path: str
    cursor_line: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    active_search: Optional[ActiveSearch] = None

    @property
    def has_matches(self) -> bool:
        return self.active_search is not None and bool(self.active_search.matches)

    def move_to(self, line: int, total_lines: int) -> int:
        """Set the cursor to ``line`` clamped to the file bounds."""
        self.cursor_line = clamp_line(line, total_lines)
        return self.cursor_line


class StateStore:
    """Path-keyed table of navigator states.

    States are created on first reference and kept for the lifetime of the
    store; nothing is evicted.
    """

    def __init__(self, default_page_size: int = DEFAULT_PAGE_SIZE):
        if default_page_size < 1:
            raise ValueError("default_page_size must be at least 1")
        self.default_page_size = default_page_size
        self._states: dict[str, NavigatorState] = {}

    def get(self, file_path: str) -> NavigatorState:
        """Get the state for ``file_path``, creating it if needed."""
        key = str(file_path)
        state = self._states.get(key)
        if state is None:
            state = NavigatorState(file_path=key, page_size=self.default_page_size)
            self._states[key] = state
        return state

    def peek(self, file_path: str) -> Optional[NavigatorState]:
        """Get the state for ``file_path`` without creating one."""
        return self._states.get(str(file_path))

    def paths(self) -> list[str]:
        return list(self._states)

    def __contains__(self, file_path: object) -> bool:
        return str(file_path) in self._states

    def __len__(self) -> int:
        return len(self._states)
