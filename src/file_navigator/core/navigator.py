"""Cursor-based navigation and search over large text files."""
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..config import NavigatorConfig
from ..formats.screen import ScreenFormatter
from .errors import InvalidArgumentError
from .search import search
from .state import ActiveSearch, NavigatorState, StateStore
from .window import get_total_lines, get_window

logger = logging.getLogger(__name__)

NO_ACTIVE_SEARCH_MESSAGE = "No active search. Use 'find' first."


class ResultKind(str, Enum):
    """Kinds of successful navigation results."""

    SCREEN = "screen"
    MESSAGE = "message"


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of a navigation command.

    ``SCREEN`` results carry a rendered window; ``MESSAGE`` results are
    informational (no active search, pattern not found) and leave the cursor
    where it was.
    """

    kind: ResultKind
    text: str
    cursor_line: int
    total_lines: Optional[int] = None
    match_index: Optional[int] = None
    match_count: Optional[int] = None

    @property
    def is_screen(self) -> bool:
        return self.kind is ResultKind.SCREEN

    def __str__(self) -> str:
        return self.text


class FileNavigator:
    """Vim-style pager over files too large to load into memory.

    Each file path gets its own :class:`NavigatorState` in the store. Every
    command re-reads the file (the line count is never cached), computes the
    new cursor, and renders a window of ``page_size`` lines starting at it.

    Failures (:class:`NotFoundError`, :class:`InvalidPatternError`) propagate
    to the caller and leave the file's state unchanged.
    """

    def __init__(
        self,
        store: Optional[StateStore] = None,
        config: Optional[NavigatorConfig] = None,
    ):
        """Initialize navigator.

        Args:
            store: State store to use (a fresh one by default)
            config: Page size, search cap and I/O settings
        """
        self.config = config or NavigatorConfig()
        self.store = store if store is not None else StateStore(self.config.page_size)

    def state_for(self, file_path: Union[str, Path]) -> NavigatorState:
        """Get (or create) the navigation state for a file."""
        return self.store.get(str(file_path))

    def go_to_line(
        self,
        file_path: Union[str, Path],
        line: int,
        page_size: Optional[int] = None,
    ) -> NavigationResult:
        """Jump to ``line``, clamped to the file bounds.

        Args:
            file_path: File to navigate
            line: Target line number (1-based)
            page_size: New page size for this file, kept for later commands
        """
        if page_size is not None and page_size < 1:
            raise InvalidArgumentError("page_size must be at least 1")

        state = self.state_for(file_path)
        total_lines = self._total_lines(state)

        if page_size is not None:
            state.page_size = page_size
        state.move_to(line, total_lines)

        return self._screen_result(state, total_lines)

    def page_up(self, file_path: Union[str, Path]) -> NavigationResult:
        """Move the cursor up by one page."""
        state = self.state_for(file_path)
        total_lines = self._total_lines(state)
        state.move_to(state.cursor_line - state.page_size, total_lines)
        return self._screen_result(state, total_lines)

    def page_down(self, file_path: Union[str, Path]) -> NavigationResult:
        """Move the cursor down by one page, stopping at the last line."""
        state = self.state_for(file_path)
        total_lines = self._total_lines(state)
        state.move_to(state.cursor_line + state.page_size, total_lines)
        return self._screen_result(state, total_lines)

    def find(
        self,
        file_path: Union[str, Path],
        pattern: str,
        is_regex: bool = False,
    ) -> NavigationResult:
        """Search the file and jump to the first match at or after the cursor.

        The previous search for this file is discarded once the scan
        completes, even when nothing matched. If no match lies at or after
        the cursor, the search wraps to the first match in the file.
        The reported position is the landed match's index in the match
        list, so "Found match 4 of 10" means three matches lie before it.
        """
        state = self.state_for(file_path)
        outcome = search(
            state.file_path,
            pattern,
            is_regex=is_regex,
            cursor_line=state.cursor_line,
            max_results=self.config.max_search_results,
            chunk_size=self.config.chunk_size,
            encoding=self.config.encoding,
        )

        if not outcome.found:
            state.active_search = ActiveSearch.from_outcome(outcome)
            return NavigationResult(
                kind=ResultKind.MESSAGE,
                text=f'Pattern not found: "{pattern}"',
                cursor_line=state.cursor_line,
                match_count=0,
            )

        total_lines = self._total_lines(state)
        state.active_search = ActiveSearch.from_outcome(outcome)
        state.move_to(outcome.landed.line_number, total_lines)

        return self._match_result(state, total_lines, "Found match")

    def next_match(self, file_path: Union[str, Path]) -> NavigationResult:
        """Jump to the next match of the active search, wrapping at the end."""
        return self._step_match(file_path, 1)

    def prev_match(self, file_path: Union[str, Path]) -> NavigationResult:
        """Jump to the previous match of the active search, wrapping at the start."""
        return self._step_match(file_path, -1)

    def _step_match(self, file_path: Union[str, Path], offset: int) -> NavigationResult:
        state = self.state_for(file_path)
        if not state.has_matches:
            return NavigationResult(
                kind=ResultKind.MESSAGE,
                text=NO_ACTIVE_SEARCH_MESSAGE,
                cursor_line=state.cursor_line,
            )

        total_lines = self._total_lines(state)
        match = state.active_search.step(offset)
        state.move_to(match.line_number, total_lines)

        return self._match_result(state, total_lines, "Match")

    def _total_lines(self, state: NavigatorState) -> int:
        return get_total_lines(
            state.file_path, self.config.chunk_size, self.config.encoding
        )

    def _render(self, state: NavigatorState, total_lines: int) -> str:
        lines = get_window(
            state.file_path,
            state.cursor_line,
            state.page_size,
            self.config.chunk_size,
            self.config.encoding,
        )
        return ScreenFormatter(state.page_size).render(lines, total_lines)

    def _screen_result(self, state: NavigatorState, total_lines: int) -> NavigationResult:
        return NavigationResult(
            kind=ResultKind.SCREEN,
            text=self._render(state, total_lines),
            cursor_line=state.cursor_line,
            total_lines=total_lines,
        )

    def _match_result(
        self, state: NavigatorState, total_lines: int, label: str
    ) -> NavigationResult:
        active = state.active_search
        position = active.match_cursor + 1
        count = len(active.matches)
        screen = self._render(state, total_lines)
        logger.debug(f"{state.file_path}: match {position}/{count} at line {state.cursor_line}")

        return NavigationResult(
            kind=ResultKind.SCREEN,
            text=f"{label} {position} of {count}\n\n{screen}",
            cursor_line=state.cursor_line,
            total_lines=total_lines,
            match_index=active.match_cursor,
            match_count=count,
        )
