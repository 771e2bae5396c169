"""Line-granular search over large files."""
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from re import Pattern
from typing import NamedTuple, Optional, Union

from .errors import InvalidPatternError
from .line_reader import DEFAULT_CHUNK_SIZE, LineReader

logger = logging.getLogger(__name__)

# Upper bound on retained matches per search
MAX_SEARCH_RESULTS = 1000


class MatchRecord(NamedTuple):
    """Snapshot of a matching line taken at search time."""

    line_number: int
    content: str


@dataclass
class SearchOutcome:
    """Result of scanning a file for a pattern.

    ``landed_index`` is the index in ``matches`` of the first match at or
    after the cursor, wrapping to the first match overall, or -1 when nothing
    matched.
    """

    pattern: str
    is_regex: bool
    matches: list[MatchRecord] = field(default_factory=list)
    landed_index: int = -1
    # Set when the scan stopped at the cap
    truncated: bool = False

    @property
    def found(self) -> bool:
        return bool(self.matches)

    @property
    def landed(self) -> Optional[MatchRecord]:
        if self.landed_index < 0:
            return None
        return self.matches[self.landed_index]


def compile_pattern(pattern: str, is_regex: bool = False) -> Pattern:
    """Compile a case-insensitive search pattern.

    Args:
        pattern: Literal text or regular expression
        is_regex: Treat ``pattern`` as a regular expression

    Returns:
        Compiled pattern

    Raises:
        InvalidPatternError: If ``is_regex`` is set and the pattern is malformed
    """
    if not is_regex:
        return re.compile(re.escape(pattern), re.IGNORECASE)

    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def search(
    file_path: Union[str, Path],
    pattern: str,
    is_regex: bool = False,
    cursor_line: int = 1,
    max_results: int = MAX_SEARCH_RESULTS,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    encoding: str = "utf-8",
) -> SearchOutcome:
    """Scan a file for lines matching a pattern.

    The pattern is compiled before the file is touched. The scan stops once
    ``max_results`` matches are collected, so counts past the cap are not
    known.

    Args:
        file_path: Path to the file to search
        pattern: Literal text or regular expression
        is_regex: Treat ``pattern`` as a regular expression
        cursor_line: Line the landing match is searched from
        max_results: Maximum number of matches to retain

    Returns:
        SearchOutcome with the matches and landed index
    """
    compiled = compile_pattern(pattern, is_regex)
    outcome = SearchOutcome(pattern=pattern, is_regex=is_regex)
    reader = LineReader(file_path, chunk_size, encoding)

    with reader.lines() as stream:
        for line_number, content in enumerate(stream, 1):
            if not compiled.search(content):
                continue

            outcome.matches.append(MatchRecord(line_number, content))
            if outcome.landed_index < 0 and line_number >= cursor_line:
                outcome.landed_index = len(outcome.matches) - 1

            if len(outcome.matches) >= max_results:
                outcome.truncated = True
                break

    if outcome.landed_index < 0 and outcome.matches:
        outcome.landed_index = 0

    logger.debug(
        f"Search for {pattern!r} in {file_path} found {len(outcome.matches)} matches"
    )
    return outcome
