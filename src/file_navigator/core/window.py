"""Line window access built on the streaming line reader."""
import logging
from pathlib import Path
from typing import Union

from .line_reader import DEFAULT_CHUNK_SIZE, LineReader, NumberedLine

logger = logging.getLogger(__name__)


def get_window(
    file_path: Union[str, Path],
    start_line: int,
    count: int,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    encoding: str = "utf-8",
) -> list[NumberedLine]:
    """Get the lines numbered ``[start_line, start_line + count)``.

    Reading stops as soon as the window has been passed, so only the prefix
    of the file up to the window end is scanned. Callers clamp
    ``start_line`` before calling.

    Args:
        file_path: Path to the file
        start_line: First line of the window (1-based)
        count: Maximum number of lines to return

    Returns:
        Lines in the window, fewer than ``count`` near end of file
    """
    if count <= 0:
        return []

    end_line = start_line + count
    window = []
    reader = LineReader(file_path, chunk_size, encoding)

    with reader.lines() as stream:
        for line_number, content in enumerate(stream, 1):
            if line_number >= end_line:
                break
            if line_number >= start_line:
                window.append(NumberedLine(line_number, content))

    return window


def get_total_lines(
    file_path: Union[str, Path],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    encoding: str = "utf-8",
) -> int:
    """Count the lines in a file.

    Always performs a fresh full pass; the count is never cached so edits made
    between calls are picked up.
    """
    return LineReader(file_path, chunk_size, encoding).count_lines()
