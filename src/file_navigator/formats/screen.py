"""Fixed-layout text rendering of a window of lines."""
from collections.abc import Sequence

from ..core.line_reader import NumberedLine
from ..core.state import DEFAULT_PAGE_SIZE

EMPTY_FILE_MARKER = "~\n(empty file)"
FILLER_MARKER = "~"
SEPARATOR = " | "


def end_of_file_banner(total_lines: int) -> str:
    return f"[END OF FILE - {total_lines} lines total]"


class ScreenFormatter:
    """Render windows of numbered lines as a vim-like screen.

    Line numbers are right-aligned to the width of the larger of the total
    line count and the last shown line number. When the window reaches the
    end of the file the screen is padded with ``~`` rows up to the page size
    and closed with an end-of-file banner.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        self.page_size = page_size

    def render(self, lines: Sequence[NumberedLine], total_lines: int) -> str:
        """Render ``lines`` for a file of ``total_lines`` lines."""
        if not lines:
            return EMPTY_FILE_MARKER

        last_line_number = lines[-1][0]
        width = max(len(str(total_lines)), len(str(last_line_number)))

        rows = [
            f"{line_number:>{width}}{SEPARATOR}{content}"
            for line_number, content in lines
        ]

        if last_line_number >= total_lines:
            for _ in range(len(lines), self.page_size):
                rows.append(FILLER_MARKER.rjust(width + 1))
            rows.append(end_of_file_banner(total_lines))

        return "\n".join(rows)


def render(
    lines: Sequence[NumberedLine],
    total_lines: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> str:
    """Render a window of lines with a one-off formatter."""
    return ScreenFormatter(page_size).render(lines, total_lines)
