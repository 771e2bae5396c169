"""Streaming line reader for memory-bounded access to large text files."""
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple, Optional, TextIO, Union

from .errors import NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8192


class NumberedLine(NamedTuple):
    """A line of a file together with its 1-based position."""

    line_number: int
    content: str


class LineStream:
    """Single forward pass over the lines of a file.

    The file is opened lazily on the first ``next()`` call and read in
    fixed-size chunks, so at most one chunk plus the current partial line is
    held in memory. Lines are split on ``\\n`` only and returned without the
    terminator. A last line that lacks a trailing newline is still returned.

    Once exhausted, closed, or failed the stream is ``closed`` and the
    underlying file handle has been released.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8",
    ):
        """Initialize a line stream.

        Args:
            file_path: Path to the file to read
            chunk_size: Number of characters to read per I/O call
            encoding: Text encoding of the file
        """
        self._file: Optional[TextIO] = None
        self._pending: list[str] = []
        self._partial = ""
        self._eof = False
        self._closed = False

        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")

        self.file_path = Path(file_path)
        self.chunk_size = chunk_size
        self.encoding = encoding

    def __iter__(self) -> "LineStream":
        return self

    def __next__(self) -> str:
        if self._closed:
            raise StopIteration

        try:
            if self._file is None:
                self._open()
            while not self._pending:
                if self._eof:
                    self.close()
                    raise StopIteration
                self._fill()
        except StopIteration:
            raise
        except Exception:
            self.close()
            raise

        return self._pending.pop()

    def __enter__(self) -> "LineStream":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __del__(self):
        self.close()

    @property
    def closed(self) -> bool:
        """Whether the stream has reached its terminal state."""
        return self._closed

    def close(self):
        """Release the file handle and mark the stream as finished."""
        if self._file is not None:
            self._file.close()
            self._file = None
        self._pending = []
        self._partial = ""
        self._closed = True

    def _open(self):
        try:
            # newline="" keeps \r characters verbatim; only \n splits lines
            self._file = open(
                self.file_path, encoding=self.encoding, errors="replace", newline=""
            )
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise NotFoundError(self.file_path) from e
        except PermissionError as e:
            raise NotFoundError(self.file_path, "permission denied") from e

    def _fill(self):
        chunk = self._file.read(self.chunk_size)
        if not chunk:
            self._eof = True
            if self._partial:
                self._pending.append(self._partial)
                self._partial = ""
            return

        pieces = (self._partial + chunk).split("\n")
        self._partial = pieces.pop()
        # Stored reversed so __next__ can pop from the end
        pieces.reverse()
        self._pending = pieces


class LineReader:
    """Restartable source of line streams for one file.

    Every call to :meth:`lines` (or ``iter(reader)``) starts an independent
    pass from the beginning of the file; no cursor is shared between passes.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8",
    ):
        self.file_path = Path(file_path)
        self.chunk_size = chunk_size
        self.encoding = encoding

    def __iter__(self) -> Iterator[str]:
        return self.lines()

    def lines(self) -> LineStream:
        """Open a fresh pass over the file."""
        return LineStream(self.file_path, self.chunk_size, self.encoding)

    def numbered_lines(self) -> Iterator[NumberedLine]:
        """Yield lines paired with their 1-based line numbers."""
        with self.lines() as stream:
            for line_number, content in enumerate(stream, 1):
                yield NumberedLine(line_number, content)

    def count_lines(self) -> int:
        """Count lines with a full pass in constant memory."""
        count = 0
        with self.lines() as stream:
            for _ in stream:
                count += 1
        logger.debug(f"Counted {count} lines in {self.file_path}")
        return count
