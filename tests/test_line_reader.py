"""Tests for streaming line access."""
import shutil
import tempfile
from pathlib import Path

import pytest
from file_navigator.core.errors import NotFoundError
from file_navigator.core.line_reader import LineReader, LineStream, NumberedLine
from file_navigator.core.window import get_total_lines, get_window
from hypothesis import given, settings
from hypothesis import strategies as st


def write_raw(path: Path, content: str) -> None:
    """Write text without newline translation."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


class TestLineStream:
    """Test single-pass line streams."""

    def setup_method(self) -> None:
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_file = Path(self.temp_dir) / "test.txt"

    def teardown_method(self) -> None:
        """Clean up test environment."""
        shutil.rmtree(self.temp_dir)

    def test_lines_without_trailing_newline(self) -> None:
        """Test that the last line is yielded even without a newline."""
        write_raw(self.test_file, "alpha\nbeta\ngamma")

        assert list(LineStream(self.test_file)) == ["alpha", "beta", "gamma"]

    def test_trailing_newline_adds_no_empty_line(self) -> None:
        """Test that a final newline does not produce an extra line."""
        write_raw(self.test_file, "alpha\nbeta\n")

        assert list(LineStream(self.test_file)) == ["alpha", "beta"]

    def test_empty_file(self) -> None:
        """Test that an empty file yields nothing."""
        write_raw(self.test_file, "")

        assert list(LineStream(self.test_file)) == []

    def test_blank_lines_preserved(self) -> None:
        """Test that blank lines in the middle are kept."""
        write_raw(self.test_file, "a\n\n\nb")

        assert list(LineStream(self.test_file)) == ["a", "", "", "b"]

    def test_single_newline(self) -> None:
        """Test a file holding only a newline."""
        write_raw(self.test_file, "\n")

        assert list(LineStream(self.test_file)) == [""]

    def test_carriage_returns_kept_verbatim(self) -> None:
        """Test that only \\n splits lines."""
        self.test_file.write_bytes(b"first\r\nsecond\rstill second\n")

        assert list(LineStream(self.test_file)) == ["first\r", "second\rstill second"]

    def test_lines_longer_than_chunk(self) -> None:
        """Test lines spanning several chunks."""
        lines = ["x" * 50, "y" * 7, "", "z" * 123]
        write_raw(self.test_file, "\n".join(lines))

        assert list(LineStream(self.test_file, chunk_size=4)) == lines

    def test_invalid_utf8_replaced(self) -> None:
        """Test that undecodable bytes do not abort the pass."""
        self.test_file.write_bytes(b"ok\n\xff\xfe bad\nend")

        lines = list(LineStream(self.test_file))
        assert lines[0] == "ok"
        assert "�" in lines[1]
        assert lines[2] == "end"

    def test_missing_file_raises_on_first_read(self) -> None:
        """Test that a missing file fails only when consumed."""
        stream = LineStream(Path(self.temp_dir) / "missing.txt")
        assert not stream.closed

        with pytest.raises(NotFoundError, match="missing.txt"):
            next(stream)

        assert stream.closed

    def test_directory_is_not_found(self) -> None:
        """Test that a directory path is reported as not found."""
        with pytest.raises(NotFoundError):
            list(LineStream(self.temp_dir))

    def test_closed_after_exhaustion(self) -> None:
        """Test the terminal state after a full pass."""
        write_raw(self.test_file, "a\nb")
        stream = LineStream(self.test_file)

        assert list(stream) == ["a", "b"]
        assert stream.closed
        assert list(stream) == []

    def test_early_close_releases_file(self) -> None:
        """Test closing a partially consumed stream."""
        write_raw(self.test_file, "a\nb\nc")
        stream = LineStream(self.test_file)

        assert next(stream) == "a"
        assert stream._file is not None

        stream.close()
        assert stream.closed
        assert stream._file is None
        with pytest.raises(StopIteration):
            next(stream)

    def test_context_manager_closes(self) -> None:
        """Test that leaving a with block closes the stream."""
        write_raw(self.test_file, "a\nb\nc")

        with LineStream(self.test_file) as stream:
            for line in stream:
                if line == "b":
                    break

        assert stream.closed
        assert stream._file is None

    def test_invalid_chunk_size(self) -> None:
        """Test chunk size validation."""
        with pytest.raises(ValueError, match="chunk_size"):
            LineStream(self.test_file, chunk_size=0)

    @given(
        lines=st.lists(
            st.text(
                alphabet=st.characters(
                    blacklist_categories=("Cs",), blacklist_characters="\n"
                ),
                max_size=20,
            ),
            max_size=30,
        ),
        chunk_size=st.integers(min_value=1, max_value=16),
        trailing_newline=st.booleans(),
    )
    @settings(deadline=None, max_examples=50)
    def test_matches_split_semantics(
        self, lines: list[str], chunk_size: int, trailing_newline: bool
    ) -> None:
        """Property: streaming agrees with splitting the whole text on \\n."""
        content = "\n".join(lines)
        if trailing_newline and content:
            content += "\n"
        write_raw(self.test_file, content)

        expected = content.split("\n") if content else []
        if expected and expected[-1] == "":
            expected.pop()

        assert list(LineStream(self.test_file, chunk_size=chunk_size)) == expected


class TestLineReader:
    """Test restartable line readers."""

    def setup_method(self) -> None:
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_file = Path(self.temp_dir) / "test.txt"
        write_raw(self.test_file, "\n".join(f"Line {i}" for i in range(1, 11)))

    def teardown_method(self) -> None:
        """Clean up test environment."""
        shutil.rmtree(self.temp_dir)

    def test_each_pass_starts_from_beginning(self) -> None:
        """Test that passes are independent."""
        reader = LineReader(self.test_file)

        first = reader.lines()
        second = reader.lines()
        assert next(first) == "Line 1"
        assert next(first) == "Line 2"
        assert next(second) == "Line 1"

        first.close()
        second.close()
        assert list(reader) == [f"Line {i}" for i in range(1, 11)]

    def test_numbered_lines(self) -> None:
        """Test 1-based numbering."""
        numbered = list(LineReader(self.test_file).numbered_lines())

        assert numbered[0] == NumberedLine(1, "Line 1")
        assert numbered[-1] == NumberedLine(10, "Line 10")
        assert numbered[4].line_number == 5

    def test_count_lines(self) -> None:
        """Test line counting."""
        assert LineReader(self.test_file, chunk_size=3).count_lines() == 10


class TestWindow:
    """Test line windows and total line counts."""

    def setup_method(self) -> None:
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_file = Path(self.temp_dir) / "test.txt"
        write_raw(self.test_file, "\n".join(f"Line {i}" for i in range(1, 11)))

    def teardown_method(self) -> None:
        """Clean up test environment."""
        shutil.rmtree(self.temp_dir)

    def test_window_in_middle(self) -> None:
        """Test fetching a window inside the file."""
        window = get_window(self.test_file, 3, 4)

        assert [n.line_number for n in window] == [3, 4, 5, 6]
        assert window[0].content == "Line 3"
        assert window[-1] == (6, "Line 6")

    def test_window_past_end(self) -> None:
        """Test that a window running past EOF is short."""
        window = get_window(self.test_file, 8, 5)

        assert [n.line_number for n in window] == [8, 9, 10]

    def test_window_beyond_end(self) -> None:
        """Test a window that starts after the last line."""
        assert get_window(self.test_file, 11, 5) == []

    def test_empty_window(self) -> None:
        """Test non-positive counts."""
        assert get_window(self.test_file, 1, 0) == []
        assert get_window(self.test_file, 1, -3) == []

    def test_window_with_small_chunks(self) -> None:
        """Test windows are independent of chunk size."""
        assert get_window(self.test_file, 2, 3, chunk_size=1) == get_window(
            self.test_file, 2, 3
        )

    def test_window_missing_file(self) -> None:
        """Test missing file during window fetch."""
        with pytest.raises(NotFoundError):
            get_window(Path(self.temp_dir) / "missing.txt", 1, 10)

    def test_total_lines(self) -> None:
        """Test total line counting."""
        assert get_total_lines(self.test_file) == 10

        empty = Path(self.temp_dir) / "empty.txt"
        write_raw(empty, "")
        assert get_total_lines(empty) == 0

    def test_total_lines_reflects_changes(self) -> None:
        """Test that the count is recomputed after the file changes."""
        assert get_total_lines(self.test_file) == 10

        with open(self.test_file, "a", encoding="utf-8", newline="") as f:
            f.write("\nLine 11\nLine 12")

        assert get_total_lines(self.test_file) == 12
