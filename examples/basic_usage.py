#!/usr/bin/env python3
"""Basic usage examples for the file-navigator library."""

import os
import tempfile

from file_navigator import FileNavigator, LineReader, NavigatorConfig, search
from file_navigator.core import get_window


def create_log_file(line_count: int = 100000) -> str:
    """Write a large sample log and return its path."""
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".log", delete=False, encoding="utf-8"
    ) as tmp:
        for i in range(1, line_count + 1):
            if i % 1000 == 0:
                tmp.write(f"Line {i}: ERROR request failed with status 500\n")
            elif i % 100 == 0:
                tmp.write(f"Line {i}: WARN slow response\n")
            else:
                tmp.write(f"Line {i}: INFO request served\n")
        return tmp.name


def streaming_example(path: str):
    """Demonstrate bounded-memory line access."""
    print("=== Streaming Example ===")

    reader = LineReader(path)
    print(f"Total lines: {reader.count_lines()}")

    for line_number, content in get_window(path, 99998, 5):
        print(f"  {line_number}: {content}")

    outcome = search(path, r"status \d{3}", is_regex=True, max_results=5)
    print(f"First {len(outcome.matches)} errors (truncated={outcome.truncated}):")
    for match in outcome.matches:
        print(f"  {match.line_number}: {match.content}")


def navigation_example(path: str):
    """Demonstrate vim-style paging and searching."""
    print("\n=== Navigation Example ===")

    navigator = FileNavigator(config=NavigatorConfig(page_size=5))

    print(navigator.go_to_line(path, 1000))
    print()
    print(navigator.page_down(path))
    print()

    print(navigator.find(path, "error"))
    print()
    print(navigator.next_match(path))
    print()
    print(navigator.prev_match(path))
    print()

    # Past the end of the file the cursor is clamped to the last line
    print(navigator.go_to_line(path, 500000))


if __name__ == "__main__":
    log_path = create_log_file()
    try:
        streaming_example(log_path)
        navigation_example(log_path)
    finally:
        os.unlink(log_path)

    print("\n=== All examples completed successfully! ===")
