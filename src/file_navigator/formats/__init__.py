"""Output formats for navigation results."""

from .screen import EMPTY_FILE_MARKER, ScreenFormatter, end_of_file_banner, render

__all__ = [
    "EMPTY_FILE_MARKER",
    "ScreenFormatter",
    "end_of_file_banner",
    "render",
]
