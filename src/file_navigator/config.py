"""Navigator configuration.

Defaults can be overridden with keyword arguments or, for the server, from
``FILE_NAVIGATOR_*`` environment variables.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.line_reader import DEFAULT_CHUNK_SIZE
from .core.search import MAX_SEARCH_RESULTS
from .core.state import DEFAULT_PAGE_SIZE

ENV_PREFIX = "FILE_NAVIGATOR_"


@dataclass(frozen=True)
class NavigatorConfig:
    """Settings shared by every navigator state and scan."""

    page_size: int = DEFAULT_PAGE_SIZE
    max_search_results: int = MAX_SEARCH_RESULTS
    chunk_size: int = DEFAULT_CHUNK_SIZE
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def __post_init__(self):
        for name in ("page_size", "max_search_results", "chunk_size"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NavigatorConfig":
        """Build a configuration from environment variables.

        Reads ``FILE_NAVIGATOR_PAGE_SIZE``, ``FILE_NAVIGATOR_MAX_SEARCH_RESULTS``,
        ``FILE_NAVIGATOR_CHUNK_SIZE`` and ``FILE_NAVIGATOR_LOG_LEVEL``; unset
        variables keep their defaults.

        Raises:
            ValueError: If a numeric variable is not a positive integer
        """
        if environ is None:
            environ = os.environ

        return cls(
            page_size=_positive_int(environ, "PAGE_SIZE", DEFAULT_PAGE_SIZE),
            max_search_results=_positive_int(
                environ, "MAX_SEARCH_RESULTS", MAX_SEARCH_RESULTS
            ),
            chunk_size=_positive_int(environ, "CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
            log_level=environ.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper(),
        )


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    key = f"{ENV_PREFIX}{name}"
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from e

    if value < 1:
        raise ValueError(f"{key} must be at least 1, got {value}")
    return value
