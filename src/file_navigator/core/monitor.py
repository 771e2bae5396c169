"""Timing of navigation commands."""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class OperationStats:
    """Aggregated timings for one kind of command."""

    count: int = 0
    failures: int = 0
    total_time: float = 0.0
    min_time: float = float("inf")
    max_time: float = 0.0

    @property
    def average_time(self) -> float:
        return self.total_time / self.count if self.count else 0.0

    def record(self, duration: float, failed: bool = False):
        self.count += 1
        if failed:
            self.failures += 1
        self.total_time += duration
        self.min_time = min(self.min_time, duration)
        self.max_time = max(self.max_time, duration)


class PerformanceMonitor:
    """Collect per-command durations.

    Full-file rescans happen on nearly every command, so the timings show
    how the file size affects response time.
    """

    def __init__(self):
        self._stats: dict[str, OperationStats] = {}

    @contextmanager
    def measure(self, operation: str) -> Iterator[None]:
        """Time the enclosed block and record it under ``operation``.

        A block that raises is recorded as a failure and the exception is
        re-raised.
        """
        start_time = time.perf_counter()
        failed = False
        try:
            yield
        except Exception:
            failed = True
            raise
        finally:
            duration = time.perf_counter() - start_time
            self._stats.setdefault(operation, OperationStats()).record(duration, failed)
            logger.debug(f"{operation} took {duration * 1000:.1f} ms")

    def get_stats(self, operation: str) -> OperationStats:
        """Get statistics for an operation (empty if never measured)."""
        return self._stats.get(operation, OperationStats())

    def get_all_stats(self) -> dict[str, OperationStats]:
        return dict(self._stats)

    def reset(self):
        self._stats.clear()
