"""
Opt-in timing of repair hot sections.

Set ``JSONMEND_PROFILE`` before import to record how often the scanner,
parser and encoder sections run and how much input they cover. When the
variable is absent ``ProfileContext`` is an empty context manager.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "JSONMEND_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one named section."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars

    @property
    def mean_time_ns(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time_ns / self.call_count

    @property
    def chars_per_ms(self) -> float:
        """Input throughput; 0.0 for sections that do not report sizes."""
        if not self.total_time_ns:
            return 0.0
        return self.chars_processed * 1_000_000 / self.total_time_ns


_hot_path_stats: dict[str, HotPathStats] = {}


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """Times the enclosed block under ``section``."""

        __slots__ = ("chars", "section", "started_ns")

        def __init__(self, section: str, chars: int = 0) -> None:
            self.section = section
            self.chars = chars
            self.started_ns = 0

        def __enter__(self) -> "ProfileContext":
            self.started_ns = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            elapsed = time.perf_counter_ns() - self.started_ns
            stats = _hot_path_stats.get(self.section)
            if stats is None:
                stats = _hot_path_stats[self.section] = HotPathStats(
                    self.section
                )
            stats.record_call(elapsed, self.chars)

else:

    class ProfileContext:  # type: ignore[no-redef]
        __slots__ = ()

        def __init__(self, section: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the recorded sections."""
    return dict(_hot_path_stats)


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


def format_hot_path_stats() -> str:
    """
    Renders recorded sections as a table, slowest total first.

    Returns an empty string when nothing has been recorded.
    """
    if not _hot_path_stats:
        return ""

    rows = sorted(
        _hot_path_stats.values(), key=lambda s: s.total_time_ns, reverse=True
    )
    lines = [f"{'section':<18} {'calls':>8} {'mean ns':>12} {'chars/ms':>12}"]
    for stats in rows:
        lines.append(
            f"{stats.function_name:<18} {stats.call_count:>8} "
            f"{stats.mean_time_ns:>12.0f} {stats.chars_per_ms:>12.0f}"
        )
    return "\n".join(lines)
