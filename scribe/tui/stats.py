"""State of the Stats tab: loaded figures and the scroll position."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class StatsState:
    """Database statistics shown on the Stats tab."""

    stats: Any = None
    avg_duration: float | None = None
    tools: list[Any] = field(default_factory=list)
    event_types: list[Any] = field(default_factory=list)
    errors: Any = None
    dirs: list[Any] = field(default_factory=list)
    activity: list[tuple[str, int]] = field(default_factory=list)
    db_path: str = ""
    db_size: int = 0
    scroll_offset: int = 0
    total_lines: int = 0
    loaded: bool = False

    def _last_line(self) -> int:
        return max(self.total_lines - 1, 0)

    def scroll_down(self) -> None:
        if self.scroll_offset < self._last_line():
            self.scroll_offset += 1

    def scroll_up(self) -> None:
        self.scroll_offset = max(self.scroll_offset - 1, 0)

    def scroll_top(self) -> None:
        self.scroll_offset = 0

    def scroll_bottom(self) -> None:
        self.scroll_offset = self._last_line()