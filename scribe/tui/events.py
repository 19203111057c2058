"""State of the Events tab and formatting of the event detail pane."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field

from scribe.tui.filter import EventRow


class DetailMode(enum.Enum):
    """How the expanded event is shown."""

    STRUCTURED = "Structured"
    RAW_JSON = "Raw JSON"


@dataclass
class EventsState:
    """Loaded events, the selection, and the expanded detail row."""

    events: list[EventRow] = field(default_factory=list)
    selected: int = 0
    expanded: int | None = None
    detail_mode: DetailMode = DetailMode.STRUCTURED
    session_filter: str | None = None
    loaded: bool = False

    def next(self) -> None:
        """Move the selection down, wrapping, and collapse the detail."""
        if not self.events:
            return
        self.selected = (self.selected + 1) % len(self.events)
        self.expanded = None

    def prev(self) -> None:
        """Move the selection up, wrapping, and collapse the detail."""
        if not self.events:
            return
        self.selected = (self.selected - 1) % len(self.events)
        self.expanded = None

    def top(self) -> None:
        self.selected = 0
        self.expanded = None

    def bottom(self) -> None:
        if self.events:
            self.selected = len(self.events) - 1
        self.expanded = None

    def toggle_expand(self) -> None:
        """Expand the selected row, or collapse it if it is already expanded."""
        if not self.events:
            return
        self.expanded = None if self.expanded == self.selected else self.selected

    def toggle_detail_mode(self) -> None:
        self.detail_mode = (
            DetailMode.RAW_JSON
            if self.detail_mode is DetailMode.STRUCTURED
            else DetailMode.STRUCTURED
        )

    def clear_session_filter(self) -> None:
        """Drop the session filter; the events must be loaded again."""
        self.session_filter = None
        self.loaded = False
        self.expanded = None

    def set_session_filter(self, session_id: str) -> None:
        """Restrict the tab to one session; the events must be loaded again."""
        self.session_filter = session_id
        self.loaded = False
        self.expanded = None


def _lines(text: str) -> list[str]:
    """Split text into lines on newlines, dropping a final empty line and any CR."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def _pretty(json_str: str) -> str:
    try:
        value = json.loads(json_str)
    except ValueError:
        return json_str
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_raw_json(event: EventRow) -> list[str]:
    """The raw payload pretty-printed, each line indented by two spaces."""
    return [f"  {line}" for line in _lines(_pretty(event.raw_payload))]


def pretty_json_truncated(json_str: str, max_lines: int) -> list[str]:
    """Pretty-print a JSON string, keeping at most ``max_lines`` lines.

    Text that is not JSON is used as it is. When lines are dropped a final
    line says how many.
    """
    lines = _lines(_pretty(json_str))
    if len(lines) <= max_lines:
        return lines
    return lines[:max_lines] + [f"... ({len(lines) - max_lines} more lines)"]