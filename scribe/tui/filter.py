"""Filter bar state and row filtering for the Sessions and Events tabs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass
class SessionRow:
    """Summary of one session."""

    session_id: str
    first_seen: str
    last_seen: str
    cwd: str | None
    event_count: int


@dataclass
class EventRow:
    """One stored hook event."""

    id: int
    timestamp: str
    session_id: str
    event_type: str
    tool_name: str | None
    tool_input: str | None
    tool_response: str | None
    cwd: str | None
    permission_mode: str | None
    raw_payload: str


@dataclass
class FilterState:
    """Text typed into the filter bar and whether the bar has focus."""

    active: bool = False
    input: str = ""

    def activate(self) -> None:
        """Focus the filter bar, discarding any previous text."""
        self.active = True
        self.input = ""

    def deactivate(self) -> None:
        """Close the filter bar and clear its text."""
        self.active = False
        self.input = ""

    def push_char(self, c: str) -> None:
        self.input += c

    def delete_char(self) -> None:
        """Remove the last character, if any."""
        self.input = self.input[:-1]

    def is_empty(self) -> bool:
        return not self.input

    def matches(self, text: str) -> bool:
        """Case-insensitive substring match; empty input matches everything."""
        if not self.input:
            return True
        return self.input.lower() in text.lower()


def filter_sessions(filter_state: FilterState, sessions: Sequence[SessionRow]) -> list[int]:
    """Indices of the sessions that match the filter."""
    return [
        i
        for i, s in enumerate(sessions)
        if filter_state.matches(f"{s.session_id} {s.first_seen} {s.last_seen} {s.cwd or ''}")
    ]


def filter_events(filter_state: FilterState, events: Sequence[EventRow]) -> list[int]:
    """Indices of the events that match the filter."""
    return [
        i
        for i, e in enumerate(events)
        if filter_state.matches(
            f"{e.event_type} {e.tool_name or ''} {e.session_id} {e.timestamp}"
        )
    ]