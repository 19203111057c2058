"""State of the Sessions tab."""

from __future__ import annotations

from dataclasses import dataclass, field

from scribe.tui.filter import SessionRow


@dataclass
class SessionsState:
    """Loaded session rows and the selected row."""

    sessions: list[SessionRow] = field(default_factory=list)
    selected: int = 0
    loaded: bool = False

    def next(self) -> None:
        """Move the selection down, wrapping at the end."""
        if self.sessions:
            self.selected = (self.selected + 1) % len(self.sessions)

    def prev(self) -> None:
        """Move the selection up, wrapping at the start."""
        if self.sessions:
            self.selected = (self.selected - 1) % len(self.sessions)

    def top(self) -> None:
        self.selected = 0

    def bottom(self) -> None:
        if self.sessions:
            self.selected = len(self.sessions) - 1

    def selected_session_id(self) -> str | None:
        """Session id of the selected row, or None when nothing is selected."""
        if 0 <= self.selected < len(self.sessions):
            return self.sessions[self.selected].session_id
        return None