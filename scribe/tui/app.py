"""Top-level state of the terminal interface: tabs, help overlay and filter."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from scribe.tui.events import EventsState
from scribe.tui.filter import FilterState
from scribe.tui.live import LiveState
from scribe.tui.policy import PolicyState
from scribe.tui.sessions import SessionsState
from scribe.tui.stats import StatsState


class Tab(enum.Enum):
    """The navigable tabs, in display order."""

    SESSIONS = "Sessions"
    EVENTS = "Events"
    STATS = "Stats"
    LIVE = "Live"
    POLICY = "Policy"

    def title(self) -> str:
        return self.value

    def index(self) -> int:
        """Position of the tab in the tab bar, from zero."""
        return list(Tab).index(self)

    @classmethod
    def from_index(cls, i: int) -> "Tab | None":
        """The tab at position ``i``, or None when there is none."""
        tabs = list(cls)
        if 0 <= i < len(tabs):
            return tabs[i]
        return None


@dataclass
class App:
    """Everything the interface shows and how the user is navigating it."""

    tick_rate: float = 1.0
    since: str | None = None
    db_path: str = ""
    active_tab: Tab = Tab.SESSIONS
    show_help: bool = False
    should_quit: bool = False
    sessions: SessionsState = field(default_factory=SessionsState)
    events: EventsState = field(default_factory=EventsState)
    stats: StatsState = field(default_factory=StatsState)
    live: LiveState = field(default_factory=LiveState)
    policy: PolicyState = field(default_factory=PolicyState)
    filter: FilterState = field(default_factory=FilterState)

    def set_tab(self, tab: Tab) -> None:
        """Switch to ``tab`` and close the filter bar."""
        self.active_tab = tab
        self.filter.deactivate()

    def next_tab(self) -> None:
        tabs = list(Tab)
        self.active_tab = tabs[(self.active_tab.index() + 1) % len(tabs)]
        self.filter.deactivate()

    def prev_tab(self) -> None:
        tabs = list(Tab)
        self.active_tab = tabs[(self.active_tab.index() - 1) % len(tabs)]
        self.filter.deactivate()

    def toggle_help(self) -> None:
        self.show_help = not self.show_help

    def quit(self) -> None:
        self.should_quit = True