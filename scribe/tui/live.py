"""State of the Live tab: a feed of newly logged events."""

from __future__ import annotations

import sqlite3
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from scribe.tui.filter import EventRow

MAX_FEED_SIZE = 200
_POLL_LIMIT = 100


@dataclass
class LiveStats:
    """Totals shown at the top of the Live tab."""

    event_count: int
    session_count: int


@dataclass
class LiveState:
    """Feed of recent events, scroll position and arrival rate."""

    last_seen_id: int = 0
    feed: deque[EventRow] = field(default_factory=lambda: deque(maxlen=MAX_FEED_SIZE))
    feed_scroll: int = 0
    auto_scroll: bool = True
    stats_snapshot: LiveStats | None = None
    events_per_minute: float = 0.0
    started_at: float = field(default_factory=time.monotonic)
    total_events_received: int = 0
    initialized: bool = False

    def initialize(self, conn: sqlite3.Connection) -> None:
        """Start from the newest stored event so history is not replayed."""
        (max_id,) = conn.execute("SELECT COALESCE(MAX(id), 0) FROM events").fetchone()
        self.last_seen_id = max_id
        self.started_at = time.monotonic()
        self.total_events_received = 0
        self.events_per_minute = 0.0
        self.initialized = True

    def poll(self, conn: sqlite3.Connection) -> None:
        """Fetch events newer than the last one seen and refresh the totals."""
        cursor = conn.execute(
            "SELECT id, timestamp, session_id, event_type, tool_name, tool_input, "
            "tool_response, cwd, permission_mode, raw_payload "
            "FROM events WHERE id > ? ORDER BY id ASC LIMIT ?",
            (self.last_seen_id, _POLL_LIMIT),
        )
        self.push_events(EventRow(*row) for row in cursor.fetchall())

        elapsed = time.monotonic() - self.started_at
        if elapsed > 0:
            self.events_per_minute = self.total_events_received / (elapsed / 60.0)

        event_count, session_count = conn.execute(
            "SELECT (SELECT COUNT(*) FROM events), (SELECT COUNT(*) FROM sessions)"
        ).fetchone()
        self.stats_snapshot = LiveStats(event_count=event_count, session_count=session_count)

    def push_events(self, rows: Iterable[EventRow]) -> None:
        """Append events to the feed, keeping only the newest MAX_FEED_SIZE."""
        rows = list(rows)
        if rows:
            self.last_seen_id = rows[-1].id
        self.total_events_received += len(rows)
        self.feed.extend(rows)
        if self.auto_scroll and self.feed:
            self.feed_scroll = len(self.feed) - 1

    def scroll_up(self) -> None:
        """Scroll up one row; this pauses auto-scroll."""
        if self.feed_scroll > 0:
            self.feed_scroll -= 1
            self.auto_scroll = False

    def scroll_down(self) -> None:
        if self.feed and self.feed_scroll < len(self.feed) - 1:
            self.feed_scroll += 1

    def scroll_to_bottom(self) -> None:
        """Jump to the newest event and resume auto-scroll."""
        if self.feed:
            self.feed_scroll = len(self.feed) - 1
        self.auto_scroll = True

    def feed_len(self) -> int:
        return len(self.feed)