"""Key handling for the terminal interface.

A key is either a single character or one of the :class:`Key` names.
"""

from __future__ import annotations

import enum

from scribe.tui.app import App, Tab


class Key(str, enum.Enum):
    """Keys that do not produce a character."""

    ESC = "esc"
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    BACK_TAB = "backtab"
    UP = "up"
    DOWN = "down"


def _is_char(key: str) -> bool:
    return not isinstance(key, Key) and len(key) == 1


def handle_key(app: App, key: str) -> None:
    """Apply one key press to the application state."""
    if app.show_help:
        if key in ("?", Key.ESC):
            app.toggle_help()
        return

    if app.filter.active:
        if key == Key.ESC:
            app.filter.deactivate()
        elif key == Key.ENTER:
            app.filter.active = False
        elif key == Key.BACKSPACE:
            app.filter.delete_char()
        elif _is_char(key):
            app.filter.push_char(key)
        return

    if key == "q":
        app.quit()
    elif key == "?":
        app.toggle_help()
    elif key == "/" and app.active_tab in (Tab.SESSIONS, Tab.EVENTS):
        app.filter.activate()
    elif key == "1":
        app.set_tab(Tab.SESSIONS)
    elif key == "2":
        app.set_tab(Tab.EVENTS)
    elif key == "3":
        app.stats.loaded = False
        app.set_tab(Tab.STATS)
    elif key == "4":
        app.set_tab(Tab.LIVE)
    elif key == "5":
        app.policy.loaded = False
        app.set_tab(Tab.POLICY)
    elif key == Key.TAB:
        if app.active_tab is Tab.EVENTS and app.events.expanded is not None:
            app.events.toggle_detail_mode()
        elif app.active_tab is Tab.POLICY:
            app.policy.next_pane()
        else:
            app.next_tab()
    elif key == Key.BACK_TAB:
        app.prev_tab()
    else:
        _TAB_HANDLERS[app.active_tab](app, key)


def _handle_sessions_key(app: App, key: str) -> None:
    sessions = app.sessions
    if key in (Key.DOWN, "j"):
        sessions.next()
    elif key in (Key.UP, "k"):
        sessions.prev()
    elif key == "g":
        sessions.top()
    elif key == "G":
        sessions.bottom()
    elif key == Key.ENTER:
        session_id = sessions.selected_session_id()
        if session_id is not None:
            app.events.set_session_filter(session_id)
            app.set_tab(Tab.EVENTS)


def _handle_events_key(app: App, key: str) -> None:
    events = app.events
    if key in (Key.DOWN, "j"):
        events.next()
    elif key in (Key.UP, "k"):
        events.prev()
    elif key == "g":
        events.top()
    elif key == "G":
        events.bottom()
    elif key == Key.ENTER:
        events.toggle_expand()
    elif key == Key.ESC:
        if events.expanded is not None:
            events.expanded = None
        elif events.session_filter is not None:
            events.clear_session_filter()
    elif key == Key.BACKSPACE:
        if events.session_filter is not None:
            events.clear_session_filter()


def _handle_stats_key(app: App, key: str) -> None:
    stats = app.stats
    if key in (Key.DOWN, "j"):
        stats.scroll_down()
    elif key in (Key.UP, "k"):
        stats.scroll_up()
    elif key == "g":
        stats.scroll_top()
    elif key == "G":
        stats.scroll_bottom()


def _handle_live_key(app: App, key: str) -> None:
    live = app.live
    if key in (Key.UP, "k"):
        live.scroll_up()
    elif key in (Key.DOWN, "j"):
        live.scroll_down()
    elif key == "G":
        live.scroll_to_bottom()


def _handle_policy_key(app: App, key: str) -> None:
    policy = app.policy
    if key in (Key.DOWN, "j"):
        policy.next()
    elif key in (Key.UP, "k"):
        policy.prev()
    elif key == "g":
        policy.top()
    elif key == "G":
        policy.bottom()


_TAB_HANDLERS = {
    Tab.SESSIONS: _handle_sessions_key,
    Tab.EVENTS: _handle_events_key,
    Tab.STATS: _handle_stats_key,
    Tab.LIVE: _handle_live_key,
    Tab.POLICY: _handle_policy_key,
}