from scribe.tui.app import App, Tab
from scribe.tui.events import DetailMode
from scribe.tui.filter import EventRow, SessionRow
from scribe.tui.keys import Key, handle_key
from scribe.tui.policy import PolicyPane


def _sessions(n):
    return [
        SessionRow(
            session_id=f"sess-{i}",
            first_seen="2025-06-01T10:00:00Z",
            last_seen="2025-06-01T12:00:00Z",
            cwd="/tmp",
            event_count=10,
        )
        for i in range(n)
    ]


def _events(n):
    return [
        EventRow(
            id=i,
            timestamp="2025-06-01T10:00:00Z",
            session_id="s1",
            event_type="PreToolUse",
            tool_name="Bash",
            tool_input=None,
            tool_response=None,
            cwd=None,
            permission_mode=None,
            raw_payload="{}",
        )
        for i in range(n)
    ]


def test_quit_key():
    app = App()
    handle_key(app, "q")
    assert app.should_quit


def test_number_keys_select_tabs():
    app = App()
    for key, tab in zip("12345", Tab):
        handle_key(app, key)
        assert app.active_tab is tab


def test_tab_and_backtab_cycle():
    app = App()
    handle_key(app, Key.TAB)
    assert app.active_tab is Tab.EVENTS
    handle_key(app, Key.BACK_TAB)
    handle_key(app, Key.BACK_TAB)
    assert app.active_tab is Tab.POLICY


def test_help_captures_keys():
    app = App()
    handle_key(app, "?")
    assert app.show_help
    handle_key(app, "q")
    handle_key(app, "2")
    assert not app.should_quit
    assert app.active_tab is Tab.SESSIONS
    handle_key(app, Key.ESC)
    assert not app.show_help


def test_filter_typing_and_confirm():
    app = App()
    handle_key(app, "/")
    assert app.filter.active
    for c in "bq":
        handle_key(app, c)
    handle_key(app, Key.BACKSPACE)
    assert app.filter.input == "b"
    assert not app.should_quit
    handle_key(app, Key.ENTER)
    assert not app.filter.active
    assert app.filter.input == "b"


def test_filter_escape_clears():
    app = App()
    app.set_tab(Tab.EVENTS)
    handle_key(app, "/")
    handle_key(app, "x")
    handle_key(app, Key.ESC)
    assert not app.filter.active
    assert app.filter.input == ""


def test_slash_ignored_outside_list_tabs():
    app = App()
    app.set_tab(Tab.STATS)
    handle_key(app, "/")
    assert not app.filter.active


def test_stats_and_policy_keys_force_reload():
    app = App()
    app.stats.loaded = True
    app.policy.loaded = True
    handle_key(app, "3")
    assert not app.stats.loaded
    handle_key(app, "5")
    assert not app.policy.loaded


def test_sessions_drill_down():
    app = App()
    app.sessions.sessions = _sessions(3)
    handle_key(app, "j")
    handle_key(app, Key.ENTER)
    assert app.active_tab is Tab.EVENTS
    assert app.events.session_filter == "sess-1"
    assert not app.events.loaded


def test_sessions_navigation_keys():
    app = App()
    app.sessions.sessions = _sessions(4)
    handle_key(app, "G")
    assert app.sessions.selected == 3
    handle_key(app, Key.DOWN)
    assert app.sessions.selected == 0
    handle_key(app, "k")
    assert app.sessions.selected == 3
    handle_key(app, "g")
    assert app.sessions.selected == 0


def test_events_tab_toggles_detail_when_expanded():
    app = App()
    app.set_tab(Tab.EVENTS)
    app.events.events = _events(2)
    handle_key(app, Key.ENTER)
    assert app.events.expanded == 0
    handle_key(app, Key.TAB)
    assert app.events.detail_mode is DetailMode.RAW_JSON
    assert app.active_tab is Tab.EVENTS


def test_events_escape_collapses_then_clears_filter():
    app = App()
    app.set_tab(Tab.EVENTS)
    app.events.events = _events(2)
    app.events.session_filter = "s1"
    handle_key(app, Key.ENTER)
    handle_key(app, Key.ESC)
    assert app.events.expanded is None
    assert app.events.session_filter == "s1"
    handle_key(app, Key.ESC)
    assert app.events.session_filter is None


def test_events_backspace_clears_session_filter():
    app = App()
    app.set_tab(Tab.EVENTS)
    app.events.set_session_filter("s1")
    handle_key(app, Key.BACKSPACE)
    assert app.events.session_filter is None


def test_policy_tab_key_cycles_pane():
    app = App()
    app.set_tab(Tab.POLICY)
    handle_key(app, Key.TAB)
    assert app.active_tab is Tab.POLICY
    assert app.policy.active_pane is PolicyPane.RULES


def test_stats_scroll_keys():
    app = App()
    app.set_tab(Tab.STATS)
    app.stats.total_lines = 10
    handle_key(app, "j")
    assert app.stats.scroll_offset == 1
    handle_key(app, "G")
    assert app.stats.scroll_offset == 9
    handle_key(app, "g")
    assert app.stats.scroll_offset == 0


def test_live_scroll_keys():
    app = App()
    app.set_tab(Tab.LIVE)
    app.live.push_events(_events(5))
    handle_key(app, Key.UP)
    assert not app.live.auto_scroll
    assert app.live.feed_scroll == 3
    handle_key(app, "G")
    assert app.live.auto_scroll
    assert app.live.feed_scroll == 4