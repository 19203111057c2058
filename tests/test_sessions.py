from scribe.tui.filter import SessionRow
from scribe.tui.sessions import SessionsState


def mock_sessions(n):
    return [
        SessionRow(
            session_id=f"sess-{i}",
            first_seen="2025-06-01T10:00:00Z",
            last_seen="2025-06-01T12:00:00Z",
            cwd="/tmp",
            event_count=(i + 1) * 10,
        )
        for i in range(n)
    ]


def test_next_wraps():
    state = SessionsState(sessions=mock_sessions(3))
    assert state.selected == 0
    state.next()
    assert state.selected == 1
    state.next()
    assert state.selected == 2
    state.next()
    assert state.selected == 0


def test_prev_wraps():
    state = SessionsState(sessions=mock_sessions(3))
    state.prev()
    assert state.selected == 2
    state.prev()
    assert state.selected == 1


def test_next_empty():
    state = SessionsState()
    state.next()
    assert state.selected == 0
    state.prev()
    assert state.selected == 0


def test_top_bottom():
    state = SessionsState(sessions=mock_sessions(5))
    state.selected = 2
    state.bottom()
    assert state.selected == 4
    state.top()
    assert state.selected == 0


def test_bottom_empty():
    state = SessionsState()
    state.bottom()
    assert state.selected == 0


def test_selected_session_id():
    state = SessionsState()
    assert state.selected_session_id() is None
    state.sessions = mock_sessions(3)
    assert state.selected_session_id() == "sess-0"
    state.next()
    assert state.selected_session_id() == "sess-1"