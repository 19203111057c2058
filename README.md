# scribe

Building blocks for an audit log of Claude Code hook events: a tolerant
model of the hook payloads, and the state behind a keyboard-driven
terminal browser over recorded sessions, events, statistics, a live
feed and policy decisions.

The package has no runtime dependencies beyond the standard library.

## Hook payloads

Every hook event arrives as a JSON object. Only `session_id`,
`hook_event_name` and `cwd` are common to all events (they default to
empty strings); every other field is optional and defaults to `None`.
Keys the model does not know are ignored. A known field of the wrong
type, or a payload that is not a JSON object, raises `ValueError`.

```python
from scribe.models import HookInput, parse_hook_input

hook = parse_hook_input(
    '{"session_id": "s1", "hook_event_name": "PreToolUse", "cwd": "/tmp",'
    ' "tool_name": "Bash", "tool_input": {"command": "ls"}}'
)
hook.hook_event_name   # "PreToolUse"
hook.tool_name         # "Bash"
hook.tool_input        # {"command": "ls"}
hook.permission_mode   # None

same = HookInput.from_dict({"session_id": "s1", "hook_event_name": "Stop", "cwd": "/tmp"})
```

## Browser state

The browser is organised in five tabs, each with its own state object
that can be driven and inspected without a terminal:

| Tab      | Module                 | State            |
|----------|------------------------|------------------|
| Sessions | `scribe.tui.sessions`  | `SessionsState`  |
| Events   | `scribe.tui.events`    | `EventsState`    |
| Stats    | `scribe.tui.stats`     | `StatsState`     |
| Live     | `scribe.tui.live`      | `LiveState`      |
| Policy   | `scribe.tui.policy`    | `PolicyState`    |

The row types live beside them: `SessionRow` and `EventRow` in
`scribe.tui.filter`, `EnforcementRow` and `FullRuleRow` in
`scribe.tui.policy`.

`scribe.tui.app.App` holds the active tab, the help overlay, the shared
filter bar and one state object per tab. `scribe.tui.app.Tab` lists the
tabs in order; `App.next_tab()` and `App.prev_tab()` wrap around, and
every tab change closes the filter bar.

Selection on the Sessions and Events tabs wraps around; on the Policy tab
each pane keeps its own selection, which stops at the ends. Moving on the
Events tab collapses the expanded row. `EventsState.detail_mode` switches
between `DetailMode.STRUCTURED` and `DetailMode.RAW_JSON`;
`scribe.tui.events.format_raw_json(event)` and
`pretty_json_truncated(json_str, max_lines)` produce the lines of the
detail pane.

### Filtering

The filter bar matches case-insensitively against a row's visible
fields and yields the positions of the rows that match:

```python
from scribe.tui.filter import FilterState, SessionRow, filter_sessions

sessions = [
    SessionRow("sess-abc", "2025-06-01T10:00:00Z", "2025-06-01T12:00:00Z",
               "/home/user/project", 10),
    SessionRow("sess-xyz", "2025-06-02T10:00:00Z", "2025-06-02T12:00:00Z", "/tmp", 5),
]

flt = FilterState()
flt.activate()
for ch in "project":
    flt.push_char(ch)
filter_sessions(flt, sessions)   # [0]
```

An empty filter matches every row.

### Keys

`scribe.tui.keys.handle_key(app, key)` applies one key press to an
`App`. A key is a single character or a member of
`scribe.tui.keys.Key` (`ESC`, `ENTER`, `BACKSPACE`, `TAB`, `BACK_TAB`,
`UP`, `DOWN`). Precedence: the help overlay first (only `?` and `Esc`
close it), then the filter bar while it has focus, then the global
bindings, then the active tab.

| Key               | Action                                                    |
|-------------------|-----------------------------------------------------------|
| `1`–`5`           | Switch to tab (Stats and Policy are marked for reload)    |
| `Tab`             | Next tab; toggles detail mode on an expanded event, switches pane on Policy |
| `Shift-Tab`       | Previous tab                                              |
| `j` / `k`, arrows | Move down / up                                            |
| `g` / `G`         | Jump to top / bottom                                      |
| `Enter`           | Drill down from a session, expand an event                |
| `/`               | Filter (Sessions, Events)                                 |
| `Esc`             | Close filter, collapse, or clear the session filter      |
| `Backspace`       | Clear the session filter on the Events tab               |
| `?`               | Toggle help                                               |
| `q`               | Quit (sets `App.should_quit`)                            |

### Live feed

`LiveState.initialize(conn)` and `LiveState.poll(conn)` read from an open
`sqlite3.Connection` that has `events` and `sessions` tables.
`LiveState.push_events(rows)` appends events directly. The feed keeps at
most 200 events, dropping the oldest first, and stops following new
events once you scroll up; `G` resumes.

## What the package does not do

- It does not draw anything: there is no terminal screen, event loop or
  rendering, only the state and key handling behind one.
- It provides no command-line program.
- It does not create, write or migrate a database, and it does not load
  the Sessions, Events, Stats or Policy tabs from one; their rows are
  set by the caller.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e .[test]
pytest
```