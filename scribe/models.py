"""Hook event payloads received on standard input."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

_BOOL_FIELDS = frozenset({"stop_hook_active", "is_interrupt"})
_JSON_FIELDS = frozenset(
    {"tool_input", "tool_response", "requested_schema", "content", "permission_suggestions"}
)
_REQUIRED_STR_FIELDS = frozenset({"session_id", "hook_event_name", "cwd"})
_LIST_FIELDS = frozenset({"globs"})


@dataclass
class HookInput:
    """A hook event.

    Only ``session_id``, ``hook_event_name`` and ``cwd`` are always present
    (defaulting to empty strings); every event-specific field is optional.
    """

    session_id: str = ""
    hook_event_name: str = ""
    cwd: str = ""
    permission_mode: str | None = None
    transcript_path: str | None = None

    tool_name: str | None = None
    tool_input: Any = None
    tool_response: Any = None
    tool_use_id: str | None = None

    prompt: str | None = None

    stop_hook_active: bool | None = None
    last_assistant_message: str | None = None

    error: str | None = None
    error_details: str | None = None

    agent_id: str | None = None
    agent_type: str | None = None
    agent_transcript_path: str | None = None

    source: str | None = None
    model: str | None = None

    reason: str | None = None

    is_interrupt: bool | None = None

    message: str | None = None
    title: str | None = None
    notification_type: str | None = None

    trigger: str | None = None
    custom_instructions: str | None = None
    compact_summary: str | None = None

    file_path: str | None = None
    memory_type: str | None = None
    load_reason: str | None = None
    globs: list[str] | None = field(default=None)
    trigger_file_path: str | None = None
    parent_file_path: str | None = None

    worktree_path: str | None = None

    elicitation_id: str | None = None
    mcp_server_name: str | None = None
    mode: str | None = None
    url: str | None = None
    requested_schema: Any = None
    action: str | None = None
    content: Any = None

    teammate_name: str | None = None
    team_name: str | None = None

    task_id: str | None = None
    task_subject: str | None = None
    task_description: str | None = None

    permission_suggestions: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HookInput":
        """Build a HookInput from decoded JSON, ignoring unknown keys.

        Raises ValueError when a known field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ValueError("hook payload must be a JSON object")
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            values[f.name] = _check_field(f.name, data[f.name])
        return cls(**values)


def _check_field(name: str, value: Any) -> Any:
    if name in _JSON_FIELDS:
        return value
    if name in _REQUIRED_STR_FIELDS:
        if not isinstance(value, str):
            raise ValueError(f"field {name!r} must be a string")
        return value
    if value is None:
        return None
    if name in _BOOL_FIELDS:
        if not isinstance(value, bool):
            raise ValueError(f"field {name!r} must be a boolean")
        return value
    if name in _LIST_FIELDS:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"field {name!r} must be a list of strings")
        return list(value)
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string")
    return value


def parse_hook_input(text: str) -> HookInput:
    """Parse a JSON hook payload. Raises ValueError on malformed input."""
    return HookInput.from_dict(json.loads(text))