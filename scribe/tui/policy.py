"""State of the Policy tab: classification totals, enforcements and rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class PolicyPane(enum.Enum):
    """Pane of the Policy tab that has focus."""

    ENFORCEMENTS = "Enforcements"
    RULES = "Rules"


@dataclass
class EnforcementRow:
    """One recorded allow or deny decision."""

    id: int
    timestamp: str
    session_id: str
    tool_name: str
    tool_input: str | None
    action: str
    reason: str | None
    rule_id: int | None


@dataclass
class FullRuleRow:
    """A policy rule with all its columns."""

    id: int
    tool_pattern: str
    input_pattern: str | None
    action: str
    reason: str
    priority: int
    enabled: bool
    source: str
    created_at: str


@dataclass
class PolicyState:
    """Loaded policy data and a separate selection for each pane."""

    classification_summary: list[Any] = field(default_factory=list)
    enforcements: list[EnforcementRow] = field(default_factory=list)
    rules: list[FullRuleRow] = field(default_factory=list)
    active_pane: PolicyPane = PolicyPane.ENFORCEMENTS
    enforcement_selected: int = 0
    rule_selected: int = 0
    loaded: bool = False

    def next_pane(self) -> None:
        """Switch focus between the enforcements and rules panes."""
        self.active_pane = (
            PolicyPane.RULES
            if self.active_pane is PolicyPane.ENFORCEMENTS
            else PolicyPane.ENFORCEMENTS
        )

    def next(self) -> None:
        """Move the selection down in the active pane, stopping at the end."""
        if self.active_pane is PolicyPane.ENFORCEMENTS:
            if self.enforcements:
                self.enforcement_selected = min(
                    self.enforcement_selected + 1, len(self.enforcements) - 1
                )
        elif self.rules:
            self.rule_selected = min(self.rule_selected + 1, len(self.rules) - 1)

    def prev(self) -> None:
        """Move the selection up in the active pane, stopping at the start."""
        if self.active_pane is PolicyPane.ENFORCEMENTS:
            self.enforcement_selected = max(self.enforcement_selected - 1, 0)
        else:
            self.rule_selected = max(self.rule_selected - 1, 0)

    def top(self) -> None:
        if self.active_pane is PolicyPane.ENFORCEMENTS:
            self.enforcement_selected = 0
        else:
            self.rule_selected = 0

    def bottom(self) -> None:
        if self.active_pane is PolicyPane.ENFORCEMENTS:
            if self.enforcements:
                self.enforcement_selected = len(self.enforcements) - 1
        elif self.rules:
            self.rule_selected = len(self.rules) - 1