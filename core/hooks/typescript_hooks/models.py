"""Data model for the PreToolUse content-policy gate.

Wire shapes (what Claude Code sends and expects back) are TypedDicts;
everything the gate builds itself is a frozen dataclass.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, TypedDict

PermissionDecision = Literal["allow", "deny"]


class EditEntry(TypedDict, total=False):
    """One edit of a MultiEdit call."""

    old_string: str
    new_string: str


class ToolInput(TypedDict, total=False):
    """Tool parameters from Claude Code."""

    file_path: str
    content: str
    old_string: str
    new_string: str
    edits: list[EditEntry]


class HookInput(TypedDict, total=False):
    """JSON input received via stdin."""

    tool_name: str
    tool_input: ToolInput


class HookSpecificOutput(TypedDict, total=False):
    """Inner hook output structure."""

    hookEventName: str
    permissionDecision: PermissionDecision
    permissionDecisionReason: str


class HookOutput(TypedDict):
    """JSON output returned via stdout."""

    hookSpecificOutput: HookSpecificOutput


@dataclass(frozen=True)
class Rule:
    """A named pattern with the message reported when it matches."""

    id: str
    pattern: re.Pattern[str]
    message: str
    guidance: str | None = None

    def matches(self, content: str) -> bool:
        return self.pattern.search(content) is not None

    def describe(self) -> str:
        """Message plus remediation hint, as listed in a deny reason."""
        if self.guidance:
            return f"{self.message} ({self.guidance})"
        return self.message


@dataclass(frozen=True)
class Violation:
    """A rule that fired for one content blob."""

    rule_id: str
    message: str
    domain: str

    def stderr_line(self) -> str:
        return f"{self.domain} detected: {self.message}"


@dataclass(frozen=True)
class Policy:
    """An ordered rule table scoped to one policy domain.

    ``is_eligible`` receives the file path (or None when the tool call has no
    path) and decides whether the content is scanned at all.
    """

    name: str
    domain: str
    label: str
    rules: tuple[Rule, ...]
    is_eligible: Callable[[str | None], bool]
    clean_reason: str
    empty_reason: str
    guidance: str

    def deny_reason(self, violations: list[Violation]) -> str:
        by_id = {v.rule_id for v in violations}
        lines = [f"- {rule.describe()}" for rule in self.rules if rule.id in by_id]
        return f"{self.label}:\n" + "\n".join(lines) + f"\n\n{self.guidance}"


@dataclass(frozen=True)
class Decision:
    """Verdict for one tool invocation."""

    permission: PermissionDecision
    reason: str
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def denied(self) -> bool:
        return self.permission == "deny"

    def to_output(self) -> HookOutput:
        """Render in Claude Code hook format."""
        return {
            "hookSpecificOutput": {
                "hookEventName": "PreToolUse",
                "permissionDecision": self.permission,
                "permissionDecisionReason": self.reason,
            }
        }
