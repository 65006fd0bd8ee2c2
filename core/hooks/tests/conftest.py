"""
Shared pytest fixtures for the content-policy hook tests.

`run_policy` drives the hook contract in-process: it feeds a payload (dict or
raw text) through run_hook and returns the parsed verdict, the exit status and
the stderr lines.
"""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from typescript_hooks.hook import run_hook
from typescript_hooks.policies import get_policies


@dataclass
class HookResult:
    """Captured outcome of one hook invocation."""

    exit_code: int
    stdout: str
    stderr_lines: list[str] = field(default_factory=list)

    @property
    def output(self) -> dict[str, Any]:
        return json.loads(self.stdout)

    @property
    def decision(self) -> str:
        return self.output["hookSpecificOutput"]["permissionDecision"]

    @property
    def reason(self) -> str:
        return self.output["hookSpecificOutput"]["permissionDecisionReason"]


RunPolicy = Callable[..., HookResult]


@pytest.fixture
def run_policy() -> RunPolicy:
    """Run named policies against a payload (dict is JSON-encoded, str is sent raw)."""

    def _run(payload: dict[str, Any] | str, *names: str) -> HookResult:
        raw = payload if isinstance(payload, str) else json.dumps(payload)
        stdout = io.StringIO()
        stderr = io.StringIO()
        exit_code = run_hook(
            get_policies(list(names)),
            stdin=io.StringIO(raw),
            stdout=stdout,
            stderr=stderr,
        )
        return HookResult(exit_code, stdout.getvalue(), stderr.getvalue().splitlines())

    return _run


@pytest.fixture
def large_content() -> str:
    """About 27KB of clean TypeScript."""
    return "".join(f"const var{i} = 'value{i}';\n" for i in range(1, 1001))
