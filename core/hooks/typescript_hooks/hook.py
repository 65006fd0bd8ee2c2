"""PreToolUse hook I/O: one JSON tool call on stdin, one JSON verdict on stdout.

Contract with Claude Code:
- stdout carries exactly one hookSpecificOutput document.
- stderr carries one "<Domain> detected: <message>" line per violation.
- The exit status is always 0. A nonzero exit is read as a broken hook,
  not as a policy decision, so every outcome (including unreadable input
  and internal errors) is reported as an allow/deny verdict instead.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence
from typing import IO

from typescript_hooks.engine import evaluate
from typescript_hooks.models import Decision, Policy
from typescript_hooks.policies import ESLINT_TYPESCRIPT_BYPASS, JEST_MOCK_PREVENTION

logger = logging.getLogger(__name__)

INVALID_JSON_REASON = "Invalid JSON input provided"
TOO_DEEP_REASON = "JSON input nested too deeply to inspect"


def read_input(stream: IO[str]) -> str:
    """Read all of stdin as UTF-8 regardless of the locale encoding."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer.read().decode("utf-8")
    return stream.read()


def decide_from_text(raw: str, policies: Sequence[Policy]) -> Decision:
    try:
        data = json.loads(raw)
    except ValueError:
        logger.debug("Hook received malformed JSON input")
        return Decision("deny", INVALID_JSON_REASON)
    except RecursionError:
        # Contents past the recursion limit are unknown
        logger.debug("Hook received JSON nested beyond the recursion limit")
        return Decision("deny", TOO_DEEP_REASON)
    return evaluate(data, policies)


def run_hook(
    policies: Sequence[Policy],
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Run the hook contract once. Returns the exit status (always 0)."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        decision = decide_from_text(read_input(stdin), policies)
    except UnicodeDecodeError:
        decision = Decision("deny", INVALID_JSON_REASON)
    except Exception as e:
        # Fail-closed: if hook crashes, block the operation
        decision = Decision("deny", f"Hook error (fail-closed): {e}")

    for violation in decision.violations:
        print(violation.stderr_line(), file=stderr)
    print(json.dumps(decision.to_output()), file=stdout)
    stdout.flush()
    return 0


def eslint_typescript_bypass() -> None:
    """Console script: ESLint/TypeScript bypass hook."""
    sys.exit(run_hook([ESLINT_TYPESCRIPT_BYPASS]))


def jest_mock_prevention() -> None:
    """Console script: Jest mock prevention hook."""
    sys.exit(run_hook([JEST_MOCK_PREVENTION]))
