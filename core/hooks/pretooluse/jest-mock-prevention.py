#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.11"
# dependencies = []
# ///
"""
Pretooluse hook for Claude Code that blocks Jest mocking in test files.

Denies Write/Edit/MultiEdit calls on *.test.*, *.spec.*, __tests__/ and
tests/ files (or calls without a file path) whose new content uses jest.fn,
jest.mock, jest.spyOn, mock types, mock configuration or call matchers.

Fail-closed principle: block operations if hook encounters errors.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from typescript_hooks.hook import jest_mock_prevention  # noqa: E402

if __name__ == "__main__":
    jest_mock_prevention()
