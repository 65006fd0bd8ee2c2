#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.11"
# dependencies = []
# ///
"""
Pretooluse hook for Claude Code that blocks ESLint/TypeScript rule bypasses.

Denies Write/Edit/MultiEdit calls on .ts/.tsx/.js/.jsx/.mjs files (or calls
without a file path) whose new content contains eslint-disable comments,
@ts-ignore, @ts-expect-error, @ts-nocheck or `as any` casts.

Fail-closed principle: block operations if hook encounters errors.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from typescript_hooks.hook import eslint_typescript_bypass  # noqa: E402

if __name__ == "__main__":
    eslint_typescript_bypass()
