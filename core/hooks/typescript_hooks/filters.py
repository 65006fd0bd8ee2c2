"""File eligibility predicates.

Bypass comments matter in any shipped JS/TS source; mock APIs only matter
inside test code. A tool call without a file path is always scanned.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

LINTABLE_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx", ".mjs"})

TEST_FILE_PATTERN = re.compile(r"\.(?:test|spec)\.(?:ts|tsx|js|jsx)$", re.IGNORECASE)
TEST_DIR_PATTERN = re.compile(r"(?:^|/)(?:__tests__|tests)/")


def normalize_path(file_path: str) -> str:
    return file_path.replace("\\", "/")


def is_lintable_source(file_path: str | None) -> bool:
    """True for JS/TS sources (and for calls without a path)."""
    if file_path is None:
        return True
    suffix = PurePosixPath(normalize_path(file_path)).suffix.lower()
    return suffix in LINTABLE_EXTENSIONS


def is_test_file(file_path: str | None) -> bool:
    """True for *.test.*, *.spec.*, __tests__/ and tests/ paths (and no path)."""
    if file_path is None:
        return True
    path = normalize_path(file_path)
    return bool(TEST_FILE_PATTERN.search(path) or TEST_DIR_PATTERN.search(path))
