"""ESLint/TypeScript bypass detection.

Blocks writes that silence the linter or the type checker instead of fixing
the code: eslint-disable comments, @ts-ignore/@ts-expect-error/@ts-nocheck
and `as any` casts.
"""

import re

from typescript_hooks.filters import is_lintable_source
from typescript_hooks.models import Policy, Rule

# Start of a line or block comment, followed by any horizontal whitespace
_COMMENT = r"(?://|/\*)[ \t]*"

RULES = (
    Rule(
        "eslint-line",
        re.compile(r"//[ \t]*eslint-disable-(?:next-)?line\b"),
        "ESLint disable comment found",
        "fix the reported lint error on that line",
    ),
    Rule(
        "eslint-block",
        re.compile(r"/\*[ \t]*eslint-disable\b"),
        "ESLint block disable comment found",
        "fix the code the disabled rules report",
    ),
    Rule(
        "ts-ignore",
        re.compile(_COMMENT + r"@ts-ignore\b"),
        "TypeScript @ts-ignore comment found",
        "correct the type error instead of hiding it",
    ),
    Rule(
        "ts-expect-error",
        re.compile(_COMMENT + r"@ts-expect-error\b"),
        "TypeScript @ts-expect-error comment found",
        "correct the type error instead of expecting it",
    ),
    Rule(
        "ts-nocheck",
        re.compile(_COMMENT + r"@ts-nocheck\b"),
        "TypeScript @ts-nocheck comment found",
        "type-check the whole file",
    ),
    Rule(
        "as-any",
        re.compile(r"\bas\s+any\b"),
        "TypeScript 'as any' type casting found",
        "use a specific type, or `unknown` narrowed with a type guard",
    ),
)

GUIDANCE = (
    "Fix the underlying type or linting issue instead of bypassing the check. "
    "Add accurate type annotations, narrow values with type guards, "
    "and restructure code the linter flags. "
    "If a rule is wrong for the whole project, change the ESLint or tsconfig "
    "configuration rather than suppressing it inline."
)

POLICY = Policy(
    name="eslint-typescript-bypass",
    domain="Rule bypass",
    label="ESLint/TypeScript rule bypasses detected",
    rules=RULES,
    is_eligible=is_lintable_source,
    clean_reason="No ESLint/TypeScript rule bypasses detected",
    empty_reason="No content to check",
    guidance=GUIDANCE,
)
