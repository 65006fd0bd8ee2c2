"""Jest mock prevention.

Tests must exercise real implementations through dependency injection and
real fixtures (a throwaway database from getTestSql, for example), so any
Jest mocking API in a test file is rejected.
"""

import re

from typescript_hooks.filters import is_test_file
from typescript_hooks.models import Policy, Rule

# Module specifier in either quote style
_FROM = r"""\s*from\s*["']{}["']"""

RULES = (
    Rule(
        "jest-fn",
        re.compile(r"\bjest\.fn\s*\("),
        "jest.fn() mock function found",
    ),
    Rule(
        "jest-mock",
        re.compile(r"\bjest\.mock\s*\("),
        "jest.mock() module mocking found",
    ),
    Rule(
        "jest-spyon",
        re.compile(r"\bjest\.spyOn\s*\("),
        "jest.spyOn() spy found",
    ),
    Rule(
        "jest-mock-type",
        re.compile(r"\bjest\.Mock\s*<"),
        "jest.Mock<> type annotation found",
    ),
    Rule(
        "jest-mocked-type",
        re.compile(r"\bjest\.Mocked\s*<"),
        "jest.Mocked<> type found",
    ),
    Rule(
        "mock-config",
        re.compile(r"\b(?:mockReturnValue|mockResolvedValue|mockRejectedValue|mockImplementation)"),
        "Mock configuration methods found",
    ),
    Rule(
        "mock-cleanup",
        re.compile(r"\bjest\.(?:clearAllMocks|resetAllMocks|restoreAllMocks)\b"),
        "jest mock cleanup methods found",
    ),
    Rule(
        "mock-from-module",
        re.compile(r"\bjest\.(?:createMockFromModule|genMockFromModule)\s*\("),
        "jest.createMockFromModule() found",
    ),
    Rule(
        "require-actual-mock",
        re.compile(r"\bjest\.(?:requireActual|requireMock)\s*\("),
        "jest.requireActual() or jest.requireMock() found",
    ),
    Rule(
        "mock-matchers",
        re.compile(r"\btoHaveBeenCalled"),
        "Mock verification matchers found",
        "assert on returned values or persisted state instead",
    ),
    Rule(
        "import-jest-mock",
        re.compile(r"""(?:\bfrom\s*|\brequire\s*\(\s*)["']jest-mock["']"""),
        "Import from jest-mock package detected",
    ),
    Rule(
        "import-jest-globals-mock-util",
        re.compile(
            r"\bimport\s+(?:type\s+)?\{[^}]*\b(?:fn|spyOn|mocked)\b[^}]*\}"
            + _FROM.format("@jest/globals")
        ),
        "Import of Jest mock utilities detected",
        "import only describe, it, expect and lifecycle hooks",
    ),
    Rule(
        "import-mock-type",
        re.compile(r"\bimport\s+(?:type\s+)?\{[^}]*\b(?:Mock|Mocked)\b[^}]*\}" + _FROM.format("jest")),
        "Import of Jest mock types detected",
    ),
)

GUIDANCE = (
    "NO MOCKS ALLOWED. Test real implementations instead: use dependency injection "
    "to pass real collaborators into the code under test, and use real fixtures "
    "such as `const { sql } = await getTestSql();` for an isolated test database "
    "(then `createHandlers({ sql })`). Verify behavior through return values and "
    "stored state, not through call recordings."
)

POLICY = Policy(
    name="jest-mock-prevention",
    domain="Jest mocking",
    label="Jest mocking patterns detected",
    rules=RULES,
    is_eligible=is_test_file,
    clean_reason="No Jest mocking patterns detected",
    empty_reason="No test content to check",
    guidance=GUIDANCE,
)
