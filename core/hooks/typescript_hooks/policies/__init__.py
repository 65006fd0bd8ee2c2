"""Registry of the available content policies, keyed by hook name."""

from __future__ import annotations

from typescript_hooks.models import Policy
from typescript_hooks.policies import eslint_typescript, jest_mock

ESLINT_TYPESCRIPT_BYPASS = eslint_typescript.POLICY
JEST_MOCK_PREVENTION = jest_mock.POLICY

POLICIES: dict[str, Policy] = {
    ESLINT_TYPESCRIPT_BYPASS.name: ESLINT_TYPESCRIPT_BYPASS,
    JEST_MOCK_PREVENTION.name: JEST_MOCK_PREVENTION,
}


class UnknownPolicyError(KeyError):
    """Raised when a policy name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown policy '{self.name}'. Available: {', '.join(POLICIES)}"


def get_policies(names: list[str] | None = None) -> list[Policy]:
    """Resolve policy names in the given order; all policies when names is empty."""
    if not names:
        return list(POLICIES.values())
    resolved = []
    for name in names:
        if name not in POLICIES:
            raise UnknownPolicyError(name)
        resolved.append(POLICIES[name])
    return resolved
