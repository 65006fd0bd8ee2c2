"""Rule matching and decision aggregation.

One pipeline for every policy: extract the content a tool call would write,
drop policies whose file filter rejects the path, match each remaining
policy's rules, and fold the results into a single allow/deny Decision.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from typescript_hooks.extract import extract_content
from typescript_hooks.models import Decision, Policy, Violation

logger = logging.getLogger(__name__)


def scan(content: str, policy: Policy) -> list[Violation]:
    """Match content against a policy's rules, at most one violation per rule."""
    violations = []
    for rule in policy.rules:
        if rule.matches(content):
            logger.debug("%s: rule %s matched", policy.name, rule.id)
            violations.append(Violation(rule.id, rule.message, policy.domain))
    return violations


def decide(
    content: str,
    file_path: str | None,
    policies: Sequence[Policy],
    *,
    supported: bool = True,
) -> Decision:
    """Apply policies to already extracted content."""
    if not policies:
        raise ValueError("At least one policy is required")

    scanned: list[Policy] = []
    denied: list[tuple[Policy, list[Violation]]] = []
    # Unsupported tools and empty content are "nothing to check"
    candidates = policies if supported and content else ()
    for policy in candidates:
        if not policy.is_eligible(file_path):
            logger.debug("%s: %s not eligible", policy.name, file_path)
            continue
        scanned.append(policy)
        violations = scan(content, policy)
        if violations:
            denied.append((policy, violations))

    if denied:
        reason = "\n\n".join(policy.deny_reason(found) for policy, found in denied)
        all_violations = tuple(v for _, found in denied for v in found)
        return Decision("deny", reason, all_violations)

    if scanned:
        return Decision("allow", "; ".join(policy.clean_reason for policy in scanned))
    return Decision("allow", policies[0].empty_reason)


def evaluate(data: Any, policies: Sequence[Policy]) -> Decision:
    """Decide on a decoded hook input (any JSON value)."""
    extracted = extract_content(data)
    logger.debug(
        "tool=%s path=%s supported=%s chars=%d",
        data.get("tool_name") if isinstance(data, dict) else None,
        extracted.file_path,
        extracted.supported,
        len(extracted.content),
    )
    return decide(
        extracted.content,
        extracted.file_path,
        policies,
        supported=extracted.supported,
    )
