"""PreToolUse content-policy hooks for TypeScript projects.

Vetoes Write/Edit/MultiEdit tool calls that add ESLint/TypeScript bypasses
or Jest mocks. See typescript_hooks.hook for the stdin/stdout contract.
"""

__version__ = "1.0.0"
