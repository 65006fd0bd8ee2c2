"""Operator CLI for the content-policy hooks.

    typescript-hooks hook [POLICY ...]        run the PreToolUse contract on stdin
    typescript-hooks check PATH ... [-p NAME] scan files on disk
    typescript-hooks rules [-p NAME]          list the rule tables
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from typescript_hooks.engine import decide
from typescript_hooks.hook import run_hook
from typescript_hooks.models import Policy
from typescript_hooks.policies import UnknownPolicyError, get_policies

app = typer.Typer(help="ESLint/TypeScript bypass and Jest mock prevention hooks.")
console = Console(stderr=True)
stdout_console = Console()

# Directories never walked by `check`
SKIP_DIRS = frozenset({"node_modules", ".git", "dist", "build"})

PolicyOption = Annotated[
    list[str] | None,
    typer.Option("--policy", "-p", help="Policy name (repeatable, default: all)"),
]


def resolve_policies(names: list[str] | None) -> list[Policy]:
    try:
        return get_policies(names)
    except UnknownPolicyError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)


def iter_files(paths: list[Path]):
    """Yield files under the given paths, skipping vendored/build directories."""
    for path in paths:
        if path.is_file():
            yield path
            continue
        for child in sorted(path.rglob("*")):
            if not child.is_file():
                continue
            if SKIP_DIRS.intersection(child.relative_to(path).parts[:-1]):
                continue
            yield child


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


@app.command()
def hook(
    policies: Annotated[
        list[str] | None,
        typer.Argument(help="Policies to enforce (default: all)"),
    ] = None,
) -> None:
    """Read one tool call from stdin and print the PreToolUse verdict.

    Always exits 0; the verdict is in the JSON on stdout.

    Examples:
        echo '{"tool_name": "Write", ...}' | typescript-hooks hook
        echo '{"tool_name": "Write", ...}' | typescript-hooks hook jest-mock-prevention
    """
    raise typer.Exit(run_hook(resolve_policies(policies)))


@app.command()
def check(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to scan")],
    policy: PolicyOption = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Apply the hook policies to files on disk.

    Exits 1 when any file violates a policy.

    Examples:
        typescript-hooks check src/ tests/
        typescript-hooks check src/api.test.ts -p jest-mock-prevention --json
    """
    selected = resolve_policies(policy)
    missing = [str(p) for p in paths if not p.exists()]
    if missing:
        console.print(f"[red]Error:[/red] Path not found: {', '.join(missing)}")
        raise typer.Exit(2)

    findings: list[dict[str, str]] = []
    checked = 0
    for file in iter_files(paths):
        try:
            content = file.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            console.print(f"[yellow]Warning:[/yellow] Skipping non-UTF-8 file {file}")
            continue
        except OSError as e:
            console.print(f"[red]Error:[/red] Cannot read {file}: {e}")
            raise typer.Exit(2)
        checked += 1
        decision = decide(content, str(file), selected)
        for violation in decision.violations:
            findings.append({
                "path": str(file),
                "rule_id": violation.rule_id,
                "domain": violation.domain,
                "message": violation.message,
            })

    if json_output:
        stdout_console.print_json(json.dumps({"checked": checked, "violations": findings}))
    elif findings:
        table = Table(title="Policy violations")
        table.add_column("File", style="cyan", overflow="fold")
        table.add_column("Rule", style="magenta", no_wrap=True)
        table.add_column("Message", overflow="fold")
        for finding in findings:
            table.add_row(finding["path"], finding["rule_id"], finding["message"])
        console.print(table)
        console.print(f"[red]{len(findings)} violation(s)[/red] in {checked} file(s) checked")
    else:
        console.print(f"[green]No violations[/green] in {checked} file(s) checked")

    if findings:
        raise typer.Exit(1)


@app.command()
def rules(
    policy: PolicyOption = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List rule ids, messages and guidance for each policy."""
    selected = resolve_policies(policy)

    if json_output:
        result = {
            p.name: [
                {"id": r.id, "message": r.message, "guidance": r.guidance}
                for r in p.rules
            ]
            for p in selected
        }
        stdout_console.print_json(json.dumps(result))
        return

    for p in selected:
        table = Table(title=f"{p.name} ({p.domain})")
        table.add_column("Rule", style="magenta", no_wrap=True)
        table.add_column("Message", overflow="fold")
        table.add_column("Guidance", style="dim", overflow="fold")
        for r in p.rules:
            table.add_row(r.id, r.message, r.guidance or "")
        console.print(table)


if __name__ == "__main__":
    app()
