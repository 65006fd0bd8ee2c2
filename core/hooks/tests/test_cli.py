"""Tests for the typescript-hooks operator CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from typescript_hooks.cli import app

runner = CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    src.mkdir()
    (src / "api.ts").write_text("// @ts-ignore\nexport const api = 1;\n")
    (src / "api.test.ts").write_text("const fetcher = jest.fn();\n")
    (tmp_path / "README.md").write_text("Never write // @ts-ignore or jest.fn().\n")
    vendored = tmp_path / "node_modules" / "pkg"
    vendored.mkdir(parents=True)
    (vendored / "index.ts").write_text("export default x as any;\n")
    return tmp_path


class TestHook:
    def test_clean_write(self):
        payload = {"tool_name": "Write", "tool_input": {"file_path": "/src/a.ts", "content": "export {};"}}
        result = runner.invoke(app, ["hook", "eslint-typescript-bypass"], input=json.dumps(payload))
        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["hookSpecificOutput"]["permissionDecision"] == "allow"

    def test_all_policies_by_default(self):
        payload = {"tool_name": "Write", "tool_input": {"file_path": "/src/a.test.ts", "content": "jest.mock('x');"}}
        result = runner.invoke(app, ["hook"], input=json.dumps(payload))
        assert result.exit_code == 0
        assert '"permissionDecision": "deny"' in result.output
        assert "Jest mocking detected: jest.mock() module mocking found" in result.output

    def test_unknown_policy(self):
        result = runner.invoke(app, ["hook", "no-such-policy"], input="{}")
        assert result.exit_code == 2
        assert "Unknown policy 'no-such-policy'" in result.output


class TestCheck:
    def test_reports_violations_as_json(self, project):
        result = runner.invoke(app, ["check", str(project), "--json"])
        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert report["checked"] == 3
        assert {v["rule_id"] for v in report["violations"]} == {"ts-ignore", "jest-fn"}
        paths = {Path(v["path"]).name for v in report["violations"]}
        assert paths == {"api.ts", "api.test.ts"}
        assert not any("node_modules" in v["path"] for v in report["violations"])

    def test_policy_filter(self, project):
        result = runner.invoke(app, ["check", str(project), "--json", "-p", "jest-mock-prevention"])
        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert [v["rule_id"] for v in report["violations"]] == ["jest-fn"]

    def test_table_output(self, project):
        result = runner.invoke(app, ["check", str(project / "src")])
        assert result.exit_code == 1
        assert "2 violation(s)" in result.output
        assert "ts-ignore" in result.output

    def test_clean_directory(self, tmp_path):
        (tmp_path / "ok.ts").write_text("export const ok = true;\n")
        result = runner.invoke(app, ["check", str(tmp_path)])
        assert result.exit_code == 0
        assert "No violations" in result.output

    def test_single_file(self, project):
        result = runner.invoke(app, ["check", str(project / "src" / "api.test.ts"), "--json"])
        assert result.exit_code == 1
        assert json.loads(result.stdout)["checked"] == 1

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "missing")])
        assert result.exit_code == 2
        assert "Path not found" in result.output

    def test_unknown_policy(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path), "-p", "bogus"])
        assert result.exit_code == 2
        assert "Unknown policy 'bogus'" in result.output


class TestRules:
    def test_json(self):
        result = runner.invoke(app, ["rules", "--json"])
        assert result.exit_code == 0
        tables = json.loads(result.stdout)
        assert list(tables) == ["eslint-typescript-bypass", "jest-mock-prevention"]
        assert [r["id"] for r in tables["eslint-typescript-bypass"]] == [
            "eslint-line",
            "eslint-block",
            "ts-ignore",
            "ts-expect-error",
            "ts-nocheck",
            "as-any",
        ]
        assert len(tables["jest-mock-prevention"]) == 13

    def test_single_policy_table(self):
        result = runner.invoke(app, ["rules", "-p", "jest-mock-prevention"])
        assert result.exit_code == 0
        assert "jest-spyon" in result.output
        assert "eslint-line" not in result.output
