import asyncio
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

import pytest
from code_enforcer.core.config import EnforcerConfig, GlobSpec
from code_enforcer.core.engine import Enforcer, Stage
from code_enforcer.core.errors import ExternalToolError, FileSystemError
from code_enforcer.plugins.interfaces import DocReport, FileCoverage, LintMessage, LintResult
from code_enforcer.reporting.types import Diagnostic
from code_enforcer.rules.registry import RuleRegistry
from code_enforcer.rules.types import RulePlugin

# ----------------------------
# Fakes
# ----------------------------


class FakeLintEngine:
    def __init__(self, results: Sequence[LintResult] = ()):
        self.results = list(results)
        self.calls: list[list[str]] = []

    def lint(self, root: Path, paths: Sequence[str]) -> list[LintResult]:
        self.calls.append(list(paths))
        return self.results


class FakeDocTool:
    def __init__(self, report: DocReport | None = None, error: Exception | None = None):
        self.report = report or DocReport()
        self.error = error
        self.calls = 0

    async def run(self, root: Path) -> DocReport:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.report


def write(root: Path, name: str, text: str) -> None:
    path = root / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def make_enforcer(root: Path, config: EnforcerConfig | None = None, **kwargs) -> Enforcer:
    kwargs.setdefault("lint_engine", FakeLintEngine())
    kwargs.setdefault("doc_tool", FakeDocTool())
    return Enforcer(config, root=root, **kwargs)


def run(enforcer: Enforcer) -> tuple[Diagnostic, ...]:
    return asyncio.run(enforcer.run())


# ----------------------------
# Pipeline
# ----------------------------


def test_empty_project_has_no_diagnostics(tmp_path: Path):
    lint = FakeLintEngine()
    doc = FakeDocTool()
    enforcer = make_enforcer(tmp_path, lint_engine=lint, doc_tool=doc)

    assert run(enforcer) == ()
    assert enforcer.stage == Stage.DONE
    assert enforcer.diagnostics == ()
    assert doc.calls == 1
    assert lint.calls == [[]]


def test_stages_contribute_in_fixed_order(tmp_path: Path):
    write(tmp_path, "src/a.js", "console.log('x');\n")
    write(tmp_path, "src/bad.json", '{"a":1}')
    write(tmp_path, "package.json", '{\n  "dependencies": {\n    "foo": "^1.2.3"\n  }\n}\n')

    doc = FakeDocTool(DocReport(coverage={"src/a.js": FileCoverage(0, 1, (1,))}))
    lint = FakeLintEngine(
        [LintResult(str(tmp_path / "src" / "a.js"), (LintMessage("Unexpected console statement.", "no-console", 1, 1),))]
    )
    diags = run(make_enforcer(tmp_path, lint_engine=lint, doc_tool=doc))

    assert [d.source for d in diags] == ["esdoc", "console-style-calls", "eslint", "jsonlint", "manifest"]
    assert lint.calls == [["src/a.js"]]
    # external tool paths reuse the loaded content
    assert diags[2].file.content == "console.log('x');\n"
    assert diags[2].problem == "Unexpected console statement - no-console"
    assert diags[3].file.name == "src/bad.json"
    assert diags[4].file.name == "package.json"


def test_rules_outer_files_inner(tmp_path: Path):
    write(tmp_path, "src/a.js", "console.log('ä');\n")
    write(tmp_path, "src/b.js", "console.log('ö');\n")

    diags = run(make_enforcer(tmp_path))
    assert [(d.source, d.file.name) for d in diags] == [
        ("ascii-only", "src/a.js"),
        ("ascii-only", "src/b.js"),
        ("console-style-calls", "src/a.js"),
        ("console-style-calls", "src/b.js"),
    ]


def test_suppressed_rule_is_silent_for_matching_files(tmp_path: Path):
    write(tmp_path, "src/legacy/a.js", "console.log(1);\n")
    write(tmp_path, "src/b.js", "console.log(2);\n")
    config = EnforcerConfig.from_mapping({"disableRules": {"console-style-calls": ["^src/legacy/"]}})

    diags = run(make_enforcer(tmp_path, config))
    assert [d.file.name for d in diags] == ["src/b.js"]


def test_check_called_only_for_applicable_files(tmp_path: Path):
    write(tmp_path, "src/a.js", "")
    write(tmp_path, "src/notes.txt", "")
    seen: list[str] = []

    registry = RuleRegistry()
    registry.register(RulePlugin(id="recorder", filename_pattern=r"\.js$", check=lambda f, c, s: seen.append(f.name)))
    config = replace(EnforcerConfig(), code_files=GlobSpec(include=("src/*",)))

    run(make_enforcer(tmp_path, config, registry=registry))
    assert seen == ["src/a.js"]


def test_duplicate_glob_matches_run_rules_twice(tmp_path: Path):
    write(tmp_path, "src/a.js", "console.log(1);\n")
    config = replace(EnforcerConfig(), code_files=GlobSpec(include=("src/*.js", "src/a.js")))

    diags = run(make_enforcer(tmp_path, config))
    assert [d.source for d in diags] == ["console-style-calls", "console-style-calls"]


def test_doc_ignore_patterns(tmp_path: Path):
    write(tmp_path, "src/a.js", "export function a() {}\n")
    report = DocReport(coverage={"src/a.js": FileCoverage(0, 1, (1,))})
    config = EnforcerConfig.from_mapping({"ESDocIgnore": ["^src/"]})

    assert run(make_enforcer(tmp_path, config, doc_tool=FakeDocTool(report))) == ()


def test_custom_manifest_location(tmp_path: Path):
    write(tmp_path, "app/package.json", '{\n  "x": "^0.1.0"\n}\n')
    config = replace(EnforcerConfig(), manifest_file="app/package.json")

    diags = run(make_enforcer(tmp_path, config))
    assert [(d.source, d.file.name) for d in diags] == [("manifest", "app/package.json")]


# ----------------------------
# Failures
# ----------------------------


def test_external_tool_failure_aborts(tmp_path: Path):
    enforcer = make_enforcer(tmp_path, doc_tool=FakeDocTool(error=ExternalToolError("esdoc crashed")))
    with pytest.raises(ExternalToolError):
        run(enforcer)
    assert enforcer.stage == Stage.FILES_BUILT


def test_missing_reported_file_aborts(tmp_path: Path):
    report = DocReport(coverage={"src/gone.js": FileCoverage(0, 1, (1,))})
    with pytest.raises(FileSystemError):
        run(make_enforcer(tmp_path, doc_tool=FakeDocTool(report)))


def test_run_only_once(tmp_path: Path):
    enforcer = make_enforcer(tmp_path)
    run(enforcer)
    with pytest.raises(RuntimeError):
        run(enforcer)


def test_diagnostics_unavailable_before_done(tmp_path: Path):
    with pytest.raises(RuntimeError):
        _ = make_enforcer(tmp_path).diagnostics


def test_sink_is_frozen_after_run(tmp_path: Path):
    enforcer = make_enforcer(tmp_path)
    run(enforcer)
    assert enforcer.sink.frozen
