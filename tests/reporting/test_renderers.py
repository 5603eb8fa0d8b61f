import json

import pytest
from code_enforcer.reporting.renderers.json import JsonReportRenderer
from code_enforcer.reporting.renderers.text import TextReportRenderer
from code_enforcer.reporting.types import Diagnostic, DiagnosticSink
from code_enforcer.source.types import SourceFile

FILE = SourceFile("src/a.js", "let x;\nconsole.log(1);\n")


def console_diag() -> Diagnostic:
    return Diagnostic(
        problem="no console calls",
        solution="use logging library",
        file=FILE,
        offset=7,
        source="console-style-calls",
    )


def lint_diag() -> Diagnostic:
    return Diagnostic(
        problem="Unexpected var - no-var",
        solution="run eslint --fix",
        file=FILE,
        line_number=1,
        column_number=1,
        source="eslint",
    )


def test_text_empty_renders_nothing():
    assert TextReportRenderer().render([]) == ""


def test_text_offset_diagnostic():
    out = TextReportRenderer().render([console_diag()])
    assert out.splitlines() == [
        "Errors:",
        "src/a.js: 2: no console calls",
        "  console.log(1);",
        "  ^",
        "",
        "Errors: 1",
    ]


def test_text_line_number_diagnostic_uses_bare_caret():
    out = TextReportRenderer().render([lint_diag()])
    assert out.splitlines()[1:4] == [
        "src/a.js: 1: Unexpected var - no-var",
        "  let x;",
        "^",
    ]


def test_text_without_position():
    d = Diagnostic(problem="json file needs proper formatting", solution="run jsonlint --in-place", file=FILE)
    out = TextReportRenderer().render([d])
    assert out.splitlines()[1:3] == ["src/a.js: : json file needs proper formatting", ""]


def test_text_solutions_are_optional():
    out = TextReportRenderer(show_solutions=True).render([console_diag(), lint_diag()])
    lines = out.splitlines()
    assert "src/a.js: 2: no console calls (use logging library)" in lines
    assert "src/a.js: 1: Unexpected var - no-var (run eslint --fix)" in lines
    assert lines[-1] == "Errors: 2"


def test_json_renderer():
    data = json.loads(JsonReportRenderer().render([console_diag(), lint_diag()]))
    assert data["count"] == 2
    first = data["diagnostics"][0]
    assert first["file"] == "src/a.js"
    assert first["line"] == 2
    assert first["offset"] == 7
    assert first["line_text"] == "console.log(1);"
    assert data["diagnostics"][1]["column"] == 1


def test_json_renderer_empty():
    assert json.loads(JsonReportRenderer().render([])) == {"count": 0, "diagnostics": []}


# ----------------------------
# DiagnosticSink
# ----------------------------


def test_sink_keeps_insertion_order():
    sink = DiagnosticSink()
    first, second = console_diag(), lint_diag()
    sink.add(first)
    sink.extend([second])
    assert list(sink) == [first, second]
    assert len(sink) == 2


def test_sink_rejects_additions_after_freeze():
    sink = DiagnosticSink()
    sink.add(console_diag())
    assert sink.freeze() == (console_diag(),)
    with pytest.raises(RuntimeError):
        sink.add(lint_diag())
