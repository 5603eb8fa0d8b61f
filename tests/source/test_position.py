import pytest
from code_enforcer.reporting.types import Diagnostic
from code_enforcer.source.position import (
    LineContext,
    iter_lines,
    resolve,
    resolve_by_line_number,
    resolve_by_offset,
)
from code_enforcer.source.types import SourceFile

CONTENT = "first\nsecond line\nthird"


def _enclosing_line(content: str, offset: int) -> str:
    start = content.rfind("\n", 0, offset) + 1
    end = content.find("\n", start)
    return content[start:] if end == -1 else content[start:end]


# ----------------------------
# resolve_by_offset
# ----------------------------


def test_offset_on_first_character():
    ctx = resolve_by_offset(CONTENT, 0)
    assert ctx == LineContext(line_number=1, line_text="first", caret="  ^")


def test_offset_inside_second_line():
    ctx = resolve_by_offset(CONTENT, 9)
    assert ctx.line_number == 2
    assert ctx.line_text == "second line"
    assert ctx.caret == " " * 5 + "^"


def test_offset_on_line_terminator_belongs_to_previous_line():
    ctx = resolve_by_offset(CONTENT, 5)
    assert ctx.line_number == 1
    assert ctx.line_text == "first"
    assert ctx.caret == " " * 7 + "^"


def test_offset_on_last_line_without_newline():
    ctx = resolve_by_offset(CONTENT, len(CONTENT) - 1)
    assert ctx.line_number == 3
    assert ctx.line_text == "third"


@pytest.mark.parametrize("offset", [-1, len(CONTENT), len(CONTENT) + 10])
def test_offset_outside_content_is_unresolved(offset):
    ctx = resolve_by_offset(CONTENT, offset)
    assert ctx == LineContext()
    assert not ctx.resolved


def test_offset_in_empty_content_is_unresolved():
    assert resolve_by_offset("", 0) == LineContext()


@pytest.mark.parametrize(
    "content",
    [
        CONTENT,
        "a\n\nb\n",
        "\n\n\n",
        "one line only",
        "x = 1;\n  // comment\n\ny = 2;\n",
    ],
)
def test_every_offset_resolves_to_its_enclosing_line(content):
    for offset in range(len(content)):
        ctx = resolve_by_offset(content, offset)
        assert ctx.line_number is not None and ctx.line_number >= 1
        assert ctx.line_text == _enclosing_line(content, offset)
        assert ctx.line_number == content.count("\n", 0, offset) + 1


def test_crlf_terminators_are_not_part_of_the_line():
    content = "a = 1;\r\nb = 2;\r\n"
    ctx = resolve_by_offset(content, 8)
    assert ctx.line_number == 2
    assert ctx.line_text == "b = 2;"


# ----------------------------
# resolve_by_line_number
# ----------------------------


@pytest.mark.parametrize("content", [CONTENT, "a\n\nb\n", "", "\n", "x\n\n"])
def test_line_number_matches_split(content):
    lines = content.split("\n")
    for n, expected in enumerate(lines, start=1):
        ctx = resolve_by_line_number(content, n)
        assert ctx.line_text == expected
        assert ctx.caret == "^"
        assert ctx.line_number == n


@pytest.mark.parametrize("number", [0, -3, 4, 100])
def test_line_number_out_of_range_has_no_text(number):
    ctx = resolve_by_line_number(CONTENT, number)
    assert ctx.line_text is None
    assert ctx.caret is None


def test_iter_lines_reports_line_starts():
    assert list(iter_lines(CONTENT)) == [(0, "first"), (6, "second line"), (18, "third")]


# ----------------------------
# resolve(diagnostic)
# ----------------------------


def _diag(**position) -> Diagnostic:
    return Diagnostic(problem="p", solution="s", file=SourceFile("a.js", CONTENT), **position)


def test_resolve_prefers_offset_over_line_number():
    ctx = resolve(_diag(offset=0, line_number=3))
    assert ctx.line_text == "first"
    assert ctx.caret == "  ^"


def test_resolve_offset_zero_is_a_position():
    assert resolve(_diag(offset=0)).line_number == 1


def test_resolve_by_line_number_when_no_offset():
    ctx = resolve(_diag(line_number=3))
    assert ctx.line_text == "third"
    assert ctx.caret == "^"


def test_resolve_without_position():
    assert resolve(_diag()) == LineContext()


def test_resolve_falls_back_to_line_number_past_the_end():
    ctx = resolve(_diag(offset=len(CONTENT), line_number=3))
    assert ctx.line_text == "third"
    assert ctx.caret == "^"
