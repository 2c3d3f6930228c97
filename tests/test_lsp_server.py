import pytest
from lsprotocol.types import DiagnosticSeverity, Position

from lispy_lsp.server import collect_diagnostics, completion_items, extract_word_at, hover_text


def test_clean_document_has_no_diagnostics():
    assert collect_diagnostics("(+ 1 2)\n(head {1 2})\n") == []


def test_syntax_error_diagnostic_position():
    diags = collect_diagnostics("(+ 1 2)\n  (head {1 2}\n")
    assert len(diags) == 1
    d = diags[0]
    assert d.severity == DiagnosticSeverity.Error
    assert d.range.start.line == 1
    assert d.range.start.character == 13
    assert d.message == "expected ')' at end of input"


def test_unbound_symbol_is_information():
    diags = collect_diagnostics("(+ x 1)")
    assert [(d.message, d.severity, d.range.start.character, d.range.end.character) for d in diags] == [
        ("unbound symbol: x", DiagnosticSeverity.Information, 3, 4),
    ]


@pytest.mark.parametrize(
    "text,line,char,expected",
    [
        ("(head {1})", 0, 2, "head"),
        ("(+ 1 2)", 0, 1, "+"),
        ("(+ 1 2)", 0, 3, "1"),
        ("(+ 1 2)\n(join)", 1, 3, "join"),
        ("(+ 1 2)", 3, 0, None),
    ]
)
def test_extract_word_at(text, line, char, expected):
    assert extract_word_at(text, Position(line=line, character=char)) == expected


def test_hover_only_for_builtins():
    assert hover_text("(tail {1})", Position(line=0, character=2)).startswith("(tail")
    assert hover_text("(foo 1)", Position(line=0, character=2)) is None


def test_completion_lists_builtins():
    labels = [item.label for item in completion_items()]
    assert labels == ["list", "head", "tail", "eval", "join", "+", "*", "-", "/"]


def test_deep_nesting_is_reported_not_raised():
    text = "(+ 1 2)\n" + "(" * 5000 + ")" * 5000 + "\n(head {1})"
    diags = collect_diagnostics(text)
    assert [(d.message, d.severity, d.range.start.line, d.range.start.character) for d in diags] == [
        ("expression nested too deeply", DiagnosticSeverity.Error, 1, 0),
    ]
