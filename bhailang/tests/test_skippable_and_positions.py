"""Tests for skipped characters and token positions."""
from bhailang.lexer import TokenType, tokenize


def test_whitespace_and_semicolon_elided():
    """Spaces and semicolons never produce tokens."""
    tokens = tokenize("let  x;")
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.LET, "let"),
        (TokenType.IDENTIFIER, "x"),
    ]


def test_only_skippable_input_yields_no_tokens():
    """Input made only of skippable characters produces an empty list."""
    assert tokenize(" \t\n;;\n") == []
    assert tokenize("") == []


def test_semicolon_separates_runs():
    """A semicolon ends an identifier run like a space does."""
    assert [t.value for t in tokenize("a;b")] == ["a", "b"]


def test_line_and_column_tracking():
    """Tokens record where they start."""
    tokens = tokenize("let x\n  \tx = 42")
    assert [(t.value, t.line, t.column, t.offset) for t in tokens] == [
        ("let", 1, 1, 0),
        ("x", 1, 5, 4),
        ("x", 2, 4, 9),
        ("=", 2, 6, 11),
        ("42", 2, 8, 13),
    ]


def test_repr_shows_type_value_label_and_line():
    """The repr shows type, value, label and line."""
    tok = tokenize("\n\nBolBhai")[0]
    assert repr(tok) == "Token(BOL_BHAI, 'BolBhai', 'reserved', line=3)"
