"""Tests for the unrecognized character failure path."""
import pytest

from bhailang.exceptions import UnrecognizedCharacterError
from bhailang.lexer import scan, tokenize


def test_unknown_character_raises():
    """Scanning stops at ``&`` with its character and code point."""
    with pytest.raises(UnrecognizedCharacterError) as exc_info:
        tokenize("x = 5 & 2")
    err = exc_info.value
    assert err.char == "&"
    assert err.code_point == 38
    assert err.line == 1
    assert err.column == 7


@pytest.mark.parametrize("char", ["!", '"', "#", "_", "\r", ",", "."])
def test_symbols_outside_the_language(char):
    """Characters with no rule are rejected."""
    with pytest.raises(UnrecognizedCharacterError) as exc_info:
        tokenize(f"a{char}b")
    assert exc_info.value.char == char


def test_underscore_cannot_join_identifier():
    """Identifiers are letters only."""
    with pytest.raises(UnrecognizedCharacterError):
        tokenize("my_var")


def test_non_ascii_letter_rejected():
    """Only ASCII letters start identifiers."""
    with pytest.raises(UnrecognizedCharacterError) as exc_info:
        tokenize("let café")
    assert exc_info.value.code_point == ord("é")


def test_error_message_includes_position_and_file():
    """The message names the character, code point, position and file."""
    with pytest.raises(UnrecognizedCharacterError) as exc_info:
        tokenize("let x\nx = $", "prog.bhai")
    assert str(exc_info.value) == (
        "Unrecognized character '$' (code point 36) on line 2, column 5 in prog.bhai"
    )


def test_scan_returns_tokens_on_success():
    """A clean scan carries the token list."""
    result = scan("let x")
    assert result.ok
    assert result.error is None
    assert [t.value for t in result.unwrap()] == ["let", "x"]


def test_scan_returns_error_without_partial_tokens():
    """A failed scan reports the error and no tokens."""
    result = scan("x = 5 & 2")
    assert not result.ok
    assert result.tokens is None
    assert result.error.char == "&"
    with pytest.raises(UnrecognizedCharacterError):
        result.unwrap()
