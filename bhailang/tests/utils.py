"""
Utility functions shared across BhaiLang tests.
"""
from pathlib import Path

from bhailang.lexer import tokenize


def types_of(source: str):
    """
    Tokenize source code and return the token type names.
    """
    return [tok.type.name for tok in tokenize(source)]


def values_of(source: str):
    """
    Tokenize source code and return the token values.
    """
    return [tok.value for tok in tokenize(source)]


def find_project_root(marker: str = "bhai.py") -> Path:
    """Locate repository root by looking for marker file."""
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / marker).exists():
            return parent
    raise RuntimeError("Could not find project root")
