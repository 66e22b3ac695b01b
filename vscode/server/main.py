"""
BhaiLang Language Server entry point.

This server provides basic language features for BhaiLang source files using
`pygls`. It reuses the BhaiLang scanner to report unrecognized characters as
diagnostics and to describe the token under the cursor on hover.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)

from bhailang.lexer import ScanResult, Token, scan


def collect_diagnostics(result: ScanResult) -> List[Diagnostic]:
    """Return a diagnostic for the unrecognized character that stopped ``result``."""
    if result.ok:
        return []
    err = result.error
    start = Position(err.line - 1, err.column - 1)
    end = Position(err.line - 1, err.column)
    return [
        Diagnostic(
            range=Range(start, end),
            message=str(err),
            severity=DiagnosticSeverity.Error,
            source="bhai",
        )
    ]


def token_at(tokens: List[Token], line: int, character: int) -> Optional[Token]:
    """Return the token covering the 0-based ``line``/``character`` position."""
    for tok in tokens:
        if tok.line - 1 != line:
            continue
        start = tok.column - 1
        if start <= character < start + len(tok.value):
            return tok
    return None


class BhaiLanguageServer(LanguageServer):
    """Language server for BhaiLang source files."""

    def __init__(self) -> None:
        super().__init__("bhai-ls", "v0.1")
        self.tokens_by_uri: Dict[str, List[Token]] = {}

    def update_document(self, uri: str, text: str) -> None:
        """Rescan ``text``, cache its tokens and publish diagnostics for ``uri``."""
        result = scan(text, uri)
        if result.ok:
            self.tokens_by_uri[uri] = result.tokens
        else:
            self.tokens_by_uri.pop(uri, None)
        self.publish_diagnostics(uri, collect_diagnostics(result))


lang_server = BhaiLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: BhaiLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Scan a document when it is opened."""
    ls.update_document(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: BhaiLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Rescan a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.update_document(doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: BhaiLanguageServer, params: DidCloseTextDocumentParams) -> None:
    """Forget a closed document and clear its diagnostics."""
    uri = params.text_document.uri
    ls.tokens_by_uri.pop(uri, None)
    ls.publish_diagnostics(uri, [])


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: BhaiLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return the label and type of the token under the cursor."""
    tokens = ls.tokens_by_uri.get(params.text_document.uri)
    if not tokens:
        return None
    tok = token_at(tokens, params.position.line, params.position.character)
    if tok is None:
        return None
    contents = MarkupContent(
        kind=MarkupKind.PlainText,
        value=f"{tok.label} ({tok.type.name})",
    )
    return Hover(contents=contents)


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
