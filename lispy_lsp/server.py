"""
A minimal pygls-based Language Server for Lispy.

Features:
- Text synchronization and document store
- Diagnostics: syntax errors from the grammar engine, unbound symbols
- Hover: builtin signatures
- Completion: builtins

Each line is checked on its own, the same way the shell reads input. We never
evaluate the buffer.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
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
    TextDocumentSyncKind,
)
from pygls.server import LanguageServer

from lispy import __version__
from lispy.builtins import BUILTIN_SIGNATURES
from lispy.errors import LispySyntaxError
from lispy.reader.grammar import ParseNode, parse

logger = logging.getLogger(__name__)

SOURCE = "lispy-ls"


class LispyLanguageServer(LanguageServer):
    CMD_NAME = "lispy-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME,
            __version__,
            text_document_sync_kind=TextDocumentSyncKind.Full,
        )
        self.documents: Dict[str, str] = {}


ls = LispyLanguageServer()


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def _iter_symbols(node: ParseNode):
    if "symbol" in node.tag:
        yield node
    for child in node.children:
        yield from _iter_symbols(child)


def collect_diagnostics(text: str) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    for lineno, line in enumerate(text.splitlines()):
        try:
            symbols = list(_iter_symbols(parse(line)))
        except LispySyntaxError as e:
            diags.append(
                Diagnostic(
                    range=_mk_range(lineno, e.col),
                    message=e.message,
                    severity=DiagnosticSeverity.Error,
                    source=SOURCE,
                )
            )
            continue
        except RecursionError:
            # parsing recurses with the nesting depth
            diags.append(
                Diagnostic(
                    range=_mk_range(lineno, 0),
                    message="expression nested too deeply",
                    severity=DiagnosticSeverity.Error,
                    source=SOURCE,
                )
            )
            continue
        for sym in symbols:
            if sym.contents not in BUILTIN_SIGNATURES:
                diags.append(
                    Diagnostic(
                        range=_mk_range(lineno, sym.col, len(sym.contents)),
                        message=f"unbound symbol: {sym.contents}",
                        severity=DiagnosticSeverity.Information,
                        source=SOURCE,
                    )
                )
    return diags


def _publish_diagnostics(uri: str):
    diags = collect_diagnostics(ls.documents[uri])
    logger.debug("%s: %d diagnostics", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    ls.documents[uri] = params.text_document.text or ""
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        # full sync: the last change carries the whole text
        ls.documents[uri] = params.content_changes[-1].text
    _publish_diagnostics(uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Hover ---
def hover_text(text: str, pos: Position) -> Optional[str]:
    word = extract_word_at(text, pos)
    if not word:
        return None
    return BUILTIN_SIGNATURES.get(word)


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    text = ls.documents.get(params.text_document.uri)
    if text is None:
        return None
    contents = hover_text(text, params.position)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items() -> List[CompletionItem]:
    return [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]


@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["(", "{"]))
def on_completion(params: CompletionParams) -> CompletionList:
    return CompletionList(is_incomplete=False, items=completion_items())


# --- Helpers ---
def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to word boundaries (anything but whitespace and delimiters)
    start = pos.character
    while start > 0 and line[start - 1] not in " \t(){}\n\r":
        start -= 1
    end = pos.character
    while end < len(line) and line[end] not in " \t(){}\n\r":
        end += 1
    word = line[start:end]
    return word if word else None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
