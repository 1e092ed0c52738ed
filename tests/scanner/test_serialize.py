# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for token stream rendering and JSON serialization."""

import json

import pytest

from regg.scanner.lexer import scan
from regg.scanner.serialize import TOKENS_FORMAT_VERSION, deserialize_tokens, format_token, serialize_tokens
from regg.scanner.tokens import Token, TokenKind

# ###############
# Text Rendering
# ###############


def test_format_token_with_literal() -> None:
    token = Token(TokenKind.OPENING_TAG_START, "<div", "div", 1)
    assert format_token(token) == "1 OpeningTagStart '<div' 'div'"


def test_format_token_without_literal() -> None:
    token = Token(TokenKind.EOF, "", None, 4)
    assert format_token(token) == "4 EndOfInput '' None"


def test_format_token_escapes_newlines() -> None:
    token = Token(TokenKind.TEXT, "a\nb", "a\nb", 2)
    assert format_token(token) == "2 TextToken 'a\\nb' 'a\\nb'"


# ###############
# JSON
# ###############


def test_serialized_stream_is_versioned_json() -> None:
    data = json.loads(serialize_tokens(scan("<p>").tokens))
    assert data["v"] == TOKENS_FORMAT_VERSION
    assert data["tokens"][0] == {"kind": "OpeningTagStart", "lexeme": "<p", "literal": "p", "line": 1}
    assert data["tokens"][-1]["kind"] == "EndOfInput"


def test_deserialize_restores_scanned_stream() -> None:
    tokens = scan("---\nlet a = 1\n---\n<ul>{items.map(i => (`<li>{i}</li>`))}</ul>").tokens
    assert deserialize_tokens(serialize_tokens(tokens)) == tokens


def test_deserialize_rejects_unknown_version() -> None:
    with pytest.raises(ValueError, match="format version"):
        deserialize_tokens('{"v": "99", "tokens": []}')


def test_deserialize_rejects_unknown_kind() -> None:
    payload = json.dumps({"v": TOKENS_FORMAT_VERSION, "tokens": [{"kind": "Bogus", "lexeme": "", "line": 1}]})
    with pytest.raises(ValueError, match="Unknown token kind"):
        deserialize_tokens(payload)
