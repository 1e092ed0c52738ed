# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of token streams for people and for downstream tools.

The JSON form is versioned so future schema changes can be detected.
"""

import json
from typing import Any

from regg.scanner.tokens import Token, TokenKind

# ###############
# Public Interface
# ###############

TOKENS_FORMAT_VERSION = "1"


def format_token(token: Token) -> str:
    """Render a token as a single human-readable line."""
    return f"{token.line} {token.kind.value} {token.lexeme!r} {token.literal!r}"


def serialize_tokens(tokens: list[Token]) -> str:
    """Serialize a token stream to a compact JSON string."""
    payload = {"v": TOKENS_FORMAT_VERSION, "tokens": [_token_to_dict(t) for t in tokens]}
    return json.dumps(payload, separators=(",", ":"))


def deserialize_tokens(data: str) -> list[Token]:
    """Deserialize a token stream from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize_tokens`.

    Returns:
        The reconstructed tokens, in their original order.

    Raises:
        ValueError: If the format version or a token kind is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != TOKENS_FORMAT_VERSION:
        raise ValueError(f"Unsupported token stream format version: {version!r}")
    return [_token_from_dict(d) for d in obj.get("tokens", [])]


# ################
# Implementation
# ################


def _token_to_dict(token: Token) -> dict[str, Any]:
    return {
        "kind": token.kind.value,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def _token_from_dict(d: dict[str, Any]) -> Token:
    try:
        kind = TokenKind(d["kind"])
    except ValueError:
        raise ValueError(f"Unknown token kind: {d['kind']!r}") from None
    return Token(kind=kind, lexeme=d["lexeme"], literal=d.get("literal"), line=d["line"])
