# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model produced by the Regg scanner."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds produced by the Regg scanner."""

    # Frontmatter
    CODE_BLOCK = "CodeBlock"

    # Markup tags
    OPENING_TAG_START = "OpeningTagStart"
    OPENING_TAG_END = "OpeningTagEnd"
    SELF_CLOSING_TAG_END = "SelfClosingTagEnd"
    CLOSING_TAG = "ClosingTag"

    # Content
    TEXT = "TextToken"
    EXPRESSION = "Expression"

    # Nested template delimiters inside an expression
    HTML_EXPR_START = "HTMLExprStart"
    HTML_EXPR_END = "HTMLExprEnd"

    # End of input
    EOF = "EndOfInput"


@dataclass(frozen=True)
class Token:
    """A lexical token with the line it was emitted on.

    Attributes:
        kind: The kind of token.
        lexeme: The exact source slice consumed for the token, delimiters included.
        literal: The delimiter-trimmed content (tag name, code text, expression
            text), or None for pure delimiter tokens.
        line: 1-based line number at the moment the token was emitted. For
            tokens spanning several lines this is the line where scanning ended.
    """

    kind: TokenKind
    lexeme: str
    literal: str | None
    line: int
