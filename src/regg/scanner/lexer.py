# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Regg templates.

Converts raw template source text into a sequence of tokens describing
frontmatter code blocks, markup tags, embedded expressions, and text runs.
Malformed input never aborts a scan: problems are reported to a
:class:`~regg.scanner.diagnostics.Diagnostics` collector and scanning continues.
"""

import enum
from dataclasses import dataclass

from regg.scanner.diagnostics import DiagnosticKind, Diagnostics
from regg.scanner.tokens import Token, TokenKind

# ###############
# Public Interface
# ###############


class FenceMode(enum.Enum):
    """How the closing ``---`` fence of a frontmatter code block is detected.

    ``EXACT`` looks for a contiguous ``---`` and strips one separator
    character from each end of the body. ``LITERAL`` keeps the historical
    rule: scanning stops as soon as any of the next three characters is a
    dash, after which five characters (separator, fence, separator) are
    skipped.
    """

    EXACT = "exact"
    LITERAL = "literal"


class ScannerError(Exception):
    """Raised when a Scanner instance is asked to scan a second time."""


@dataclass(frozen=True)
class ScanResult:
    """The outcome of a scan.

    Attributes:
        tokens: All tokens in scan order, ending with a single EOF token.
        diagnostics: The collector every lexical error was reported to.
    """

    tokens: list[Token]
    diagnostics: Diagnostics

    @property
    def has_errors(self) -> bool:
        """Return True if any diagnostic was reported during the scan."""
        return self.diagnostics.had_error


def scan(
    source: str,
    *,
    fence_mode: FenceMode = FenceMode.EXACT,
    diagnostics: Diagnostics | None = None,
) -> ScanResult:
    """Tokenize Regg template source text.

    Args:
        source: The full template text (file contents or a single REPL line).
        fence_mode: Closing-fence detection rule for frontmatter code blocks.
        diagnostics: Collector to report lexical errors to. A fresh collector
            is created when omitted.

    Returns:
        A ScanResult whose token list ends with exactly one EOF token.
    """
    return Scanner(source, fence_mode=fence_mode, diagnostics=diagnostics).scan_tokens()


class Scanner:
    """Single-pass, character-driven scanner over one source text.

    A Scanner is single-use: construct a new one for every input.
    """

    def __init__(
        self,
        source: str,
        *,
        fence_mode: FenceMode = FenceMode.EXACT,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self._source = source
        self._fence_mode = fence_mode
        self._diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._scanned = False

    def scan_tokens(self) -> ScanResult:
        """Run the scanner and return all tokens including the terminal EOF.

        Raises:
            ScannerError: If this instance has already scanned its source.
        """
        if self._scanned:
            raise ScannerError("Scanner instances are single-use; create a new Scanner for each source text")
        self._scanned = True

        while not self._is_at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenKind.EOF, "", None, self._line))
        return ScanResult(tokens=self._tokens, diagnostics=self._diagnostics)

    # ------------------------------------------------------------------
    # Token dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one character and dispatch to the matching rule."""
        ch = self._advance()

        if ch == "-":
            if self._match("-") and self._match("-"):
                self._scan_code_block()
            else:
                self._scan_text()
        elif ch == "{":
            self._scan_expression()
        elif ch == "<":
            if self._match("/"):
                self._scan_closing_tag()
            else:
                self._scan_opening_tag_start()
        elif ch == ">":
            self._add_token(TokenKind.OPENING_TAG_END)
        elif ch == "/":
            if self._match(">"):
                self._add_token(TokenKind.SELF_CLOSING_TAG_END)
            else:
                self._scan_text()
        elif ch == "(":
            if self._match("`"):
                self._add_token(TokenKind.HTML_EXPR_START)
            else:
                self._scan_text()
        elif ch == "`":
            if self._match(")"):
                self._add_token(TokenKind.HTML_EXPR_END)
                # The outer expression resumes right after the `) delimiter.
                self._start += 2
                self._scan_expression()
            else:
                self._scan_text()
        elif ch in _WHITESPACE:
            pass
        else:
            self._scan_text()

    # ------------------------------------------------------------------
    # Frontmatter code blocks
    # ------------------------------------------------------------------

    def _scan_code_block(self) -> None:
        if self._fence_mode is FenceMode.LITERAL:
            self._scan_code_block_literal()
        else:
            self._scan_code_block_exact()

    def _scan_code_block_exact(self) -> None:
        """Scan up to a contiguous closing ``---`` fence."""
        body_start = self._current
        while not self._is_at_end() and not self._at_fence():
            self._advance()

        if self._is_at_end():
            self._report_unterminated_code_block()
            self._add_token(TokenKind.CODE_BLOCK, self._source[body_start : self._current])
            return

        body_end = self._current
        for _ in _FENCE:
            self._advance()
        self._skip_separator()

        body = _strip_separators(self._source[body_start:body_end])
        self._add_token(TokenKind.CODE_BLOCK, body)

    def _scan_code_block_literal(self) -> None:
        """Scan until any of the next three characters is a dash."""
        while (
            not self._is_at_end()
            and self._peek() != "-"
            and self._peek_next() != "-"
            and self._peek_third() != "-"
        ):
            self._advance()

        if self._is_at_end():
            self._report_unterminated_code_block()
            self._add_token(TokenKind.CODE_BLOCK, self._source[self._start + len(_FENCE) : self._current])
            return

        # separator, fence, separator
        for _ in range(len(_FENCE) + 2):
            if self._is_at_end():
                break
            self._advance()

        value = self._source[self._start + len(_FENCE) : self._current - len(_FENCE)]
        self._add_token(TokenKind.CODE_BLOCK, value)

    def _at_fence(self) -> bool:
        return self._peek() == "-" and self._peek_next() == "-" and self._peek_third() == "-"

    def _skip_separator(self) -> None:
        """Consume a single separator (``\\r\\n`` counts as one) if present."""
        if self._peek() == "\r" and self._peek_next() == "\n":
            self._advance()
            self._advance()
        elif self._peek() in _WHITESPACE:
            self._advance()

    def _report_unterminated_code_block(self) -> None:
        self._diagnostics.error(
            DiagnosticKind.UNTERMINATED_CODE_BLOCK,
            self._line,
            "Unterminated frontmatter fence token `---`",
            lexeme=self._source[self._start : self._current],
        )

    # ------------------------------------------------------------------
    # Tags and text
    # ------------------------------------------------------------------

    def _scan_opening_tag_start(self) -> None:
        """Scan a tag name after ``<``, stopping before a space or ``>``.

        A ``/`` directly after the name (``<br/>``) is kept in the name.
        """
        while not self._is_at_end() and self._peek() != " ":
            if self._peek() == ">":
                break
            self._advance()

        self._add_token(TokenKind.OPENING_TAG_START, self._source[self._start + 1 : self._current])

    def _scan_closing_tag(self) -> None:
        """Scan ``</name>`` through the closing ``>``."""
        while not self._is_at_end() and self._peek() != ">":
            self._advance()

        # At end of input this reports out of bounds and consumes nothing.
        closed = not self._is_at_end()
        self._advance()
        if closed:
            value = self._source[self._start + 2 : self._current - 1]
        else:
            value = self._source[self._start + 2 : self._current]
        self._add_token(TokenKind.CLOSING_TAG, value)

    def _scan_text(self) -> None:
        """Scan a text run up to the next tag, tag end, or expression."""
        while not self._is_at_end():
            ch = self._peek()
            if ch in "<>{" or (ch == "/" and self._peek_next() == ">"):
                break
            self._advance()

        self._add_token(TokenKind.TEXT, self._source[self._start : self._current])

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _scan_expression(self) -> None:
        """Scan expression content through the closing ``}``.

        The scan stops without consuming anything in front of a nested
        template opener. When the character before the expression is ``)``,
        as it is when resuming after a nested template, there is no leading
        ``{`` to trim from the literal.
        """
        closed = False
        while not self._is_at_end():
            if self._peek() == "(" and self._peek_next() == "`":
                break
            if self._advance() == "}":
                closed = True
                break

        if not closed and self._is_at_end():
            self._diagnostics.error(
                DiagnosticKind.UNTERMINATED_EXPRESSION,
                self._line,
                "Unterminated curly brace `}`",
                lexeme=self._source[self._start : self._current],
            )

        if self._start > 0 and self._source[self._start - 1] == ")":
            value_start = self._start
        else:
            value_start = self._start + 1
        self._add_token(TokenKind.EXPRESSION, self._source[value_start : self._current - 1])

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _char_at(self, index: int) -> str:
        """Return the character at *index*, or NUL past the end of input."""
        if index < len(self._source):
            return self._source[index]
        return _NUL

    def _peek(self) -> str:
        return self._char_at(self._current)

    def _peek_next(self) -> str:
        return self._char_at(self._current + 1)

    def _peek_third(self) -> str:
        return self._char_at(self._current + 2)

    def _advance(self) -> str:
        """Consume the current character, track newlines, and return it.

        At end of input nothing is consumed: an out-of-bounds diagnostic is
        reported and NUL is returned.
        """
        if self._is_at_end():
            self._report_out_of_bounds()
            return _NUL
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals *expected*."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._advance()
        return True

    def _report_out_of_bounds(self) -> None:
        self._diagnostics.error(DiagnosticKind.OUT_OF_BOUNDS, self._line, "Scanner went out of bound")

    def _add_token(self, kind: TokenKind, literal: str | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(kind, lexeme, literal, self._line))


# ################
# Implementation
# ################

_NUL = "\0"
_FENCE = "---"
_WHITESPACE = " \r\t\n"


def _strip_separators(body: str) -> str:
    """Remove a single separator from each end of a code block body."""
    if body.startswith("\r\n"):
        body = body[2:]
    elif body and body[0] in _WHITESPACE:
        body = body[1:]

    if body.endswith("\r\n"):
        body = body[:-2]
    elif body and body[-1] in _WHITESPACE:
        body = body[:-1]
    return body
