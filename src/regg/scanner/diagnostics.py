# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics collected while scanning.

The scanner never raises on malformed input. Every problem is recorded in a
:class:`Diagnostics` collector owned by the caller, which decides whether the
run failed (a file run exits with status 65, a REPL resets after each line).
"""

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


class DiagnosticKind(enum.Enum):
    """The kinds of lexical errors the scanner reports."""

    UNTERMINATED_CODE_BLOCK = "UnterminatedCodeBlock"
    UNTERMINATED_EXPRESSION = "UnterminatedExpression"
    OUT_OF_BOUNDS = "OutOfBounds"


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical error.

    Attributes:
        kind: The error kind.
        line: 1-based line number at which the error was reported.
        message: Human-readable description of the error.
        lexeme: The partially scanned source slice, if any.
        where: Location placeholder inserted after ``Error`` when formatting.
    """

    kind: DiagnosticKind
    line: int
    message: str
    lexeme: str | None = None
    where: str = ""

    def format(self) -> str:
        """Return the diagnostic as ``[line N] Error<where>: <message>``."""
        return f"[line {self.line}] Error{self.where}: {self.message}"


@dataclass
class Diagnostics:
    """An ordered collector of diagnostics with an accumulated failure flag."""

    entries: list[Diagnostic] = field(default_factory=list)
    had_error: bool = False

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic and mark the run as failed."""
        self.entries.append(diagnostic)
        self.had_error = True

    def error(
        self,
        kind: DiagnosticKind,
        line: int,
        message: str,
        lexeme: str | None = None,
    ) -> None:
        """Build and record a diagnostic."""
        self.report(Diagnostic(kind=kind, line=line, message=message, lexeme=lexeme))

    def reset(self) -> None:
        """Forget all recorded diagnostics and clear the failure flag."""
        self.entries.clear()
        self.had_error = False

    def kinds(self) -> list[DiagnosticKind]:
        """Return the kinds of all recorded diagnostics in report order."""
        return [entry.kind for entry in self.entries]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
