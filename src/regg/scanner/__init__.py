# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner for Regg templates: tokens, diagnostics, and serialization."""

from regg.scanner.diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from regg.scanner.lexer import FenceMode, ScannerError, ScanResult, Scanner, scan
from regg.scanner.serialize import TOKENS_FORMAT_VERSION, deserialize_tokens, format_token, serialize_tokens
from regg.scanner.tokens import Token, TokenKind

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "FenceMode",
    "ScanResult",
    "Scanner",
    "ScannerError",
    "TOKENS_FORMAT_VERSION",
    "Token",
    "TokenKind",
    "deserialize_tokens",
    "format_token",
    "scan",
    "serialize_tokens",
]
