# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Regg: lexical front end for a template/markup language."""

from regg.scanner import Diagnostics, FenceMode, ScanResult, Scanner, Token, TokenKind, scan

__all__ = [
    "Diagnostics",
    "FenceMode",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenKind",
    "scan",
]
