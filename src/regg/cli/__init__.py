# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for Regg."""
