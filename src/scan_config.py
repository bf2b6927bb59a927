#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Hardcoded UI Text Estimator
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/scan_config.py

"""
Static scan configuration for the hardcoded UI text estimator.

Everything the directory walker and the per-file estimator need to know about
*what* to scan lives here as immutable data. Adjusting the scan (adding an
extension, ignoring another build folder) means editing these sets, never the
traversal or estimation logic.
"""

import re

# --- Traversal ---
# Directory names pruned from the walk entirely (names, not paths).
IGNORED_DIR_NAMES = frozenset({
    ".git",           # version control
    "node_modules",   # dependencies
    "dist",           # build output
    "build",
    "out",
    ".next",
    ".cache",         # tool caches
})

# Client-side source and markup extensions worth scanning (lower case).
TARGET_EXTENSIONS = frozenset({
    ".js", ".jsx", ".mjs", ".cjs",
    ".ts", ".tsx",
    ".vue", ".svelte",
    ".html", ".htm",
})

# Test and spec files are never scanned, e.g. `widget.test.ts`, `Form.spec.jsx`.
TEST_FILE_PATTERN = re.compile(r"\.(?:test|spec)\.", re.IGNORECASE)

# --- Estimation ---
# HTML/JSX attributes whose literal values are rendered to the user.
USER_FACING_ATTRIBUTES = (
    "title",
    "alt",
    "placeholder",
    "aria-label",
    "aria-placeholder",
    "label",
)

# Normalized candidates shorter than this are discarded.
MIN_CANDIDATE_LENGTH = 2

# Leading fragments that mark a URL, path or selector.
CODE_LIKE_PREFIXES = ("http://", "https://", "/", "#", ".")

# Characters that mark code or template syntax anywhere in a candidate.
CODE_SYNTAX_CHARS = frozenset("{}()[]=")

# --- Reporting ---
STATUS_COMPLETED = "completed"
STATUS_SKIPPED = "skipped (technical/code-like only)"

# --- Execution ---
DEFAULT_WORKERS = 1

# === End of src/scan_config.py ===
