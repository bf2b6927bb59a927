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
# Filename: src/string_estimator.py

"""
Per-file estimator for hardcoded user-facing text.

Workflow for a single file's content:
1.  Strip block and line comments (a textual strip, not a parse).
2.  Run three independent extractors over what remains:
    -   values of user-facing attributes (`title="..."`, `alt="..."`, ...),
    -   generic quoted string literals,
    -   markup text nodes between `>` and `<`.
3.  Normalize every capture (collapse whitespace, trim) and drop anything
    shorter than two characters.
4.  Deduplicate, then classify each candidate as code-like or user-facing.

This is deliberately a heuristic. Strings containing `//` or `/*` can be
over-stripped and commented-out markup can leak through; the result is an
estimate, not an exact count.
"""

import logging
import re
from dataclasses import dataclass

from scan_config import (
    CODE_LIKE_PREFIXES,
    CODE_SYNTAX_CHARS,
    MIN_CANDIDATE_LENGTH,
    USER_FACING_ATTRIBUTES,
)

logger = logging.getLogger(__name__)

# --- Comment stripping ---
BLOCK_COMMENT_PATTERN = re.compile(r"/\*[\s\S]*?\*/")
# A `//` right after `:` is the scheme separator of a URL, not a comment.
LINE_COMMENT_PATTERN = re.compile(r"(^|[^:])//.*$", re.MULTILINE)

# --- Extractors ---
ATTRIBUTE_VALUE_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(name) for name in USER_FACING_ATTRIBUTES) + r")"
    r"\s*=\s*(?:\"([^\"]*)\"|'([^']*)')"
)
STRING_LITERAL_PATTERN = re.compile(
    r"(?<![\w.])"
    r"(?:\"((?:\\.|[^\"\\\n]){2,})\""
    r"|'((?:\\.|[^'\\\n]){2,})'"
    r"|`((?:\\.|[^`\\\n]){2,})`)"
)
TEXT_NODE_PATTERN = re.compile(r">([^<>{}\n]+)<")

# --- Classification ---
WHITESPACE_PATTERN = re.compile(r"\s+")
DOTTED_IDENTIFIER_PATTERN = re.compile(r"^[\w$-]+(?:\.[\w$-]+)+$")
CONSTANT_PATTERN = re.compile(r"^[A-Z0-9_]+$")
NUMERIC_FORMAT_PATTERN = re.compile(r"^[\d\s.,:%+-]+$")


@dataclass(frozen=True)
class StringEstimate:
    """Counts for one file. Words and chars cover user-facing candidates only."""
    estimated: int = 0
    user_facing: int = 0
    words: int = 0
    chars: int = 0

    @property
    def is_empty(self) -> bool:
        return self.estimated == 0


def strip_comments(text: str) -> str:
    """Removes `/* ... */` block comments and `//` line comments."""
    text = BLOCK_COMMENT_PATTERN.sub("", text)
    return LINE_COMMENT_PATTERN.sub(r"\1", text)


def _first_group(match) -> str:
    return next(group for group in match.groups() if group is not None)


def extract_attribute_values(text: str) -> list:
    """Returns the quoted values of user-facing attributes such as `title="..."`."""
    return [_first_group(m) for m in ATTRIBUTE_VALUE_PATTERN.finditer(text)]


def extract_string_literals(text: str) -> list:
    """Returns the contents of quoted literals not preceded by a word character or `.`."""
    return [_first_group(m) for m in STRING_LITERAL_PATTERN.finditer(text)]


def extract_text_nodes(text: str) -> list:
    """Returns single-line text found between `>` and `<`."""
    return TEXT_NODE_PATTERN.findall(text)


def extract_raw_candidates(text: str) -> list:
    """
    Runs all three extractors over comment-stripped text.

    The same substring may be returned by more than one extractor; nothing is
    normalized or deduplicated at this stage.
    """
    stripped = strip_comments(text)
    return (
        extract_attribute_values(stripped)
        + extract_string_literals(stripped)
        + extract_text_nodes(stripped)
    )


def normalize_candidate(raw: str):
    """Collapses whitespace and trims. Returns None if the result is too short."""
    candidate = WHITESPACE_PATTERN.sub(" ", raw).strip()
    if len(candidate) < MIN_CANDIDATE_LENGTH:
        return None
    return candidate


def extract_candidates(text: str) -> set:
    """Returns the normalized, deduplicated candidate strings found in `text`."""
    candidates = set()
    for raw in extract_raw_candidates(text):
        candidate = normalize_candidate(raw)
        if candidate is not None:
            candidates.add(candidate)
    return candidates


def is_code_like(candidate: str) -> bool:
    """
    Returns True if a candidate looks technical rather than user-facing.

    A candidate is code-like if it is empty, looks like a URL, path or
    selector, is a dotted key or filename, is an upper-case constant, is a
    number or format string, or contains code/template syntax.
    """
    value = candidate.strip()
    if not value:
        return True
    if value.startswith(CODE_LIKE_PREFIXES):
        return True
    if DOTTED_IDENTIFIER_PATTERN.match(value):
        return True
    if CONSTANT_PATTERN.match(value):
        return True
    if NUMERIC_FORMAT_PATTERN.match(value):
        return True
    return any(char in CODE_SYNTAX_CHARS for char in value)


def estimate_text(text: str) -> StringEstimate:
    """Estimates the hardcoded user-facing strings in one file's content."""
    candidates = extract_candidates(text)
    user_facing = [c for c in candidates if not is_code_like(c)]
    return StringEstimate(
        estimated=len(candidates),
        user_facing=len(user_facing),
        words=sum(len(c.split()) for c in user_facing),
        chars=sum(len(c) for c in user_facing),
    )


def estimate_file(path):
    """
    Reads a file as UTF-8 and estimates its strings.

    Returns:
        StringEstimate, or None if the file cannot be read or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipped unreadable file '{path}': {e}")
        return None
    return estimate_text(content)

# === End of src/string_estimator.py ===
