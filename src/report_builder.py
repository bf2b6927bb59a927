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
# Filename: src/report_builder.py

"""
Builds the plain-text report for the hardcoded UI text estimator.

Per-file estimates are turned into `FileRecord` rows (only files with at least
one candidate), sorted by estimated count descending with ties broken by the
relative path, and rendered as a Markdown-style table followed by a totals
line. Rendering is pure: the same records always produce the same text.
"""

import os
from dataclasses import dataclass

from scan_config import STATUS_COMPLETED, STATUS_SKIPPED

REPORT_HEADER = "Hardcoded user-facing text estimate"
TABLE_COLUMNS = ("#", "File", "Est. Strings", "Status")

NO_FILES_MESSAGE = "No client-side files found to scan."
NO_TEXT_MESSAGE = "No likely hardcoded user-facing text found."


@dataclass(frozen=True)
class FileRecord:
    """One report row. Created once per file that yielded at least one candidate."""
    rel_path: str
    estimated: int
    user_facing: int
    words: int
    chars: int

    @property
    def status(self) -> str:
        return STATUS_COMPLETED if self.user_facing > 0 else STATUS_SKIPPED


@dataclass(frozen=True)
class ReportTotals:
    estimated: int = 0
    user_facing: int = 0
    words: int = 0
    chars: int = 0


def sort_key(record: FileRecord):
    return (-record.estimated, record.rel_path)


def build_records(root, results) -> list:
    """
    Converts per-file estimates into sorted report rows.

    Args:
        root: The resolved scan root; row paths are relative to it.
        results: Iterable of `(absolute_path, StringEstimate or None)` pairs.
            Unreadable files (None) and files without candidates are dropped.

    Returns:
        list[FileRecord]: Rows sorted by estimated count descending, then path.
    """
    records = []
    for path, estimate in results:
        if estimate is None or estimate.is_empty:
            continue
        records.append(FileRecord(
            rel_path=os.path.relpath(path, root),
            estimated=estimate.estimated,
            user_facing=estimate.user_facing,
            words=estimate.words,
            chars=estimate.chars,
        ))
    return sorted(records, key=sort_key)


def summarize(records) -> ReportTotals:
    """Sums the four counters over the report rows."""
    return ReportTotals(
        estimated=sum(r.estimated for r in records),
        user_facing=sum(r.user_facing for r in records),
        words=sum(r.words for r in records),
        chars=sum(r.chars for r in records),
    )


def _table_row(cells) -> str:
    return "| " + " | ".join(str(cell) for cell in cells) + " |"


def render_table(records) -> list:
    lines = [
        _table_row(TABLE_COLUMNS),
        _table_row("-" * len(column) for column in TABLE_COLUMNS),
    ]
    for index, record in enumerate(records, start=1):
        lines.append(_table_row((index, record.rel_path, f"~{record.estimated}", record.status)))
    return lines


def render_totals(totals: ReportTotals) -> str:
    return (
        f"Totals: estimated strings={totals.estimated}, "
        f"likely user-facing strings={totals.user_facing}, "
        f"words={totals.words}, chars={totals.chars}"
    )


def render_report(records) -> str:
    """
    Renders the full report: header, table, blank line, totals line.

    Returns the "no text found" message instead when there are no rows.
    """
    if not records:
        return NO_TEXT_MESSAGE
    lines = [f"## {REPORT_HEADER}", ""]
    lines.extend(render_table(records))
    lines.append("")
    lines.append(render_totals(summarize(records)))
    return "\n".join(lines)

# === End of src/report_builder.py ===
