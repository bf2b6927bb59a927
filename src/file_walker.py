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
# Filename: src/file_walker.py

"""
Directory walker for the hardcoded UI text estimator.

Recursively collects the client-side source files under a root directory.
Ignored directories (`.git`, `node_modules`, build output, caches) are pruned
before they are descended into, only files with a target extension are kept,
and test/spec files are dropped regardless of extension.

The returned list is sorted, so callers never depend on the order in which
the filesystem happens to enumerate entries.
"""

import logging
import os

from scan_config import IGNORED_DIR_NAMES, TARGET_EXTENSIONS, TEST_FILE_PATTERN

logger = logging.getLogger(__name__)


def is_ignored_dir(name: str) -> bool:
    """Returns True if a directory with this name must not be descended into."""
    return name in IGNORED_DIR_NAMES


def is_target_file(name: str) -> bool:
    """Returns True if a file with this name should be estimated."""
    extension = os.path.splitext(name)[1].lower()
    if extension not in TARGET_EXTENSIONS:
        return False
    return not TEST_FILE_PATTERN.search(name)


def _raise_walk_error(error: OSError):
    raise error


def collect_target_files(root, skip_unreadable_dirs: bool = False) -> list:
    """
    Walks `root` depth-first and returns the absolute paths of all target files.

    Args:
        root: The directory to scan.
        skip_unreadable_dirs (bool): If False (default), a directory that cannot
            be listed raises its OSError. If True, it is logged and skipped.

    Returns:
        list: Sorted absolute file paths.
    """
    root = os.path.abspath(root)

    if skip_unreadable_dirs:
        def on_error(error):
            logger.warning(f"Skipping unreadable directory '{error.filename}': {error.strerror}")
    else:
        on_error = _raise_walk_error

    target_files = []
    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=on_error):
        # Prune in place so os.walk never descends into ignored directories.
        dirnames[:] = [d for d in dirnames if not is_ignored_dir(d)]
        for filename in filenames:
            if is_target_file(filename):
                target_files.append(os.path.join(dirpath, filename))

    logger.debug(f"Collected {len(target_files)} target files under {root}")
    return sorted(target_files)

# === End of src/file_walker.py ===
