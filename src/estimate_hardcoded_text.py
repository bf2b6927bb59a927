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
# Filename: src/estimate_hardcoded_text.py

"""
Hardcoded UI Text Estimator (estimate_hardcoded_text.py)

Purpose:
Estimates how many hardcoded, user-facing text literals a client-side source
tree contains, to help size and prioritize internationalization work.

Workflow:
1.  Resolves the root directory (argument, or the current working directory).
2.  Collects `.js/.jsx/.ts/.tsx/.vue/.svelte/.html` files, pruning `.git`,
    `node_modules`, build output and caches, and skipping test/spec files.
3.  Estimates each file: strips comments, extracts attribute values, string
    literals and markup text, and separates user-facing text from code-like
    tokens. Unreadable or non-UTF-8 files are skipped.
4.  Prints a table sorted by estimated count (ties by path) plus a totals line.

The report is written to stdout; logging and the progress bar go to stderr.

Command-Line Usage:
    # Scan the current directory
    python src/estimate_hardcoded_text.py

    # Scan a specific front-end project using 8 worker threads
    python src/estimate_hardcoded_text.py path/to/web-app --workers 8

    # Also list every file that could not be read
    python src/estimate_hardcoded_text.py path/to/web-app --verbose
"""

import argparse
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed

from colorama import Fore, just_fix_windows_console
from tqdm import tqdm

from file_walker import collect_target_files
from report_builder import NO_FILES_MESSAGE, build_records, render_report
from scan_config import DEFAULT_WORKERS
from string_estimator import estimate_file


class TqdmLoggingHandler(logging.Handler):
    """A logging handler that writes to stderr through tqdm.write()."""
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


class CustomFormatter(logging.Formatter):
    """Custom formatter to add colors to log levels."""
    log_format = "%(levelname)s: %(message)s"
    FORMATS = {
        logging.DEBUG: log_format,
        logging.INFO: log_format,
        logging.WARNING: Fore.YELLOW + log_format + Fore.RESET,
        logging.ERROR: Fore.RED + log_format + Fore.RESET,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.log_format)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def configure_logging(verbose: bool = False, quiet: bool = False):
    if verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    handler = TqdmLoggingHandler()
    handler.setFormatter(CustomFormatter())
    logging.basicConfig(level=log_level, handlers=[handler], force=True)


def estimate_files(file_paths, workers: int = DEFAULT_WORKERS, show_progress: bool = True) -> list:
    """
    Estimates every file and returns `(path, StringEstimate or None)` pairs.

    With more than one worker the files are estimated on a thread pool. The
    pairs are returned in input order either way, so the report never depends
    on completion order.
    """
    results = {}
    with tqdm(total=len(file_paths), desc="Estimating", ncols=80, disable=not show_progress) as pbar:
        if workers <= 1:
            for path in file_paths:
                results[path] = estimate_file(path)
                pbar.update(1)
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {executor.submit(estimate_file, path): path for path in file_paths}
                for future in as_completed(futures):
                    results[futures[future]] = future.result()
                    pbar.update(1)

    skipped = [path for path in file_paths if results[path] is None]
    if skipped:
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.info(f"Skipped {len(skipped)} unreadable file(s):")
        else:
            logging.info(f"Skipped {len(skipped)} unreadable file(s). Use --verbose to list them.")
        for path in skipped:
            logging.debug(f"  - {path}")

    return [(path, results[path]) for path in file_paths]


def run_scan(root, workers: int = DEFAULT_WORKERS, skip_unreadable_dirs: bool = False,
             show_progress: bool = False) -> str:
    """
    Scans `root` and returns the report text.

    Raises:
        OSError: If a directory cannot be listed and `skip_unreadable_dirs` is False.
    """
    root = os.path.abspath(root)
    file_paths = collect_target_files(root, skip_unreadable_dirs=skip_unreadable_dirs)
    if not file_paths:
        return NO_FILES_MESSAGE

    logging.info(f"Scanning {len(file_paths)} client-side file(s) under {root}")
    results = estimate_files(file_paths, workers=workers, show_progress=show_progress)
    return render_report(build_records(root, results))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimates hardcoded user-facing text in a client-side source tree.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "root",
        nargs='?',
        default=None,
        help="The directory to scan. Defaults to the current working directory."
    )
    parser.add_argument("-w", "--workers", type=int, default=DEFAULT_WORKERS, help="Number of parallel worker threads.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug output, including every file that could not be read.")
    parser.add_argument("--quiet", action="store_true", help="Suppress the progress bar and informational messages.")
    parser.add_argument(
        "--skip-unreadable-dirs",
        action="store_true",
        help="Skip directories that cannot be listed instead of aborting the scan."
    )
    return parser


def main(argv=None) -> int:
    just_fix_windows_console()
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    root = os.path.abspath(args.root if args.root else os.getcwd())
    if not os.path.isdir(root):
        logging.error(f"Scan root not found or not a directory: {root}")
        return 1
    if args.workers < 1:
        logging.error(f"--workers must be at least 1 (got {args.workers}).")
        return 1

    try:
        report = run_scan(
            root,
            workers=args.workers,
            skip_unreadable_dirs=args.skip_unreadable_dirs,
            show_progress=not args.quiet,
        )
    except OSError as e:
        logging.error(f"Scan aborted, could not read '{e.filename}': {e.strerror}")
        return 1
    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}Operation cancelled by user.{Fore.RESET}\n", file=sys.stderr)
        return 1

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# === End of src/estimate_hardcoded_text.py ===
