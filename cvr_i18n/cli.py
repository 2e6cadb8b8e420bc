# -*- coding: utf-8 -*-

"""
Check and normalize the top-level keys of JSON locale files.
Usage: cvr-i18n [-d DIR] [-k] [-m [-e DIR]] [-s] [-b FILE] [-f FILE]

Example:
cvr-i18n -k
cvr-i18n -m -e build/missing
cvr-i18n -s -b zh-Hans.json -f locales/en.json

Exit codes:
- 0: nothing to report
- 1: duplicate or missing keys found
- 2: an error occurred
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import DEFAULT_CONFIG_FILE, ConfigError, load_config
from .duplicates import find_duplicates_in_file
from .locales import (
    LocaleError,
    list_locale_files,
    load_key_order,
    resolve_base_path,
    resolve_directory,
    same_file,
)
from .missing import check_file, ensure_export_dir, export_missing
from .sorter import sort_file

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvr-i18n",
        description="Check and normalize the top-level keys of JSON locale files.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-d",
        "--directory",
        help="Directory to use, default is ./locales and ./src/locales",
    )
    parser.add_argument(
        "-k",
        "--duplicated-key",
        action="store_true",
        help="Check for duplicate top-level keys in each JSON file",
    )
    parser.add_argument(
        "-m",
        "--missing-key",
        action="store_true",
        help="Check for missing top-level keys in each JSON file compared to the base file",
    )
    parser.add_argument(
        "-e",
        "--export",
        metavar="DIR",
        help="Export missing keys to JSON files in the specified directory",
    )
    parser.add_argument(
        "-s",
        "--sort",
        action="store_true",
        help="Sort keys in JSON files according to the base file's key order",
    )
    parser.add_argument(
        "-b",
        "--base",
        metavar="FILE",
        help="Base file for key order, default is en.json",
    )
    parser.add_argument(
        "-f",
        "--file",
        metavar="FILE",
        help="Specify a single file to process instead of the entire directory",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="YAML config file, default is ./.cvr-i18n.yml when present",
    )
    return parser


def report_error(path: str, error: Exception):
    print(f"{path}: ERROR: {error}", file=sys.stderr)


def _targets(file: Optional[str], directory: Optional[str]) -> List[str]:
    if file is not None:
        return [file]
    return list_locale_files(resolve_directory(directory))


def _load_base(base: Optional[str], directory: Optional[str]):
    base_path = resolve_base_path(base, directory)
    try:
        return base_path, load_key_order(base_path)
    except LocaleError as e:
        raise LocaleError(f"Base file {base_path}: {e}") from e


def check_duplicates_one(path: str) -> int:
    try:
        dups = find_duplicates_in_file(path)
    except LocaleError as e:
        report_error(path, e)
        return EXIT_ERROR

    if not dups:
        print(f"{path}: OK")
        return EXIT_OK

    print(f"{path}: DUPLICATES:")
    for key, count in dups.items():
        print(f"  {key}  ({count} times)")
    return EXIT_FINDINGS


def run_duplicates(file: Optional[str], directory: Optional[str]) -> int:
    status = EXIT_OK
    for path in _targets(file, directory):
        status = max(status, check_duplicates_one(path))
    return status


def check_missing_one(base_keys: List[str], path: str, export: Optional[str]) -> int:
    try:
        missing = check_file(base_keys, path)
    except LocaleError as e:
        report_error(path, e)
        return EXIT_ERROR

    if not missing:
        print(f"{path}: OK")
        return EXIT_OK

    print(f"{path}: MISSING:")
    for key in missing:
        print(f"  {key}")
    if export is not None:
        try:
            export_path = export_missing(missing, path, export)
        except LocaleError as e:
            print(e, file=sys.stderr)
            return EXIT_ERROR
        print(f"Exported missing keys to {export_path}")
    return EXIT_FINDINGS


def run_missing(
    file: Optional[str],
    directory: Optional[str],
    base: Optional[str],
    export: Optional[str] = None,
) -> int:
    base_path, base_keys = _load_base(base, directory)
    if export is not None:
        ensure_export_dir(export)

    status = EXIT_OK
    for path in _targets(file, directory):
        if same_file(path, base_path):
            if file is not None:
                print(f"{path}: SKIPPED (base file)")
            continue
        status = max(status, check_missing_one(base_keys, path, export))
    return status


def sort_one(base_keys: List[str], path: str) -> int:
    try:
        changed = sort_file(base_keys, path)
    except LocaleError as e:
        report_error(path, e)
        return EXIT_ERROR

    if changed:
        print(f"Sorted {path}")
    else:
        print(f"Unchanged {path}")
    return EXIT_OK


def run_sort(file: Optional[str], directory: Optional[str], base: Optional[str]) -> int:
    base_path, base_keys = _load_base(base, directory)

    status = EXIT_OK
    for path in _targets(file, directory):
        if same_file(path, base_path):
            if file is not None:
                print(f"{path}: SKIPPED (base file)")
            continue
        status = max(status, sort_one(base_keys, path))
    return status


def _load_settings(path: Optional[str]):
    """Settings from an explicit config file, or from the default one.

    An unusable default file only produces a warning.
    """
    if path is not None:
        return load_config(path)
    try:
        return load_config()
    except ConfigError as e:
        print(f"Warning: ignoring {DEFAULT_CONFIG_FILE}: {e}", file=sys.stderr)
        return {}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not (args.duplicated_key or args.missing_key or args.sort):
        parser.print_help()
        return EXIT_OK

    try:
        config = _load_settings(args.config)
        directory = args.directory or config.get("directory")
        base = args.base or config.get("base")
        export = args.export or config.get("export")

        status = EXIT_OK
        if args.duplicated_key:
            status = max(status, run_duplicates(args.file, directory))
        if args.missing_key:
            status = max(status, run_missing(args.file, directory, base, export))
        if args.sort:
            status = max(status, run_sort(args.file, directory, base))
    except LocaleError as e:
        print(e, file=sys.stderr)
        return EXIT_ERROR
    return status


if __name__ == "__main__":
    raise SystemExit(main())
