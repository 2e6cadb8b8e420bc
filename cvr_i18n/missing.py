# -*- coding: utf-8 -*-

"""
Compare the top-level keys of locale files against a base locale.
"""

import json
import os
from typing import Dict, Iterable, List

from .locales import LocaleError, load_locale, write_text


def missing_keys(base_keys: Iterable[str], target: Dict) -> List[str]:
    """Keys of the base that the target lacks, in base order."""
    return [key for key in base_keys if key not in target]


def check_file(base_keys: List[str], path: str) -> List[str]:
    return missing_keys(base_keys, load_locale(path))


def export_path_for(target_path: str, export_dir: str) -> str:
    stem = os.path.splitext(os.path.basename(target_path))[0]
    return os.path.join(export_dir, f"{stem}_missing.json")


def ensure_export_dir(export_dir: str):
    try:
        os.makedirs(export_dir, exist_ok=True)
    except OSError as e:
        raise LocaleError(
            f"Failed to create export directory {export_dir}: {e}"
        ) from e


def export_missing(missing: List[str], target_path: str, export_dir: str) -> str:
    """Write the missing keys of one file as a JSON array.

    Args:
        missing: Missing keys, in base order
        target_path: The locale file the keys are missing from
        export_dir: Directory receiving ``<stem>_missing.json``

    Returns:
        Path of the written file
    """
    path = export_path_for(target_path, export_dir)
    write_text(
        path, json.dumps(missing, ensure_ascii=False, indent=2, allow_nan=False)
    )
    return path
