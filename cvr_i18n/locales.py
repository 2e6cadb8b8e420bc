# -*- coding: utf-8 -*-

"""
Loading and locating locale JSON files.

Every locale document is a JSON object; only its top-level keys and their
order matter to the checks in this package.
"""

import json
import math
import os
import shutil
import tempfile
from typing import Dict, List, Optional

DEFAULT_BASE = "en.json"
DEFAULT_DIRECTORIES = ("locales", os.path.join("src", "locales"))


class LocaleError(Exception):
    """Raised when a locale file cannot be read or is not a JSON object."""


def read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LocaleError(f"read {path}: {e}") from e


def _reject_constant(name: str):
    raise LocaleError(f"invalid JSON: {name} is not a JSON value")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise LocaleError(f"invalid JSON: number out of range: {text}")
    return value


def has_surrogates(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


def _check_strings(value):
    # json.loads lets "\ud800" through, such a string can never be written back
    if isinstance(value, dict):
        for key, item in value.items():
            _check_strings(key)
            _check_strings(item)
    elif isinstance(value, list):
        for item in value:
            _check_strings(item)
    elif isinstance(value, str) and has_surrogates(value):
        raise LocaleError("invalid JSON: lone surrogate in string")


def parse_locale(text: str) -> Dict:
    """Parse the text of a locale file.

    NaN, Infinity, out of range numbers and lone surrogate escapes are
    rejected, as they are not valid JSON.

    Args:
        text: Raw file content

    Returns:
        The root object, with keys in source order
    """
    try:
        data = json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_float
        )
    except json.JSONDecodeError as e:
        raise LocaleError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise LocaleError("root is not an object")
    _check_strings(data)
    return data


def write_text(path: str, text: str):
    """Replace the content of ``path`` with ``text``.

    The text is written to a temporary file next to ``path`` first, so a
    failed write leaves the previous content in place.
    """
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise LocaleError(f"Failed to write {path}: {e}") from e

    # replace the file a symlink points to, not the link
    target = os.path.realpath(path)
    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{os.path.basename(target)}.",
            suffix=".tmp",
            dir=os.path.dirname(target),
        )
    except OSError as e:
        raise LocaleError(f"Failed to write {path}: {e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if os.path.isfile(target):
            shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target)
    except OSError as e:
        os.unlink(tmp_path)
        raise LocaleError(f"Failed to write {path}: {e}") from e


def load_locale(path: str) -> Dict:
    return parse_locale(read_text(path))


def load_key_order(path: str) -> List[str]:
    """Top-level keys of a base file in the order they appear in the file."""
    return list(load_locale(path).keys())


def list_locale_files(directory: str) -> List[str]:
    """Return every regular ``.json`` file in ``directory``, sorted by path."""
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise LocaleError(f"Failed to read directory {directory}: {e}") from e

    files = []
    for name in names:
        path = os.path.join(directory, name)
        if os.path.splitext(name)[1] == ".json" and os.path.isfile(path):
            files.append(path)
    return sorted(files)


def resolve_directory(directory: Optional[str] = None) -> str:
    """Pick the working directory.

    An explicit directory must exist. Otherwise ``./locales`` and then
    ``./src/locales`` are tried in turn.
    """
    if directory is not None:
        if not os.path.isdir(directory):
            raise LocaleError(f"Directory does not exist: {directory}")
        return directory

    for candidate in DEFAULT_DIRECTORIES:
        if os.path.isdir(candidate):
            return candidate

    raise LocaleError(
        "No default directory found (checked ./locales and ./src/locales). "
        "Please specify with -d"
    )


def is_explicit_path(name: str) -> bool:
    return "/" in name or "\\" in name


def resolve_base_path(base: Optional[str], directory: Optional[str]) -> str:
    """Locate the base file.

    A name containing a path separator is used as given, anything else is
    looked up in the working directory.
    """
    base = base or DEFAULT_BASE
    if is_explicit_path(base):
        path = base
    else:
        path = os.path.join(resolve_directory(directory), base)
    if not os.path.isfile(path):
        raise LocaleError(f"Base file {path} not found")
    return path


def same_file(path1: str, path2: str) -> bool:
    return os.path.realpath(path1) == os.path.realpath(path2)
