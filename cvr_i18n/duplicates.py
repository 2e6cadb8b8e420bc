# -*- coding: utf-8 -*-

"""
Find duplicate top-level keys in a JSON locale file.

json.loads keeps only the last value of a repeated key, so the raw text is
scanned instead: a string is a top-level key when it sits directly inside the
root object and is followed by a colon.
"""

import json
from typing import Dict, List

from .locales import has_surrogates, parse_locale, read_text

WHITESPACE = " \t\n\r"


def _string_end(text: str, start: int) -> int:
    """Index just past the closing quote of the string opened at ``start``."""
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i + 1
        i += 1
    return n


def _skip_whitespace(text: str, i: int) -> int:
    while i < len(text) and text[i] in WHITESPACE:
        i += 1
    return i


def _decode_key(raw: str) -> str:
    # "\u0061" and "a" name the same key
    try:
        key = json.loads(f'"{raw}"')
    except json.JSONDecodeError:
        return raw
    if has_surrogates(key):
        return raw
    return key


def scan_top_level_keys(text: str) -> List[str]:
    """Return every top-level key occurrence in ``text``, duplicates included.

    Args:
        text: Raw JSON text

    Returns:
        Keys in the order they appear
    """
    keys = []
    stack = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            end = _string_end(text, i)
            if len(stack) == 1 and stack[0] == "{":
                j = _skip_whitespace(text, end)
                if j < n and text[j] == ":":
                    keys.append(_decode_key(text[i + 1 : end - 1]))
            i = end
            continue
        if ch in "{[":
            stack.append(ch)
        elif ch in "}]" and stack:
            stack.pop()
        i += 1
    return keys


def count_duplicates(text: str) -> Dict[str, int]:
    """Keys seen more than once at the top level, with their counts."""
    counts: Dict[str, int] = {}
    for key in scan_top_level_keys(text):
        counts[key] = counts.get(key, 0) + 1
    return {key: count for key, count in counts.items() if count > 1}


def find_duplicates_in_file(path: str) -> Dict[str, int]:
    """Scan one file for duplicate top-level keys.

    A file without duplicates must still be a well-formed JSON object,
    otherwise LocaleError is raised.
    """
    text = read_text(path)
    dups = count_duplicates(text)
    if not dups:
        parse_locale(text)
    return dups
