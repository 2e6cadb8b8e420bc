# -*- coding: utf-8 -*-

"""
Reorder the top-level keys of locale files to follow a base file.

Keys known to the base come first, in base order. Keys the base does not
have are appended in ascending order.
"""

import json
from typing import Dict, List

from .locales import parse_locale, read_text, write_text


def sort_keys(base_keys: List[str], target: Dict) -> Dict:
    ordered = {}
    for key in base_keys:
        if key in target:
            ordered[key] = target[key]
    for key in sorted(target):
        if key not in ordered:
            ordered[key] = target[key]
    return ordered


def dumps(document: Dict) -> str:
    return json.dumps(document, ensure_ascii=False, indent=2, allow_nan=False)


def sort_file(base_keys: List[str], path: str) -> bool:
    """Rewrite ``path`` with its keys in base order.

    Returns:
        True if the file content changed
    """
    text = read_text(path)
    output = dumps(sort_keys(base_keys, parse_locale(text)))
    if output == text:
        return False
    write_text(path, output)
    return True
