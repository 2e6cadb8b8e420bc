"""Tests for reordering locale keys by a base file."""

import json

import pytest

from cvr_i18n.locales import LocaleError
from cvr_i18n.sorter import dumps, sort_file, sort_keys


def test_base_keys_first_then_extras():
    result = sort_keys(["a", "b", "c"], {"c": 1, "a": 2, "x": 3})
    assert list(result) == ["a", "c", "x"]
    assert result == {"a": 2, "c": 1, "x": 3}


def test_extra_keys_sorted_ascending():
    result = sort_keys(["m"], {"zeta": 1, "m": 0, "Beta": 2, "alpha": 3})
    assert list(result) == ["m", "Beta", "alpha", "zeta"]


def test_values_carried_over():
    target = {"nested": {"z": 1, "a": [1, 2]}, "plain": "text"}
    result = sort_keys(["plain", "nested"], target)
    assert result["nested"] == {"z": 1, "a": [1, 2]}
    assert list(result["nested"]) == ["z", "a"]


def test_dumps_format():
    assert dumps({"a": 1, "b": [1, 2], "c": {}}) == (
        '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ],\n  "c": {}\n}'
    )
    assert dumps({"k": "日本語"}) == '{\n  "k": "日本語"\n}'


def test_sort_file_rewrites_in_place(tmp_path):
    path = tmp_path / "fr.json"
    path.write_text('{"c": "3", "x": "x", "a": "1"}', encoding="utf-8")

    assert sort_file(["a", "b", "c"], str(path)) is True
    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["a", "c", "x"]


def test_sort_file_is_idempotent(tmp_path):
    path = tmp_path / "fr.json"
    path.write_text('{"c": 3, "a": 1, "é": 2}', encoding="utf-8")

    sort_file(["a", "c"], str(path))
    first = path.read_bytes()
    assert sort_file(["a", "c"], str(path)) is False
    assert path.read_bytes() == first


def test_sort_file_reports_malformed_json(tmp_path):
    path = tmp_path / "fr.json"
    path.write_text('{"a": ', encoding="utf-8")
    with pytest.raises(LocaleError, match="invalid JSON"):
        sort_file(["a"], str(path))
    assert path.read_text(encoding="utf-8") == '{"a": '


@pytest.mark.parametrize(
    "text", [r'{"c": "\ud800", "a": "x"}', '{"b": 1e400, "a": 1}', '{"b": NaN}']
)
def test_sort_file_leaves_invalid_file_alone(tmp_path, text):
    path = tmp_path / "ja.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(LocaleError, match="invalid JSON"):
        sort_file(["a", "b", "c"], str(path))
    assert path.read_text(encoding="utf-8") == text


def test_dumps_refuses_non_finite_numbers():
    with pytest.raises(ValueError):
        dumps({"a": float("inf")})
