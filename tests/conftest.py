import json

import pytest


def write_json(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def locales_dir(tmp_path):
    """A locales directory holding en.json (a, b, c) and two translations."""
    directory = tmp_path / "locales"
    directory.mkdir()
    write_json(directory / "en.json", {"a": "A", "b": "B", "c": "C"})
    write_json(directory / "de.json", {"c": "C-de", "a": "A-de", "b": "B-de"})
    write_json(directory / "fr.json", {"a": "A-fr"})
    return directory
