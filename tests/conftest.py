import json

import pytest

from emojilookup.emoji import Emoji
from emojilookup.index import build_index, load_index

GRINNING = Emoji(unicode="\U0001F600", aliases=frozenset({"grinning"}), tags=frozenset({"happy"}))
US = Emoji(unicode="\U0001F1FA\U0001F1F8", aliases=frozenset({"us"}), tags=frozenset({"flag"}))


@pytest.fixture
def small_records():
    return [GRINNING, US]


@pytest.fixture
def small_index(small_records):
    return build_index(small_records)


@pytest.fixture(scope="session")
def bundled_index():
    return load_index()


@pytest.fixture
def write_dataset(tmp_path):
    """Write a list of dataset entries to a file and return its path."""

    def _write(entries, name="emojis.json"):
        path = tmp_path / name
        path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
