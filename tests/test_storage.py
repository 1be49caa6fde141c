import json

import pytest

from recite import storage
from recite.storage import StorageError
from recite.word import Category, Word


def _sample(spelling="abandon", page=2):
    return Word(
        page_index=page,
        spelling=spelling,
        meanings=["give up"],
        part_of_speech="v.",
        synonyms=["desert"],
        antonyms=["keep"],
        near_synonyms=["quit"],
        similar=["abound"],
        noun=["abandonment"],
        verb=["abandon"],
        adj=["abandoned"],
        adv=["abandonedly"],
        useful_expressions=["abandon oneself to"],
    )


def test_word_json_round_trip():
    word = _sample()
    assert storage.word_from_json(storage.word_to_json(word)) == word


def test_word_json_uses_source_keys():
    obj = storage.word_to_json(_sample())
    assert obj["antonym"] == ["keep"]
    assert obj["pageIndex"] == 2
    assert obj["type"] == "v."
    assert "nearSynonyms" in obj and "usefulExpressions" in obj


def test_word_from_json_reads_plural_antonyms_key():
    word = storage.word_from_json({"spelling": "up", "antonyms": ["down"]})
    assert word.antonyms == ["down"]


def test_word_from_json_defaults_for_missing_fields():
    word = storage.word_from_json({})
    assert word.page_index == 0
    assert word.spelling == ""
    assert all(word.entries(c) == [] for c in Category)


def test_word_from_json_rejects_non_string_entry():
    with pytest.raises(StorageError):
        storage.word_from_json({"spelling": "x", "meanings": ["ok", 5]})


def test_write_and_read_words(tmp_path):
    path = tmp_path / "1.json"
    words = {w.spelling: w for w in (_sample("a"), _sample("b"))}
    storage.write_words(words, path)
    assert storage.read_words(path) == words
    assert storage.object_count(path) == 2


def test_read_words_missing_file_raises(tmp_path):
    with pytest.raises(StorageError):
        storage.read_words(tmp_path / "missing.json")


def test_read_words_rejects_non_array(tmp_path):
    path = tmp_path / "1.json"
    path.write_text('{"spelling": "x"}', encoding="utf-8")
    with pytest.raises(StorageError):
        storage.read_words(path)
    with pytest.raises(StorageError):
        storage.object_count(path)


def test_read_config_creates_missing_file(tmp_path):
    path = tmp_path / "config.json"
    assert storage.read_config(path) == (0, 0)
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "curPageIndex": 0,
        "countWordList": 0,
    }


def test_config_round_trip(tmp_path):
    path = tmp_path / "config.json"
    storage.write_config(path, 3, 7)
    assert storage.read_config(path) == (3, 7)


def test_read_config_rejects_array(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(StorageError):
        storage.read_config(path)


def test_append_and_insert_word(tmp_path):
    path = tmp_path / "1.json"
    storage.write_words({"a": _sample("a")}, path)
    storage.append_word(_sample("c"), path)
    storage.insert_word(_sample("b"), 1, path)
    spellings = [o["spelling"] for o in json.loads(path.read_text(encoding="utf-8"))]
    assert spellings == ["a", "b", "c"]


def test_append_to_missing_file_raises(tmp_path):
    with pytest.raises(StorageError):
        storage.append_word(_sample(), tmp_path / "missing.json")


def test_update_word_keeps_position(tmp_path):
    path = tmp_path / "1.json"
    storage.write_words({s: _sample(s) for s in ("a", "b", "c")}, path)
    changed = _sample("b")
    changed.meanings = ["second letter"]
    storage.update_word("b", changed, path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [o["spelling"] for o in data] == ["a", "b", "c"]
    assert data[1]["meanings"] == ["second letter"]


def test_update_unknown_word_goes_to_front(tmp_path):
    path = tmp_path / "1.json"
    storage.write_words({s: _sample(s) for s in ("a", "b")}, path)
    storage.update_word("z", _sample("z"), path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [o["spelling"] for o in data] == ["z", "a", "b"]


def test_update_word_cannot_change_spelling(tmp_path):
    path = tmp_path / "1.json"
    storage.write_words({"a": _sample("a")}, path)
    with pytest.raises(ValueError):
        storage.update_word("a", _sample("b"), path)
    assert list(storage.read_words(path)) == ["a"]


def test_placeholder_word_survives_storage(tmp_path):
    path = tmp_path / "1.json"
    placeholder = Word.placeholder()
    storage.write_words({placeholder.spelling: placeholder}, path)
    assert storage.read_words(path)["NaN"] == placeholder