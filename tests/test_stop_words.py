"""
Tests for stop-word lists.
"""

import pytest

import universal_tagger
from universal_tagger import stop_words
from universal_tagger.language import Language
from universal_tagger.stop_words import (
    StopWords,
    build_stop_words,
    get_trie_path,
    load_stop_words,
    lookup,
)


@pytest.fixture(autouse=True)
def clear_cache():
    stop_words.unload_stop_words()
    yield
    stop_words.unload_stop_words()


def test_case_insensitive():
    words = StopWords.from_words(Language.DEU, ["der", "Straße"])

    assert "DER" in words
    assert "der" in words
    assert "STRASSE" in words
    assert "Haus" not in words
    assert len(words) == 2


def test_lookup_english():
    words = lookup(Language.ENG)

    assert "the" in words
    assert "The" in words
    assert "furiously" not in words
    assert words.language is Language.ENG


def test_lookup_is_cached():
    assert not stop_words.is_loaded(Language.ENG)
    first = lookup(Language.ENG)

    assert stop_words.is_loaded(Language.ENG)
    assert lookup(Language.ENG) is first


def test_unknown_language_is_empty(monkeypatch, caplog):
    monkeypatch.setattr(stop_words.stopwordsiso, "has_lang", lambda code: False)

    words = load_stop_words(Language.EPO)

    assert len(words) == 0
    assert "anything" not in words
    assert "No stop words" in caplog.text


def test_build_and_mmap(tmp_path):
    path = build_stop_words(Language.ENG, tmp_path / "tries")

    assert path == get_trie_path(tmp_path / "tries", Language.ENG)
    assert path.exists()

    words = load_stop_words(Language.ENG, tmp_path / "tries")
    assert "THE" in words
    assert len(words) == len(StopWords.from_words(Language.ENG, stop_words.source_words(Language.ENG)))


def test_missing_prebuilt_file_falls_back(tmp_path):
    words = load_stop_words(Language.ENG, tmp_path)

    assert "the" in words


def test_warm_up_loads_stop_words():
    total, timings = universal_tagger.warm_up([Language.ENG, Language.DEU])

    assert stop_words.is_loaded(Language.ENG)
    assert stop_words.is_loaded(Language.DEU)
    assert set(timings) == {"stop_words", "detector", "total"}
    assert total >= 0
    assert universal_tagger.get_version() == universal_tagger.__version__
