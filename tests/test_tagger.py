"""
Tests for stop-word tagging.
"""

import pytest

from universal_tagger import LanguageDetector, Tag, Tagger, stop_words
from universal_tagger.config import CONFIG_ENV_VAR, Config, StopWordsConfig
from universal_tagger.exceptions import ClassificationError
from universal_tagger.language import Language
from universal_tagger.raw_types import Position
from universal_tagger.stop_words import StopWords, build_stop_words


def test_tag_tokens():
    text = "Colorless green ideas sleep furiously."
    lang = LanguageDetector.empty().allow(Language.ENG).allow(Language.CMN).detect(text)
    assert lang is Language.ENG

    tagged = list(Tagger(lang, StopWords.from_words(lang, ["the"])).tag(text))

    assert [(p, t.text, tag) for p, t, tag in tagged] == [
        (Position.FIRST, "Colorless", None),
        (Position.MIDDLE, " ", None),
        (Position.MIDDLE, "green", None),
        (Position.MIDDLE, " ", None),
        (Position.MIDDLE, "ideas", None),
        (Position.MIDDLE, " ", None),
        (Position.MIDDLE, "sleep", None),
        (Position.MIDDLE, " ", None),
        (Position.MIDDLE, "furiously", None),
        (Position.LAST, ".", None),
    ]


def test_stop_words_tagged_case_insensitively():
    tagger = Tagger(Language.ENG, StopWords.from_words(Language.ENG, ["the", "on"]))

    tagged = list(tagger.tag("The cat sat ON the mat."))
    flagged = [token.text for _, token, tag in tagged if tag is Tag.STOP_WORD]

    assert flagged == ["The", "ON", "the"]


def test_position_matches_token():
    tagger = Tagger(Language.ENG, StopWords.from_words(Language.ENG, []))

    for position, token, tag in tagger.tag("Mr.  Fox  jumped."):
        assert position is token.position
        assert tag is None


def test_real_stop_words():
    tagger = Tagger(Language.ENG)

    tags = {token.text: tag for _, token, tag in tagger.tag("The fox and the dog")}

    assert tags["The"] is Tag.STOP_WORD
    assert tags["and"] is Tag.STOP_WORD
    assert tags["fox"] is None


def test_configured_data_dir_is_used(tmp_path, monkeypatch):
    build_stop_words(Language.ENG, tmp_path)
    config_path = tmp_path / "config.yaml"
    Config(stop_words=StopWordsConfig(data_dir=tmp_path)).to_yaml(config_path)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))

    loaded_from = []
    load = stop_words.load_stop_words

    def recording_load(language, data_dir=None):
        loaded_from.append(data_dir)
        return load(language, data_dir)

    monkeypatch.setattr(stop_words, "load_stop_words", recording_load)
    stop_words.unload_stop_words()
    try:
        tagger = Tagger(Language.ENG)
    finally:
        stop_words.unload_stop_words()

    assert loaded_from == [tmp_path]
    assert "THE" in tagger.stop_words


def test_explicit_config_data_dir(tmp_path, monkeypatch):
    loaded_from = []
    monkeypatch.setattr(
        stop_words, "load_stop_words",
        lambda language, data_dir=None: loaded_from.append(data_dir) or StopWords.from_words(language, []),
    )
    stop_words.unload_stop_words()
    try:
        Tagger(Language.DEU, config=Config(stop_words=StopWordsConfig(data_dir=tmp_path / "tries")))
    finally:
        stop_words.unload_stop_words()

    assert loaded_from == [tmp_path / "tries"]


def test_unclassifiable_word_raises():
    tagger = Tagger(Language.ENG, StopWords.from_words(Language.ENG, []))

    with pytest.raises(ClassificationError):
        list(tagger.tag("version v1.2"))
