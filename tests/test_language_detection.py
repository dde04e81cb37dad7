"""
Tests for language detection.
"""

import pytest

from universal_tagger.config import Config, DetectionConfig
from universal_tagger.exceptions import DetectorConfigurationError
from universal_tagger.language import Language
from universal_tagger.language_detection import LanguageDetector


def test_allow():
    text = "There is no reason not to learn Esperanto."
    lang = LanguageDetector.empty().allow(Language.ENG).allow(Language.RUS).detect(text)

    assert lang is Language.ENG


def test_esperanto():
    text = "Ĉu vi ne volas eklerni Esperanton? Bonvolu! Estas unu de la plej bonaj aferoj!"
    detector = LanguageDetector([Language.EPO, Language.ENG, Language.SPA, Language.ITA])

    assert detector.detect(text) is Language.EPO


def test_needs_two_languages():
    detector = LanguageDetector.empty().allow(Language.ENG)

    with pytest.raises(DetectorConfigurationError):
        detector.detect("Hello there")
    with pytest.raises(ValueError):
        LanguageDetector.empty().detect("Hello there")


def test_empty_text_is_not_detected():
    detector = LanguageDetector([Language.ENG, Language.DEU])

    assert detector.detect("") is None
    assert detector.detect("   ") is None


def test_deny_and_languages():
    detector = LanguageDetector.empty().allow(Language.RUS).allow(Language.ENG).allow(Language.DEU)
    detector.deny(Language.DEU).deny(Language.DEU)

    assert detector.languages == (Language.ENG, Language.RUS)


def test_detector_rebuilt_when_languages_change():
    detector = LanguageDetector([Language.ENG, Language.DEU])
    detector.detect("The cat sat on the mat.")
    built = detector._detector

    detector.detect("Another sentence in English.")
    assert detector._detector is built

    detector.allow(Language.FRA)
    assert detector._detector is None


def test_all_uses_configured_languages():
    config = Config(detection=DetectionConfig(languages=["eng", "fra"], minimum_relative_distance=0.1))
    detector = LanguageDetector.all(config)

    assert detector.languages == (Language.ENG, Language.FRA)
    assert detector.minimum_relative_distance == 0.1


def test_all_defaults_to_every_language():
    assert LanguageDetector.all().languages == tuple(sorted(Language, key=lambda lang: lang.value))
