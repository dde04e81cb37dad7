"""
Natural language detection.

Thin wrapper over lingua's n-gram detector restricted to an allow-set of
Language members. Detection returns None whenever the result is unreliable
or the detected language is not one we support.
"""

import logging
from typing import Iterable, Optional, Tuple

from universal_tagger.config import Config, load_config
from universal_tagger.exceptions import DetectorConfigurationError
from universal_tagger.language import Language

logger = logging.getLogger(__name__)


class LanguageDetector:
    """
    Language detector over an allow-set of languages.

    Example:
        >>> detector = LanguageDetector.empty().allow(Language.ENG).allow(Language.RUS)
        >>> detector.detect("There is no reason not to learn Esperanto.")
        <Language.ENG: 'eng'>
    """

    def __init__(
        self,
        languages: Iterable[Language] = (),
        minimum_relative_distance: float = 0.0,
        low_accuracy_mode: bool = False,
    ):
        self._languages = set(languages)
        self.minimum_relative_distance = minimum_relative_distance
        self.low_accuracy_mode = low_accuracy_mode
        self._detector = None

    @classmethod
    def empty(cls) -> "LanguageDetector":
        """A detector with no languages; use allow() to add some."""
        return cls()

    @classmethod
    def all(cls, config: Optional[Config] = None) -> "LanguageDetector":
        """A detector over every language enabled in the configuration."""
        if config is None:
            config = load_config()
        detection = config.detection
        return cls(
            detection.languages,
            minimum_relative_distance=detection.minimum_relative_distance,
            low_accuracy_mode=detection.low_accuracy_mode,
        )

    def allow(self, lang: Language) -> "LanguageDetector":
        if lang not in self._languages:
            self._languages.add(lang)
            self._detector = None
        return self

    def deny(self, lang: Language) -> "LanguageDetector":
        if lang in self._languages:
            self._languages.discard(lang)
            self._detector = None
        return self

    @property
    def languages(self) -> Tuple[Language, ...]:
        """Allowed languages, sorted by code."""
        return tuple(sorted(self._languages, key=lambda lang: lang.value))

    def detect(self, text: str) -> Optional[Language]:
        """
        Detect the language of text.

        Returns:
            The detected Language, or None if detection failed, is
            unreliable, or found a language outside the allow-set

        Raises:
            DetectorConfigurationError: If fewer than two languages are allowed
        """
        if len(self._languages) < 2:
            raise DetectorConfigurationError(
                "Detector needs at least two languages to choose from"
            )

        if not text or not text.strip():
            return None

        detected = self._get_detector().detect_language_of(text)
        logger.debug("lingua language: %s", detected)

        if detected is None:
            return None

        for lang in self._languages:
            if lang.to_lingua() == detected:
                return lang
        return None

    def _get_detector(self):
        """Build the lingua detector on first use; cached until the allow-set changes."""
        if self._detector is not None:
            return self._detector

        from lingua import LanguageDetectorBuilder

        builder = LanguageDetectorBuilder.from_languages(
            *[lang.to_lingua() for lang in self.languages]
        )
        if self.minimum_relative_distance > 0:
            builder = builder.with_minimum_relative_distance(self.minimum_relative_distance)
        if self.low_accuracy_mode:
            builder = builder.with_low_accuracy_mode()

        self._detector = builder.build()
        logger.debug("Built lingua detector for %s", [lang.value for lang in self.languages])
        return self._detector

    def __repr__(self) -> str:
        return f"LanguageDetector({[lang.value for lang in self.languages]})"
