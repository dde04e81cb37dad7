"""
Supported natural languages.

Languages are identified by their ISO 639-3 code. Each one maps onto the
detector's language (lingua) and onto the stop-word provider's key
(ISO 639-1). Which languages are active is a runtime setting, see
universal_tagger.config.
"""

from enum import Enum
from typing import Dict


class Language(Enum):
    """Language codes following the ISO 639-3 standard."""
    ARA = "ara"
    BEN = "ben"
    CMN = "cmn"
    DEU = "deu"
    ENG = "eng"
    EPO = "epo"
    FRA = "fra"
    HIN = "hin"
    IND = "ind"
    ITA = "ita"
    JPN = "jpn"
    POR = "por"
    RUS = "rus"
    SPA = "spa"
    TUR = "tur"
    URD = "urd"

    @property
    def native_name(self) -> str:
        return LANGUAGE_INFO[self][0]

    @property
    def english_name(self) -> str:
        return LANGUAGE_INFO[self][1]

    @property
    def iso_639_1(self) -> str:
        return LANGUAGE_INFO[self][2]

    def to_lingua(self):
        """The matching lingua.Language."""
        from lingua import Language as LinguaLanguage
        return getattr(LinguaLanguage, self.english_name.upper())

    @classmethod
    def parse(cls, value: str) -> "Language":
        """
        Parse a language from its ISO 639-3 code, ISO 639-1 code or English name.

        Raises:
            ValueError: If the value names no supported language
        """
        key = value.strip().lower()
        for lang in cls:
            if key in (lang.value, lang.iso_639_1, lang.english_name.lower()):
                return lang
        raise ValueError(f"unsupported language: {value!r}")


# (native name, English name as lingua spells it, ISO 639-1)
LANGUAGE_INFO: Dict[Language, tuple] = {
    Language.ARA: ("العربية", "Arabic", "ar"),
    Language.BEN: ("বাংলা", "Bengali", "bn"),
    Language.CMN: ("普通话", "Chinese", "zh"),
    Language.DEU: ("Deutsch", "German", "de"),
    Language.ENG: ("English", "English", "en"),
    Language.EPO: ("Esperanto", "Esperanto", "eo"),
    Language.FRA: ("Français", "French", "fr"),
    Language.HIN: ("हिन्दी", "Hindi", "hi"),
    Language.IND: ("Bahasa Indonesia", "Indonesian", "id"),
    Language.ITA: ("Italiano", "Italian", "it"),
    Language.JPN: ("日本語", "Japanese", "ja"),
    Language.POR: ("Português", "Portuguese", "pt"),
    Language.RUS: ("Русский", "Russian", "ru"),
    Language.SPA: ("Español", "Spanish", "es"),
    Language.TUR: ("Türkçe", "Turkish", "tr"),
    Language.URD: ("اُردُو", "Urdu", "ur"),
}
