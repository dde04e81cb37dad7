"""
Stop-word lists for universal-tagger.

Stop words come from the stopwords-iso collection and are stored as
case-folded keys in a marisa_trie.Trie, which makes membership tests
case-insensitive and keeps memory low. Tries can be prebuilt to disk with
build_stop_words() and are then memory-mapped instead of rebuilt.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

import marisa_trie
import stopwordsiso

from universal_tagger.language import Language

logger = logging.getLogger(__name__)

TRIE_SUFFIX = ".trie"


class StopWords:
    """
    A case-insensitive set of stop words.

    Attributes:
        language: Language the words belong to
        trie: Case-folded words
    """
    __slots__ = ("language", "trie")

    def __init__(self, language: Language, trie: marisa_trie.Trie):
        self.language = language
        self.trie = trie

    @classmethod
    def from_words(cls, language: Language, words: Iterable[str]) -> "StopWords":
        return cls(language, marisa_trie.Trie(word.casefold() for word in words))

    def __contains__(self, word: str) -> bool:
        return word.casefold() in self.trie

    def __len__(self) -> int:
        return len(self.trie)

    def __repr__(self) -> str:
        return f"StopWords({self.language.value!r}, {len(self)} words)"


# ============================================================================
# Loading
# ============================================================================

# Module-level cache, one entry per language
_STOP_WORDS: Dict[Language, StopWords] = {}


def get_trie_path(data_dir: Path, language: Language) -> Path:
    """Path of the prebuilt trie for a language."""
    return Path(data_dir) / f"{language.value}{TRIE_SUFFIX}"


def source_words(language: Language) -> set:
    """
    Raw stop words for a language from stopwords-iso.

    Returns an empty set if stopwords-iso has no list for the language.
    """
    code = language.iso_639_1
    if not stopwordsiso.has_lang(code):
        logger.warning("No stop words available for %s (%s)", language.english_name, code)
        return set()
    return set(stopwordsiso.stopwords(code))


def load_stop_words(language: Language, data_dir: Optional[Path] = None) -> StopWords:
    """
    Load the stop words for a language, bypassing the cache.

    Args:
        language: Language to load
        data_dir: Directory of prebuilt tries. If it holds a trie for the
            language, that file is memory-mapped.

    Returns:
        StopWords for the language
    """
    if data_dir is not None:
        path = get_trie_path(data_dir, language)
        if path.exists():
            trie = marisa_trie.Trie()
            trie.mmap(str(path))
            logger.debug("Memory-mapped %d stop words for %s from %s", len(trie), language.value, path)
            return StopWords(language, trie)
        logger.debug("No prebuilt stop words at %s, building in memory", path)

    stop_words = StopWords.from_words(language, source_words(language))
    logger.debug("Built %d stop words for %s", len(stop_words), language.value)
    return stop_words


def lookup(language: Language, data_dir: Optional[Path] = None) -> StopWords:
    """
    Get the stop words for a language.

    Loaded once per process; later calls return the cached set.
    """
    stop_words = _STOP_WORDS.get(language)
    if stop_words is None:
        stop_words = load_stop_words(language, data_dir)
        _STOP_WORDS[language] = stop_words
    return stop_words


def is_loaded(language: Language) -> bool:
    """Check if a language's stop words are cached."""
    return language in _STOP_WORDS


def unload_stop_words():
    """Drop every cached stop-word set."""
    _STOP_WORDS.clear()


# ============================================================================
# Building
# ============================================================================

def build_stop_words(language: Language, output_dir: Path) -> Path:
    """
    Build and save the stop-word trie for a language.

    Args:
        language: Language to build
        output_dir: Directory to write <code>.trie into (created if missing)

    Returns:
        Path of the written file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    stop_words = StopWords.from_words(language, source_words(language))
    path = get_trie_path(output_dir, language)
    stop_words.trie.save(str(path))

    logger.info("Saved %d stop words for %s to %s", len(stop_words), language.value, path)
    return path
