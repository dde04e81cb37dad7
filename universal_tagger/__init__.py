"""
universal-tagger: Language-agnostic natural-language tagger

Splits text into classified, span-preserving tokens and tags stop words
for the detected language. Works for any script: tokens are categorised
from Unicode properties, not from per-language rules.

Basic Usage:
    import universal_tagger

    # Tokenize text
    for token in universal_tagger.tokenize("Colorless green ideas sleep furiously."):
        print(f"{token.text!r} -> {token.category.value} ({token.position.value})")

    # Detect the language and tag stop words
    detector = universal_tagger.LanguageDetector.all()
    lang = detector.detect(text)
    if lang is not None:
        for position, token, tag in universal_tagger.Tagger(lang).tag(text):
            ...
"""

import time
from typing import Iterable, Iterator, Optional, Tuple

from universal_tagger.categories import Category, classify
from universal_tagger.exceptions import (
    ClassificationError,
    ConfigError,
    DetectorConfigurationError,
    InternalConsistencyError,
    PositionRunError,
    SpanAdjacencyError,
    UniversalTaggerError,
)
from universal_tagger.language import Language
from universal_tagger.language_detection import LanguageDetector
from universal_tagger.raw_types import Position, Span, Token, WordSegment
from universal_tagger.segmentation import SegmentSource, UnicodeSegmentSource
from universal_tagger.tagger import Tag, TaggedToken, Tagger

__version__ = "0.1.0"


# =============================================================================
# Main API
# =============================================================================

def tokenize(text: str, source: Optional[SegmentSource] = None) -> Iterator[Token]:
    """
    Tokenize text into classified tokens.

    This is the main entry point for text analysis. The result is lazy:
    tokens are produced as they are pulled, and each call starts over
    from the beginning of text.

    Args:
        text: Text to tokenize. Empty text yields no tokens.
        source: Segment source; defaults to UAX #29 segmentation

    Returns:
        Iterator of Token objects. Their spans partition text exactly.

    Raises:
        TypeError: If text is not a str

    Example:
        >>> import universal_tagger
        >>> [repr(t) for t in universal_tagger.tokenize("$2.50")]
        ["Symbol('$')@First", "FloatLiteral('2.50')@Last"]
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")

    from universal_tagger.tokenizer import tokenize_text
    if source is None:
        return tokenize_text(text)
    return tokenize_text(text, source)


def warm_up(languages: Optional[Iterable[Language]] = None, verbose: bool = False) -> Tuple[float, dict]:
    """
    Pre-load stop words and the language detector.

    Args:
        languages: Languages to load; defaults to the configured ones
        verbose: If True, print timing information

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)
    """
    from universal_tagger.config import load_config
    from universal_tagger.stop_words import lookup

    config = load_config()
    if languages is None:
        languages = config.detection.languages
    languages = list(languages)

    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Loading universal-tagger data...")

    t0 = time.perf_counter()
    count = sum(len(lookup(lang, config.stop_words.data_dir)) for lang in languages)
    timings['stop_words'] = (time.perf_counter() - t0) * 1000

    if verbose:
        print(f"  Stop words:     {timings['stop_words']:>7.1f}ms ({count:,} words, {len(languages)} languages)")

    if len(languages) > 1:
        t0 = time.perf_counter()
        detector = LanguageDetector(
            languages,
            minimum_relative_distance=config.detection.minimum_relative_distance,
            low_accuracy_mode=config.detection.low_accuracy_mode,
        )
        detector.detect("warm up")
        timings['detector'] = (time.perf_counter() - t0) * 1000

        if verbose:
            print(f"  Detector:       {timings['detector']:>7.1f}ms")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>7.1f}ms")

    return total_time, timings


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "Category",
    "Position",
    "Span",
    "Token",
    "WordSegment",
    "Tag",
    "TaggedToken",
    # Components
    "Language",
    "LanguageDetector",
    "Tagger",
    "SegmentSource",
    "UnicodeSegmentSource",
    # API
    "tokenize",
    "classify",
    "warm_up",
    "get_version",
    # Exceptions
    "UniversalTaggerError",
    "InternalConsistencyError",
    "ClassificationError",
    "PositionRunError",
    "SpanAdjacencyError",
    "DetectorConfigurationError",
    "ConfigError",
    # Version
    "__version__",
]
