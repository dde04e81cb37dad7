"""
Sentence and word segmentation.

Boundaries follow the Unicode text segmentation rules (UAX #29) as
implemented by uniseg. Text is split into sentences first, then each
sentence into word segments; every word segment carries its position in
the sentence's run (First, Middle, Last, or Only for a single segment).
"""

from typing import Iterable, Iterator, Protocol, Tuple

from more_itertools import mark_ends
from uniseg.sentencebreak import sentences as uniseg_sentences
from uniseg.wordbreak import words as uniseg_words

from universal_tagger.categories import classify
from universal_tagger.exceptions import InternalConsistencyError
from universal_tagger.raw_types import Position, Span, Token, WordSegment


class SegmentSource(Protocol):
    """Anything that can split text into sentences and sentences into words."""

    def sentences(self, text: str) -> Iterable[Tuple[int, str]]:
        """Yield (offset, sentence) pairs covering text exactly, in order."""
        ...

    def words(self, sentence: str) -> Iterable[WordSegment]:
        """Yield word segments of a sentence, offsets relative to the sentence."""
        ...


def position_of(is_first: bool, is_last: bool) -> Position:
    """Map run-end flags to a Position."""
    if is_first and is_last:
        return Position.ONLY
    if is_first:
        return Position.FIRST
    if is_last:
        return Position.LAST
    return Position.MIDDLE


def with_offsets(pieces: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Pair consecutive pieces of a string with their start offsets."""
    offset = 0
    for piece in pieces:
        yield offset, piece
        offset += len(piece)


class UnicodeSegmentSource:
    """Default segment source backed by uniseg's UAX #29 implementation."""

    def sentences(self, text: str) -> Iterator[Tuple[int, str]]:
        return with_offsets(s for s in uniseg_sentences(text) if s)

    def words(self, sentence: str) -> Iterator[WordSegment]:
        pieces = with_offsets(w for w in uniseg_words(sentence) if w)
        for is_first, is_last, (offset, word) in mark_ends(pieces):
            yield WordSegment(offset, word, position_of(is_first, is_last))


DEFAULT_SOURCE = UnicodeSegmentSource()


def word_positions(text: str, source: SegmentSource = DEFAULT_SOURCE) -> Iterator[WordSegment]:
    """
    Segment text into word segments with absolute offsets.

    Args:
        text: Input text
        source: Segment source to use

    Yields:
        WordSegment objects whose offsets index into text
    """
    for start, sentence in source.sentences(text):
        for offset, word, position in source.words(sentence):
            yield WordSegment(start + offset, word, position)


def annotate(text: str, segments: Iterable[WordSegment]) -> Iterator[Token]:
    """
    Classify word segments and attach their run position.

    The position is taken unchanged from the segment; the span is built
    over text itself so later stages can merge tokens without copying.
    """
    for offset, word, position in segments:
        span = Span(text, offset, offset + len(word))
        if span.text != word:
            raise InternalConsistencyError(f"segment {word!r} does not match text at offset {offset}")
        yield Token(classify(word), span, position)
