"""
Lightweight data structures shared by the tokenizer stages.

Spans are views into the caller's text: they hold a reference to the
source string plus (start, end) offsets and only slice when the text is
actually requested. Merging two tokens builds a wider view over the same
source, so no stage ever copies or concatenates text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from universal_tagger.categories import Category
from universal_tagger.exceptions import SpanAdjacencyError


class Position(Enum):
    """Place of a token inside a run of word segments."""
    FIRST = "First"
    MIDDLE = "Middle"
    LAST = "Last"
    ONLY = "Only"


class WordSegment(NamedTuple):
    """
    A word segment as reported by a segment source.

    The offset is relative to whatever string was segmented (the sentence,
    for SegmentSource.words) until it is remapped by the caller.
    """
    offset: int
    text: str
    position: Position


@dataclass(frozen=True, slots=True)
class Span:
    """
    An immutable view into a source string.

    Attributes:
        source: The full input text (borrowed, never copied)
        start: Start offset in source (inclusive)
        end: End offset in source (exclusive)
    """
    source: str = field(repr=False)
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end <= len(self.source):
            raise ValueError(
                f"span [{self.start}, {self.end}) out of bounds for text of length {len(self.source)}"
            )

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def is_adjacent_to(self, other: "Span") -> bool:
        """True if other starts exactly where this span ends, in the same source."""
        return self.source is other.source and self.end == other.start

    def join(self, other: "Span") -> "Span":
        """
        Build the span covering self followed by other.

        Raises:
            SpanAdjacencyError: If the spans are not adjacent views of one source
        """
        if not self.is_adjacent_to(other):
            raise SpanAdjacencyError(
                f"cannot join span [{self.start}, {self.end}) with [{other.start}, {other.end})"
            )
        return Span(self.source, self.start, other.end)


@dataclass(frozen=True, slots=True)
class Token:
    """
    A classified token.

    Attributes:
        category: Lexical category of the token text
        span: Where the token lives in the input text
        position: Place of the token inside its run
    """
    category: Category
    span: Span
    position: Position

    @property
    def text(self) -> str:
        return self.span.text

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def with_position(self, position: Position) -> "Token":
        """Copy of this token with another position tag."""
        return Token(self.category, self.span, position)

    def __repr__(self) -> str:
        return f"{self.category.value}({self.text!r})@{self.position.value}"
