"""
Shared fixtures for universal-tagger tests.
"""

from typing import Dict, Iterator, List, Tuple

import pytest

from universal_tagger.config import CONFIG_ENV_VAR
from universal_tagger.raw_types import Position, Span, Token, WordSegment
from universal_tagger.segmentation import position_of
from universal_tagger.categories import Category


class ScriptedSegmentSource:
    """
    Segment source with hand-picked boundaries.

    Each inner list is one sentence, split into the given word segments.
    Lets tests put sentence boundaries where the Unicode rules never would,
    e.g. inside a run of spaces.
    """

    def __init__(self, sentences: List[List[str]]):
        self.script = sentences
        self.text = "".join("".join(words) for words in sentences)
        self._words: Dict[str, List[str]] = {}
        for words in sentences:
            self._words.setdefault("".join(words), words)
        self.words_pulled = 0

    def sentences(self, text: str) -> Iterator[Tuple[int, str]]:
        assert text == self.text
        offset = 0
        for words in self.script:
            sentence = "".join(words)
            yield offset, sentence
            offset += len(sentence)

    def words(self, sentence: str) -> Iterator[WordSegment]:
        words = self._words[sentence]
        offset = 0
        for index, word in enumerate(words):
            self.words_pulled += 1
            yield WordSegment(offset, word, position_of(index == 0, index == len(words) - 1))
            offset += len(word)


@pytest.fixture
def scripted():
    """Factory for ScriptedSegmentSource."""
    return ScriptedSegmentSource


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Tests never pick up a config file from the environment."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def make_tokens(text: str, pieces: List[Tuple[Category, str, Position]]) -> List[Token]:
    """Build consecutive tokens over text from (category, piece, position) triples."""
    tokens = []
    offset = 0
    for category, piece, position in pieces:
        assert text[offset:offset + len(piece)] == piece
        tokens.append(Token(category, Span(text, offset, offset + len(piece)), position))
        offset += len(piece)
    return tokens


def summary(tokens) -> List[Tuple[str, str, str]]:
    """(category, text, position) triples for readable assertions."""
    return [(t.category.value, t.text, t.position.value) for t in tokens]
