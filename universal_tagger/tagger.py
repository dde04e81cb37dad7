"""
Stop-word tagging over the token stream.
"""

from enum import Enum
from typing import Iterator, NamedTuple, Optional

from universal_tagger import stop_words as stop_word_lists
from universal_tagger.config import Config, load_config
from universal_tagger.language import Language
from universal_tagger.raw_types import Position, Token
from universal_tagger.segmentation import DEFAULT_SOURCE, SegmentSource
from universal_tagger.stop_words import StopWords
from universal_tagger.tokenizer import tokenize_text


class Tag(Enum):
    STOP_WORD = "StopWord"


class TaggedToken(NamedTuple):
    position: Position
    token: Token
    tag: Optional[Tag]


class Tagger:
    """
    Tags tokens of a text with a stop-word flag.

    Example:
        >>> tagger = Tagger(Language.ENG)
        >>> [t.tag for t in tagger.tag("the cat")]
        [<Tag.STOP_WORD: 'StopWord'>, None, None]
    """

    def __init__(
        self,
        language: Language,
        stop_words: Optional[StopWords] = None,
        source: SegmentSource = DEFAULT_SOURCE,
        config: Optional[Config] = None,
    ):
        self.language = language
        if stop_words is None:
            # Prebuilt tries from the configured data_dir are memory-mapped
            if config is None:
                config = load_config()
            stop_words = stop_word_lists.lookup(language, config.stop_words.data_dir)
        self.stop_words = stop_words
        self.source = source

    def tag(self, text: str) -> Iterator[TaggedToken]:
        """Tokenize text and tag each token."""
        for token in tokenize_text(text, self.source):
            yield TaggedToken(token.position, token, self.tag_token(token))

    def tag_token(self, token: Token) -> Optional[Tag]:
        """Tag.STOP_WORD if the token text is a stop word (case-insensitive)."""
        # TODO: detect abbreviations and acronyms before the stop-word lookup
        if token.text in self.stop_words:
            return Tag.STOP_WORD
        return None

    def __repr__(self) -> str:
        return f"Tagger({self.language.value!r})"
