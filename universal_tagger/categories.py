"""
Lexical categories for word segments.

A segment is classified from the Unicode general category of every code
point it contains. Rules are evaluated in a fixed order and the first
match wins, so every segment lands in exactly one category.
"""

import re
import unicodedata
from enum import Enum
from typing import Callable, List, Tuple

from universal_tagger.exceptions import ClassificationError


class Category(Enum):
    """Lexical category of a token."""
    SEPARATOR = "Separator"
    WHITESPACE = "Whitespace"
    SEPARATOR_OR_WHITESPACE = "SeparatorOrWhitespace"
    LETTER = "Letter"
    PUNCTUATION = "Punctuation"
    NUMBER = "Number"
    FLOAT_LITERAL = "FloatLiteral"
    SYMBOL = "Symbol"
    MARK = "Mark"
    LETTER_OR_PUNCTUATION = "LetterOrPunctuation"
    NUMBER_OR_PUNCTUATION = "NumberOrPunctuation"
    LETTER_OR_NUMBER = "LetterOrNumber"
    LETTER_OR_MARK = "LetterOrMark"
    NUMBER_OR_MARK = "NumberOrMark"
    OTHER = "Other"
    LETTER_OR_OTHER = "LetterOrOther"
    NUMBER_OR_OTHER = "NumberOrOther"
    OTHER_OR_PUNCTUATION = "OtherOrPunctuation"

    @property
    def is_separator_like(self) -> bool:
        """True for the separator/whitespace family."""
        return self in SEPARATOR_LIKE


SEPARATOR_LIKE = frozenset([
    Category.SEPARATOR,
    Category.WHITESPACE,
    Category.SEPARATOR_OR_WHITESPACE,
])


# =============================================================================
# Character Predicates
# =============================================================================

# Unicode White_Space property. str.isspace() is not used: it also accepts
# the information separators U+001C..U+001F.
WHITE_SPACE = frozenset([
    "\u0009", "\u000A", "\u000B", "\u000C", "\u000D",  # TAB, LF, VT, FF, CR
    "\u0020",  # SPACE
    "\u0085",  # NEXT LINE
    "\u00A0",  # NO-BREAK SPACE
    "\u1680",  # OGHAM SPACE MARK
    "\u2000", "\u2001", "\u2002", "\u2003", "\u2004", "\u2005",
    "\u2006", "\u2007", "\u2008", "\u2009", "\u200A",  # EN QUAD .. HAIR SPACE
    "\u2028",  # LINE SEPARATOR
    "\u2029",  # PARAGRAPH SEPARATOR
    "\u202F",  # NARROW NO-BREAK SPACE
    "\u205F",  # MEDIUM MATHEMATICAL SPACE
    "\u3000",  # IDEOGRAPHIC SPACE
])

# Base-10 floating-point literal, ASCII only. Accepts the same shapes as a
# strict float parser: "1", "1.", ".5", "2.50", "-3e10", "inf", "NaN".
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def is_separator(char: str) -> bool:
    return unicodedata.category(char)[0] == 'Z'


def is_whitespace(char: str) -> bool:
    return char in WHITE_SPACE


def is_letter(char: str) -> bool:
    return unicodedata.category(char)[0] == 'L'


def is_punctuation(char: str) -> bool:
    return unicodedata.category(char)[0] == 'P'


def is_number(char: str) -> bool:
    return unicodedata.category(char)[0] == 'N'


def is_symbol(char: str) -> bool:
    return unicodedata.category(char)[0] == 'S'


def is_mark(char: str) -> bool:
    return unicodedata.category(char)[0] == 'M'


def is_other(char: str) -> bool:
    return unicodedata.category(char)[0] == 'C'


def is_float_literal(text: str) -> bool:
    return FLOAT_PATTERN.fullmatch(text) is not None


def _all(predicate: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda text: all(predicate(c) for c in text)


def _all_either(first: Callable[[str], bool], second: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda text: all(first(c) or second(c) for c in text)


# =============================================================================
# Classification
# =============================================================================

# Order matters: pure categories before mixtures, and FLOAT_LITERAL after
# NUMBER so that integer runs stay NUMBER.
CLASSIFICATION_RULES: List[Tuple[Callable[[str], bool], Category]] = [
    (_all(is_separator), Category.SEPARATOR),
    (_all(lambda c: is_whitespace(c) and not is_separator(c)), Category.WHITESPACE),
    (_all_either(is_whitespace, is_separator), Category.SEPARATOR_OR_WHITESPACE),
    (_all(is_letter), Category.LETTER),
    (_all(is_punctuation), Category.PUNCTUATION),
    (_all(is_number), Category.NUMBER),
    (is_float_literal, Category.FLOAT_LITERAL),
    (_all(is_symbol), Category.SYMBOL),
    (_all(is_mark), Category.MARK),
    (_all_either(is_letter, is_punctuation), Category.LETTER_OR_PUNCTUATION),
    (_all_either(is_number, is_punctuation), Category.NUMBER_OR_PUNCTUATION),
    (_all_either(is_letter, is_number), Category.LETTER_OR_NUMBER),
    (_all_either(is_letter, is_mark), Category.LETTER_OR_MARK),
    (_all_either(is_number, is_mark), Category.NUMBER_OR_MARK),
    (_all(is_other), Category.OTHER),
    (_all_either(is_letter, is_other), Category.LETTER_OR_OTHER),
    (_all_either(is_number, is_other), Category.NUMBER_OR_OTHER),
    (_all_either(is_punctuation, is_other), Category.OTHER_OR_PUNCTUATION),
]


def classify(text: str) -> Category:
    """
    Classify a segment into its lexical category.

    Args:
        text: Segment text (must be non-empty)

    Returns:
        The first Category whose rule matches

    Raises:
        ValueError: If text is empty
        ClassificationError: If no rule matches (e.g. a letter glued to a symbol)

    Example:
        >>> classify("12.5")
        <Category.FLOAT_LITERAL: 'FloatLiteral'>
    """
    if not text:
        raise ValueError("cannot classify an empty segment")

    for matches, category in CLASSIFICATION_RULES:
        if matches(text):
            return category

    raise ClassificationError(text)


def can_merge(first: Category, second: Category) -> bool:
    """
    True if tokens of these categories may be coalesced.

    Identical categories merge; so does any pair from the
    separator/whitespace family.
    """
    if first is second:
        return True
    return first.is_separator_like and second.is_separator_like
