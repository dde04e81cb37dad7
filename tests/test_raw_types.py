"""
Tests for spans and tokens.
"""

import pytest

from universal_tagger.categories import Category
from universal_tagger.exceptions import SpanAdjacencyError
from universal_tagger.raw_types import Position, Span, Token


def test_span_is_a_view():
    text = "Colorless green"
    span = Span(text, 10, 15)

    assert span.text == "green"
    assert len(span) == 5
    assert span.source is text


def test_span_bounds_checked():
    with pytest.raises(ValueError):
        Span("abc", 2, 1)
    with pytest.raises(ValueError):
        Span("abc", 0, 4)


def test_span_join_adjacent():
    text = "Mr.  Fox"
    joined = Span(text, 3, 4).join(Span(text, 4, 5))

    assert joined == Span(text, 3, 5)
    assert joined.text == "  "
    assert joined.source is text


def test_span_join_gap():
    text = "a b c"
    with pytest.raises(SpanAdjacencyError):
        Span(text, 0, 1).join(Span(text, 2, 3))


def test_span_join_other_source():
    text = "ab"
    other = "".join(["a", "b"])
    assert other == text and other is not text

    first = Span(text, 0, 1)
    second = Span(other, 1, 2)

    assert not first.is_adjacent_to(second)
    with pytest.raises(SpanAdjacencyError):
        first.join(second)


def test_span_join_reversed_order():
    text = "ab"
    with pytest.raises(SpanAdjacencyError):
        Span(text, 1, 2).join(Span(text, 0, 1))


def test_token_accessors():
    text = "$2.50"
    token = Token(Category.FLOAT_LITERAL, Span(text, 1, 5), Position.LAST)

    assert token.text == "2.50"
    assert token.start == 1
    assert token.end == 5
    assert repr(token) == "FloatLiteral('2.50')@Last"


def test_token_is_immutable():
    token = Token(Category.LETTER, Span("hi", 0, 2), Position.ONLY)

    with pytest.raises(AttributeError):
        token.position = Position.FIRST

    retagged = token.with_position(Position.FIRST)
    assert retagged.position is Position.FIRST
    assert token.position is Position.ONLY
    assert retagged.span is token.span
