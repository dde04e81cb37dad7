"""
Tokenizer module for universal-tagger.

This module implements the core tokenization logic: word segments are
classified, then adjacent segments of the same category are coalesced
into larger tokens. Coalescing runs twice with a boundary repair pass in
between, because sentence splitting can cut a run of spaces in two.

Every stage is a generator holding at most one buffered token, so the
whole pipeline streams.
"""

import logging
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

from universal_tagger.categories import can_merge, classify
from universal_tagger.exceptions import PositionRunError
from universal_tagger.raw_types import Position, Token
from universal_tagger.segmentation import DEFAULT_SOURCE, SegmentSource, annotate, word_positions

logger = logging.getLogger(__name__)

FIRST, MIDDLE, LAST, ONLY = Position.FIRST, Position.MIDDLE, Position.LAST, Position.ONLY


# =============================================================================
# Run Transitions
# =============================================================================

# (first position, second position) -> position of the merged token
MERGE_TRANSITIONS: Dict[Tuple[Position, Position], Position] = {
    (FIRST, MIDDLE): FIRST,
    (FIRST, LAST): ONLY,
    (MIDDLE, MIDDLE): MIDDLE,
    (MIDDLE, LAST): LAST,
    (ONLY, FIRST): FIRST,
    (ONLY, ONLY): ONLY,
    (LAST, ONLY): LAST,
}

# A run is First, Middle*, Last or a lone Only. Inside a run nothing can
# follow First/Middle except Middle/Last, and a finished run (Last/Only)
# can only be followed by the start of another one.
IMPOSSIBLE_TRANSITIONS: FrozenSet[Tuple[Position, Position]] = frozenset([
    (FIRST, FIRST), (FIRST, ONLY),
    (MIDDLE, FIRST), (MIDDLE, ONLY),
    (LAST, LAST), (LAST, MIDDLE),
    (ONLY, LAST), (ONLY, MIDDLE),
])


def merge_tokens(first: Token, second: Token) -> Optional[Token]:
    """
    Merge two neighbouring tokens if they belong together.

    Returns:
        The merged token, or None if the pair must stay apart

    Raises:
        PositionRunError: If the pair is mergeable but its positions
            cannot follow each other
    """
    if not can_merge(first.category, second.category):
        return None

    if not first.span.is_adjacent_to(second.span):
        logger.warning("Refusing to merge non-adjacent tokens %r and %r", first, second)
        return None

    transition = (first.position, second.position)
    position = MERGE_TRANSITIONS.get(transition)
    if position is None:
        if transition in IMPOSSIBLE_TRANSITIONS:
            raise PositionRunError(first, second)
        # Last -> First: one run ends where the next begins
        return None

    span = first.span.join(second.span)
    if first.category is second.category:
        category = first.category
    else:
        # e.g. " " + "\n"
        category = classify(span.text)
    return Token(category, span, position)


# =============================================================================
# Stages
# =============================================================================

def may_absorb_run(first: Token, second: Token) -> bool:
    """
    True if a finished run may still swallow the run starting at second.

    (Last, First) never merges, but once the run opened by second closes
    to Only, (Last, Only) does.
    """
    return (
        first.position is LAST
        and second.position is FIRST
        and can_merge(first.category, second.category)
        and first.span.is_adjacent_to(second.span)
    )


def coalesce(tokens: Iterable[Token]) -> Iterator[Token]:
    """
    Greedily merge each token with the next one while they belong together.

    Single left-to-right pass. Besides the token being grown, at most one
    finished Last token is held back until the run after it is complete,
    so a second pass over the output merges nothing.
    """
    iterator = iter(tokens)
    current = next(iterator, None)
    if current is None:
        return

    held = None
    for token in iterator:
        merged = merge_tokens(current, token)
        if merged is not None:
            current = merged
            continue

        if held is not None:
            joined = merge_tokens(held, current)
            if joined is None:
                yield held
            else:
                current = joined
            held = None

        if may_absorb_run(current, token):
            held = current
        else:
            yield current
        current = token

    if held is not None:
        joined = merge_tokens(held, current)
        if joined is None:
            yield held
        else:
            current = joined
    yield current


def repair_pair(first: Token, second: Token) -> Tuple[Token, Token]:
    """
    Re-tag a pair split by a sentence boundary.

    A sentence boundary inside a run of spaces leaves the spaces tagged as
    the end of one run and the start of the next. Re-tagging them Only
    lets the next coalescing pass fuse them back together.
    """
    first_sep = first.category.is_separator_like
    second_sep = second.category.is_separator_like

    if first.position is FIRST and second.position is LAST:
        if not first_sep and second_sep:
            return first.with_position(ONLY), second.with_position(ONLY)
        if first_sep and not second_sep:
            return first.with_position(ONLY), second.with_position(ONLY)
    elif first.position is FIRST and second.position is MIDDLE:
        if first_sep and not second_sep:
            return first.with_position(ONLY), second.with_position(FIRST)
    elif first.position is MIDDLE and second.position is LAST:
        if not first_sep and second_sep:
            return first.with_position(LAST), second.with_position(ONLY)

    return first, second


def repair(tokens: Iterable[Token]) -> Iterator[Token]:
    """
    Apply repair_pair over consecutive tokens.

    The (possibly re-tagged) second token of each pair is the first token
    of the next comparison.
    """
    iterator = iter(tokens)
    current = next(iterator, None)
    if current is None:
        return

    for token in iterator:
        previous, current = repair_pair(current, token)
        yield previous

    yield current


# =============================================================================
# Main Entry Point
# =============================================================================

def tokenize_text(text: str, source: SegmentSource = DEFAULT_SOURCE) -> Iterator[Token]:
    """
    Tokenize text into classified, coalesced tokens.

    Args:
        text: Input text
        source: Segment source to split text with

    Returns:
        Lazy iterator of Token objects whose spans partition text
    """
    tokens = annotate(text, word_positions(text, source))
    return coalesce(repair(coalesce(tokens)))
