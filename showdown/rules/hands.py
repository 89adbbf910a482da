"""Five-card hand classification and comparison.

Hand categories (weakest to strongest):
- High card, one pair, two pair, three of a kind
- Straight, flush, full house, four of a kind
- Straight flush, royal flush

Comparison rules:
- A stronger category always wins
- Within a category, the category's tie-break values decide, compared
  from most to least significant
- Aces count high (14) everywhere except in the wheel A-2-3-4-5, where
  the five is the top card
- Suits never break ties
"""

import logging
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Callable, Dict, List, Sequence, Tuple

from .ranks import (
    ACE_HIGH,
    Card,
    Rank,
    Suit,
    get_rank_counts,
    promote_aces,
    rank_values,
    sort_cards,
    sort_values,
)

logger = logging.getLogger(__name__)

# Number of cards in an evaluated hand
HAND_SIZE = 5

# Raw rank values of ten, jack, queen, king, ace
ROYAL_VALUES = frozenset([Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE])

# Raw rank values of the wheel A-2-3-4-5
WHEEL_VALUES = [Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE]


class HandCategory(IntEnum):
    """Hand categories ordered by strength (higher value = stronger hand)."""

    HIGH_CARD = auto()
    ONE_PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()
    ROYAL_FLUSH = auto()  # 10-J-Q-K-A of one suit


class Comparison(IntEnum):
    """Outcome of comparing a first hand against a second one."""

    LESSER = -1
    EQUAL = 0
    GREATER = 1

    def inverted(self) -> "Comparison":
        """The verdict seen from the other hand's side."""
        return Comparison(-self.value)

    @classmethod
    def from_order(cls, a, b) -> "Comparison":
        """Compare two orderable values (ints or tuples of ints)."""
        return cls((a > b) - (a < b))


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High card",
    HandCategory.ONE_PAIR: "One pair",
    HandCategory.TWO_PAIR: "Two pair",
    HandCategory.THREE_OF_A_KIND: "Three of a kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full house",
    HandCategory.FOUR_OF_A_KIND: "Four of a kind",
    HandCategory.STRAIGHT_FLUSH: "Straight flush",
    HandCategory.ROYAL_FLUSH: "Royal flush",
}


class HandValidationError(ValueError):
    """Raised when cards do not form a well-formed five-card hand."""

    pass


@dataclass(frozen=True)
class ClassifiedHand:
    """A five-card hand together with its category and tie-break values.

    Attributes:
        category: The hand category
        cards: The cards, sorted ascending (ace low)
        tiebreak: Values compared within the category, most significant first
    """

    category: HandCategory
    cards: Tuple[Card, ...]
    tiebreak: Tuple[int, ...]

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{CATEGORY_NAMES[self.category]}({cards_str})"

    @property
    def key(self) -> Tuple[int, ...]:
        """Sort key consistent with compare_hands."""
        return (int(self.category),) + self.tiebreak


# ----------------------------------------------------------------------------
# Classification
# ----------------------------------------------------------------------------


def detect_straight(values: Sequence[int]) -> bool:
    """Check whether five distinct rank values form a straight.

    The raw values are tried first, which recognizes the wheel A-2-3-4-5.
    If that fails and an ace sits at the bottom, the values are tried once
    more with the ace promoted, which recognizes 10-J-Q-K-A.

    Args:
        values: Five distinct raw rank values (1-13), any order

    Returns:
        True if the values are five consecutive ranks
    """
    candidate = sort_values(values)
    for _ in range(2):
        if candidate[-1] - candidate[0] == HAND_SIZE - 1:
            return True
        if candidate[0] != Rank.ACE:
            break
        candidate = promote_aces(candidate)
    return False


def is_flush(cards: Sequence[Card]) -> bool:
    """Check whether all cards share one suit."""
    return len({card.suit for card in cards}) == 1


def classify_hand(cards: Sequence[Card]) -> HandCategory:
    """Classify a five-card hand into its category.

    Args:
        cards: Exactly five distinct cards (not checked)

    Returns:
        The HandCategory of the hand
    """
    counts = sorted(get_rank_counts(cards).values())
    largest = counts[-1]
    second = counts[-2] if len(counts) > 1 else 0

    if largest == 4:
        return HandCategory.FOUR_OF_A_KIND
    if largest == 3:
        return HandCategory.FULL_HOUSE if second == 2 else HandCategory.THREE_OF_A_KIND
    if largest == 2:
        return HandCategory.TWO_PAIR if second == 2 else HandCategory.ONE_PAIR

    # All ranks distinct from here on
    flush = is_flush(cards)
    values = sort_values(rank_values(cards))

    # Checked before the generic straight test, which would also match
    if flush and set(values) == ROYAL_VALUES:
        return HandCategory.ROYAL_FLUSH

    if detect_straight(values):
        return HandCategory.STRAIGHT_FLUSH if flush else HandCategory.STRAIGHT
    if flush:
        return HandCategory.FLUSH
    return HandCategory.HIGH_CARD


# ----------------------------------------------------------------------------
# Tie-break keys
#
# Each key function takes the hand's raw rank values sorted ascending and
# returns the values compared within the category, most significant first.
# ----------------------------------------------------------------------------


def _royal_flush_key(values: List[int]) -> Tuple[int, ...]:
    # Only one composition exists, so royal flushes always tie
    return ()


def _straight_key(values: List[int]) -> Tuple[int, ...]:
    if values == WHEEL_VALUES:
        return (Rank.FIVE.value,)
    return (promote_aces(values)[-1],)


def _high_card_key(values: List[int]) -> Tuple[int, ...]:
    return tuple(reversed(promote_aces(values)))


def _four_of_a_kind_key(values: List[int]) -> Tuple[int, ...]:
    promoted = promote_aces(values)
    quad = promoted[2]
    kicker = promoted[0] if promoted[0] != quad else promoted[4]
    return (quad, kicker)


def _full_house_key(values: List[int]) -> Tuple[int, ...]:
    promoted = promote_aces(values)
    triple = promoted[2]
    pair = promoted[1] if promoted[1] != triple else promoted[3]
    return (triple, pair)


def _three_of_a_kind_key(values: List[int]) -> Tuple[int, ...]:
    promoted = promote_aces(values)
    triple = promoted[2]
    kickers = [v for v in reversed(promoted) if v != triple]
    return (triple,) + tuple(kickers)


def _value_counts(values: List[int]) -> Dict[int, int]:
    counts: Dict[int, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    return counts


def _two_pair_key(values: List[int]) -> Tuple[int, ...]:
    counts = _value_counts(promote_aces(values))
    pairs = sorted((v for v, c in counts.items() if c == 2), reverse=True)
    kicker = next(v for v, c in counts.items() if c == 1)
    return (pairs[0], pairs[1], kicker)


def _one_pair_key(values: List[int]) -> Tuple[int, ...]:
    counts = _value_counts(promote_aces(values))
    pair = next(v for v, c in counts.items() if c == 2)
    kickers = sorted((v for v, c in counts.items() if c == 1), reverse=True)
    return (pair,) + tuple(kickers)


_TIEBREAK_KEYS: Dict[HandCategory, Callable[[List[int]], Tuple[int, ...]]] = {
    HandCategory.ROYAL_FLUSH: _royal_flush_key,
    HandCategory.STRAIGHT_FLUSH: _straight_key,
    HandCategory.FOUR_OF_A_KIND: _four_of_a_kind_key,
    HandCategory.FULL_HOUSE: _full_house_key,
    HandCategory.FLUSH: _high_card_key,
    HandCategory.STRAIGHT: _straight_key,
    HandCategory.THREE_OF_A_KIND: _three_of_a_kind_key,
    HandCategory.TWO_PAIR: _two_pair_key,
    HandCategory.ONE_PAIR: _one_pair_key,
    HandCategory.HIGH_CARD: _high_card_key,
}

_missing_categories = set(HandCategory) - set(_TIEBREAK_KEYS)
if _missing_categories:
    raise RuntimeError(f"No tie-break rule for categories: {sorted(_missing_categories)}")


def tiebreak_values(cards: Sequence[Card], category: HandCategory) -> Tuple[int, ...]:
    """Get the values that rank a hand within its category.

    Args:
        cards: Five cards already known to belong to category
        category: The hand's category

    Returns:
        Tuple of ints, most significant first (aces counted as 14 except
        in the wheel)
    """
    return _TIEBREAK_KEYS[category](sort_values(rank_values(cards)))


# ----------------------------------------------------------------------------
# Comparison
# ----------------------------------------------------------------------------


def break_tie(cards1: Sequence[Card], cards2: Sequence[Card], category: HandCategory) -> Comparison:
    """Order two hands that share a category.

    Args:
        cards1: First hand
        cards2: Second hand
        category: The category both hands belong to

    Returns:
        GREATER if cards1 ranks higher, LESSER if lower, EQUAL on a tie
    """
    return Comparison.from_order(
        tiebreak_values(cards1, category),
        tiebreak_values(cards2, category),
    )


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> Comparison:
    """Compare two five-card hands.

    Args:
        cards1: First hand
        cards2: Second hand

    Returns:
        GREATER if cards1 wins the showdown, LESSER if cards2 wins,
        EQUAL if the pot is split

    Note:
        The hands are assumed well-formed; use validate_hand upstream
        when the input is untrusted.
    """
    category1 = classify_hand(cards1)
    category2 = classify_hand(cards2)

    if category1 != category2:
        return Comparison.from_order(category1, category2)

    return break_tie(cards1, cards2, category1)


def can_beat(cards1: Sequence[Card], cards2: Sequence[Card]) -> bool:
    """Check if cards1 strictly beats cards2."""
    return compare_hands(cards1, cards2) == Comparison.GREATER


def evaluate_hand(cards: Sequence[Card]) -> ClassifiedHand:
    """Classify a hand and compute its tie-break values in one pass."""
    category = classify_hand(cards)
    return ClassifiedHand(
        category=category,
        cards=tuple(sort_cards(cards)),
        tiebreak=tiebreak_values(cards, category),
    )


def hand_key(cards: Sequence[Card]) -> Tuple[int, ...]:
    """Sort key for hands: sorted(hands, key=hand_key) goes weakest to strongest."""
    return evaluate_hand(cards).key


# ----------------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------------


def validate_hand(cards: Sequence[Card]) -> None:
    """Check that cards form a well-formed five-card hand.

    Args:
        cards: Candidate hand

    Raises:
        HandValidationError: On a wrong card count, a non-card entry,
            an unknown rank or suit, or a repeated card
    """
    cards = list(cards)
    if len(cards) != HAND_SIZE:
        raise HandValidationError(f"Expected {HAND_SIZE} cards, got {len(cards)}")

    for card in cards:
        if not isinstance(card, Card):
            raise HandValidationError(f"Not a card: {card!r}")
        try:
            Rank(card.rank)
        except ValueError as e:
            raise HandValidationError(f"Invalid rank: {card.rank!r}") from e
        try:
            Suit(card.suit)
        except ValueError as e:
            raise HandValidationError(f"Invalid suit: {card.suit!r}") from e

    if len(set(cards)) != len(cards):
        seen = set()
        duplicates = []
        for card in cards:
            if card in seen:
                duplicates.append(card)
            seen.add(card)
        raise HandValidationError(f"Duplicate cards: {duplicates}")


def is_valid_hand(cards: Sequence[Card]) -> bool:
    """Check if cards form a well-formed five-card hand.

    Returns:
        True if validate_hand accepts the cards
    """
    try:
        validate_hand(cards)
    except HandValidationError as e:
        logger.debug("Rejected hand: %s", e)
        return False
    return True


def describe_hand_categories() -> Dict[HandCategory, str]:
    """Get a short description of each hand category.

    Returns:
        Dict mapping HandCategory to description string
    """
    return {
        HandCategory.HIGH_CARD: "No pair, no straight, no flush; highest cards decide",
        HandCategory.ONE_PAIR: "Two cards of one rank",
        HandCategory.TWO_PAIR: "Two cards of one rank + two cards of another rank",
        HandCategory.THREE_OF_A_KIND: "Three cards of one rank",
        HandCategory.STRAIGHT: f"Five consecutive ranks (A-2-3-4-5 up to 10-J-Q-K-A, ace = 1 or {ACE_HIGH})",
        HandCategory.FLUSH: "Five cards of one suit",
        HandCategory.FULL_HOUSE: "Three of a kind + a pair",
        HandCategory.FOUR_OF_A_KIND: "Four cards of one rank",
        HandCategory.STRAIGHT_FLUSH: "Straight with all cards of one suit",
        HandCategory.ROYAL_FLUSH: "10-J-Q-K-A of one suit",
    }
