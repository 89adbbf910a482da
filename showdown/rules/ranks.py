"""Card rank definitions and utilities.

Rank values follow the low-ace convention: A=1, 2-10 face value, J=11,
Q=12, K=13. For high-card comparisons the ace is promoted to 14.

This module provides:
- Rank and suit constants
- Card representation and parsing
- Rank-value sorting and ace promotion
- Deck construction
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional


class Rank(IntEnum):
    """Card ranks in their low-ace form.

    Order: K > Q > J > 10 > ... > 2 > A (ace high is handled by promote_aces)
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Suit(IntEnum):
    """Card suits. Suits carry no ranking; they only matter for flushes."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3


# Value of an ace once promoted above the king
ACE_HIGH = 14

# Rank symbols for display
RANK_SYMBOLS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

# Symbol to rank mapping (for parsing); "T" is accepted as an alias for ten
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["T"] = Rank.TEN

SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"H": Suit.HEART, "D": Suit.DIAMOND, "C": Suit.CLUB, "S": Suit.SPADE})
SYMBOL_TO_SUIT.update({"h": Suit.HEART, "d": Suit.DIAMOND, "c": Suit.CLUB, "s": Suit.SPADE})


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first, then by suit. Immutable and hashable,
    so a hand can be checked for duplicates with a set.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like 'AS', '10h', 'T♣' or 'Q♦'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        if len(s) < 2:
            raise ValueError(f"Card string too short: {s!r}")

        suit_char = s[-1]
        rank_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise ValueError(f"Invalid suit character: {suit_char}")
        if rank_str not in SYMBOL_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_str}")

        return cls(rank=SYMBOL_TO_RANK[rank_str], suit=SYMBOL_TO_SUIT[suit_char])


def rank_values(cards: Iterable[Card]) -> List[int]:
    """Copy the raw (low-ace) rank values of the cards into a new list."""
    return [int(card.rank) for card in cards]


def sort_values(values: Iterable[int]) -> List[int]:
    """Return the rank values in ascending order.

    The input is never modified; callers always work on the returned copy.
    """
    return sorted(values)


def promote_aces(values: Iterable[int]) -> List[int]:
    """Rewrite low aces (1) as high aces (14) and re-sort ascending.

    Idempotent: promoting an already promoted list returns the same values.

    Example:
        >>> promote_aces([1, 10, 11, 12, 13])
        [10, 11, 12, 13, 14]
    """
    return sort_values(ACE_HIGH if v == Rank.ACE else v for v in values)


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: Iterable of Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    return [Card(rank=rank, suit=suit) for rank in Rank for suit in Suit]


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank (ascending, ace low), then by suit."""
    return sorted(cards)


def make_cards_from_ranks(ranks: List[Rank], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits so five cards never form
    a flush by accident.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=Rank(r), suit=Suit(s)) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "AS KS QS JS 10S".

    Args:
        s: Space-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]
