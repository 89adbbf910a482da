"""Poker rules implementations.

This module provides:
- Card and rank definitions, ace promotion (ranks.py)
- Hand classification and comparison (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    ACE_HIGH,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    rank_values,
    sort_values,
    promote_aces,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
    make_cards_from_ranks,
    make_cards_from_string,
)

from .hands import (
    HAND_SIZE,
    HandCategory,
    Comparison,
    CATEGORY_NAMES,
    ClassifiedHand,
    HandValidationError,
    detect_straight,
    is_flush,
    classify_hand,
    tiebreak_values,
    break_tie,
    compare_hands,
    can_beat,
    evaluate_hand,
    hand_key,
    validate_hand,
    is_valid_hand,
    describe_hand_categories,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "ACE_HIGH",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "rank_values",
    "sort_values",
    "promote_aces",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    "make_cards_from_ranks",
    "make_cards_from_string",
    # Hands
    "HAND_SIZE",
    "HandCategory",
    "Comparison",
    "CATEGORY_NAMES",
    "ClassifiedHand",
    "HandValidationError",
    "detect_straight",
    "is_flush",
    "classify_hand",
    "tiebreak_values",
    "break_tie",
    "compare_hands",
    "can_beat",
    "evaluate_hand",
    "hand_key",
    "validate_hand",
    "is_valid_hand",
    "describe_hand_categories",
]
