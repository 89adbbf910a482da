"""Tests for hand comparison.

Test coverage:
- Category order decides between different categories
- Tie-break rules for each of the ten categories
- Ace handling: high everywhere, low only in the wheel
- Ordering properties (reflexive, antisymmetric, transitive, permutation
  invariant) on randomly dealt hands
"""

import itertools
import random

import pytest
from showdown.rules import (
    Comparison,
    HandCategory,
    break_tie,
    can_beat,
    classify_hand,
    compare_hands,
    create_standard_deck,
    evaluate_hand,
    hand_key,
    make_cards_from_string,
    tiebreak_values,
)
from showdown.utils.seeding import set_seed


def cmp(a: str, b: str) -> Comparison:
    return compare_hands(make_cards_from_string(a), make_cards_from_string(b))


# One representative per category, weakest first
CATEGORY_LADDER = [
    "AC KD 9H 4S 2C",
    "2C 2D 3H 4S 6C",
    "2C 2D 3H 3S 4C",
    "2C 2D 2H 3S 4C",
    "AC 2D 3H 4S 5C",
    "2H 3H 4H 5H 7H",
    "2C 2D 2H 3S 3C",
    "2C 2D 2H 2S 3C",
    "AD 2D 3D 4D 5D",
    "10S JS QS KS AS",
]


class TestComparisonEnum:
    def test_values(self):
        assert Comparison.LESSER == -1
        assert Comparison.EQUAL == 0
        assert Comparison.GREATER == 1

    def test_inverted(self):
        assert Comparison.GREATER.inverted() == Comparison.LESSER
        assert Comparison.LESSER.inverted() == Comparison.GREATER
        assert Comparison.EQUAL.inverted() == Comparison.EQUAL

    def test_from_order(self):
        assert Comparison.from_order(3, 2) == Comparison.GREATER
        assert Comparison.from_order((5, 2), (5, 3)) == Comparison.LESSER
        assert Comparison.from_order((), ()) == Comparison.EQUAL


class TestCategoryOrder:
    """A stronger category always wins, whatever the card values."""

    def test_ladder_is_classified_in_order(self):
        categories = [classify_hand(make_cards_from_string(h)) for h in CATEGORY_LADDER]
        assert categories == list(HandCategory)

    def test_stronger_category_wins(self):
        for (i, weaker), (j, stronger) in itertools.combinations(enumerate(CATEGORY_LADDER), 2):
            assert cmp(stronger, weaker) == Comparison.GREATER, (stronger, weaker)
            assert cmp(weaker, stronger) == Comparison.LESSER, (weaker, stronger)

    def test_lowest_pair_beats_best_high_card(self):
        assert cmp("2C 2D 3H 4S 5C", "AC KD QH JS 9C") == Comparison.GREATER

    def test_can_beat(self):
        pair = make_cards_from_string("2C 2D 3H 4S 6C")
        high = make_cards_from_string("AC KD 9H 4S 2C")
        assert can_beat(pair, high)
        assert not can_beat(high, pair)
        assert not can_beat(pair, pair)


class TestRoyalFlush:
    def test_royal_flushes_tie(self):
        assert cmp("10S JS QS KS AS", "AH KH QH JH 10H") == Comparison.EQUAL

    def test_royal_beats_king_high_straight_flush(self):
        assert cmp("10S JS QS KS AS", "9H 10H JH QH KH") == Comparison.GREATER

    def test_tiebreak_is_empty(self):
        cards = make_cards_from_string("10S JS QS KS AS")
        assert tiebreak_values(cards, HandCategory.ROYAL_FLUSH) == ()


class TestStraights:
    def test_wheel_loses_to_six_high(self):
        assert cmp("AC 2D 3H 4S 5C", "2C 3D 4H 5S 6C") == Comparison.LESSER

    def test_wheel_high_card_is_five(self):
        cards = make_cards_from_string("AC 2D 3H 4S 5C")
        assert tiebreak_values(cards, HandCategory.STRAIGHT) == (5,)

    def test_ace_high_beats_king_high(self):
        assert cmp("10C JD QH KS AC", "9C 10D JH QS KC") == Comparison.GREATER

    def test_same_straight_ties(self):
        assert cmp("5C 6D 7H 8S 9C", "5D 6H 7S 8C 9D") == Comparison.EQUAL

    def test_straight_flush_by_top_card(self):
        assert cmp("5H 6H 7H 8H 9H", "4S 5S 6S 7S 8S") == Comparison.GREATER

    def test_steel_wheel_is_lowest_straight_flush(self):
        assert cmp("AD 2D 3D 4D 5D", "2C 3C 4C 5C 6C") == Comparison.LESSER


class TestFlushAndHighCard:
    def test_flush_ace_counts_high(self):
        assert cmp("AH 3H 5H 7H 9H", "KS QS JS 9S 7S") == Comparison.GREATER

    def test_flush_last_card_decides(self):
        assert cmp("KH QH 9H 7H 3H", "KS QS 9S 7S 2S") == Comparison.GREATER

    def test_flushes_tie_across_suits(self):
        assert cmp("KH QH 9H 7H 3H", "KS QS 9S 7S 3S") == Comparison.EQUAL

    def test_high_card_cascade(self):
        assert cmp("AC KD 9H 5S 3C", "AD KH 9S 4C 3D") == Comparison.GREATER

    def test_high_card_tie(self):
        assert cmp("AC KD 9H 5S 3C", "AD KH 9S 5C 3D") == Comparison.EQUAL

    def test_high_card_ace_beats_king(self):
        assert cmp("AC 2D 4H 6S 8C", "KD QH JS 9C 7D") == Comparison.GREATER


class TestFourOfAKind:
    def test_higher_quad_wins(self):
        assert cmp("5C 5D 5H 5S 2C", "4C 4D 4H 4S AC") == Comparison.GREATER

    def test_ace_quads_are_highest(self):
        assert cmp("AC AD AH AS 2C", "KC KD KH KS QC") == Comparison.GREATER

    def test_kicker_decides(self):
        assert cmp("QC QD QH QS KC", "QC QD QH QS 2C") == Comparison.GREATER
        assert cmp("4C 4D 4H 4S 2C", "4C 4D 4H 4S KC") == Comparison.LESSER

    def test_kicker_below_quad(self):
        cards = make_cards_from_string("9C 9D 9H 9S 3C")
        assert tiebreak_values(cards, HandCategory.FOUR_OF_A_KIND) == (9, 3)

    def test_ace_kicker(self):
        cards = make_cards_from_string("9C 9D 9H 9S AC")
        assert tiebreak_values(cards, HandCategory.FOUR_OF_A_KIND) == (9, 14)


class TestFullHouse:
    def test_full_of_decides(self):
        assert cmp("7C 7D 7H 9S 9C", "7C 7D 7H 2S 2C") == Comparison.GREATER

    def test_triple_before_pair(self):
        assert cmp("8C 8D 8H 2S 2C", "7C 7D 7H AS AC") == Comparison.GREATER

    def test_pair_below_triple(self):
        cards = make_cards_from_string("KC KD KH 3S 3C")
        assert tiebreak_values(cards, HandCategory.FULL_HOUSE) == (13, 3)

    def test_aces_full(self):
        cards = make_cards_from_string("AC AD AH 3S 3C")
        assert tiebreak_values(cards, HandCategory.FULL_HOUSE) == (14, 3)
        cards = make_cards_from_string("3C 3D 3H AS AC")
        assert tiebreak_values(cards, HandCategory.FULL_HOUSE) == (3, 14)


class TestThreeOfAKind:
    def test_higher_triple_wins(self):
        assert cmp("9C 9D 9H 2S 3C", "8C 8D 8H AS KC") == Comparison.GREATER

    def test_first_kicker(self):
        assert cmp("9C 9D 9H AS 2C", "9C 9D 9H KS QC") == Comparison.GREATER

    def test_second_kicker(self):
        assert cmp("9C 9D 9H AS 4C", "9C 9D 9H AS 3C") == Comparison.GREATER

    def test_kickers_on_both_sides_of_triple(self):
        cards = make_cards_from_string("2C 6D 6H 6S KC")
        assert tiebreak_values(cards, HandCategory.THREE_OF_A_KIND) == (6, 13, 2)

    def test_tie(self):
        assert cmp("9C 9D 9H AS 4C", "9C 9D 9H AD 4H") == Comparison.EQUAL


class TestTwoPair:
    def test_top_pair_beats_kicker(self):
        assert cmp("AC AD 2H 2S 5C", "KC KD QH QS 9C") == Comparison.GREATER

    def test_second_pair(self):
        assert cmp("KC KD 5H 5S 2C", "KC KD 4H 4S AC") == Comparison.GREATER

    def test_kicker(self):
        assert cmp("KC KD 5H 5S 9C", "KH KS 5C 5D 8C") == Comparison.GREATER

    def test_values(self):
        cards = make_cards_from_string("3C AD 3H 7S AC")
        assert tiebreak_values(cards, HandCategory.TWO_PAIR) == (14, 3, 7)

    def test_tie(self):
        assert cmp("KC KD 5H 5S 9C", "KH KS 5C 5D 9D") == Comparison.EQUAL


class TestOnePair:
    def test_higher_pair_wins(self):
        assert cmp("AC AD 2H 3S 4C", "KC KD QH JS 9C") == Comparison.GREATER

    def test_kicker_cascade(self):
        assert cmp("9C 9D AH 4S 2C", "9H 9S AD 3C 2D") == Comparison.GREATER

    def test_last_kicker(self):
        assert cmp("9C 9D AH 4S 3C", "9H 9S AD 4C 2D") == Comparison.GREATER

    def test_values(self):
        cards = make_cards_from_string("9C 9D AH 4S 2C")
        assert tiebreak_values(cards, HandCategory.ONE_PAIR) == (9, 14, 4, 2)

    def test_tie(self):
        assert cmp("9C 9D AH 4S 2C", "9H 9S AD 4C 2D") == Comparison.EQUAL


class TestBreakTie:
    def test_direct_call(self):
        a = make_cards_from_string("9C 9D AH 4S 2C")
        b = make_cards_from_string("9H 9S AD 3C 2D")
        assert break_tie(a, b, HandCategory.ONE_PAIR) == Comparison.GREATER
        assert break_tie(b, a, HandCategory.ONE_PAIR) == Comparison.LESSER

    @pytest.mark.parametrize("category", list(HandCategory))
    def test_every_category_has_a_rule(self, category):
        cards = make_cards_from_string(CATEGORY_LADDER[category - 1])
        assert break_tie(cards, cards, category) == Comparison.EQUAL


class TestHandKey:
    def test_sorting_hands(self):
        hands = [make_cards_from_string(h) for h in reversed(CATEGORY_LADDER)]
        ordered = sorted(hands, key=hand_key)
        assert [classify_hand(h) for h in ordered] == list(HandCategory)

    def test_evaluate_hand(self):
        evaluated = evaluate_hand(make_cards_from_string("KS AS QS 10S JS"))
        assert evaluated.category == HandCategory.ROYAL_FLUSH
        assert evaluated.key == (int(HandCategory.ROYAL_FLUSH),)
        assert str(evaluated) == "Royal flush(A♠ 10♠ J♠ Q♠ K♠)"


class TestOrderingProperties:
    """Properties checked on randomly dealt hands."""

    @pytest.fixture
    def dealt_hands(self):
        set_seed(1234)
        deck = create_standard_deck()
        return [random.sample(deck, 5) for _ in range(150)]

    def test_reflexive(self, dealt_hands):
        for hand in dealt_hands:
            assert compare_hands(hand, hand) == Comparison.EQUAL

    def test_antisymmetric(self, dealt_hands):
        for a, b in itertools.combinations(dealt_hands[:60], 2):
            assert compare_hands(a, b) == compare_hands(b, a).inverted()

    def test_permutation_invariant(self, dealt_hands):
        rng = random.Random(99)
        for a, b in zip(dealt_hands, dealt_hands[1:]):
            shuffled = list(a)
            rng.shuffle(shuffled)
            assert classify_hand(shuffled) == classify_hand(a)
            assert compare_hands(shuffled, b) == compare_hands(a, b)

    def test_consistent_with_hand_key(self, dealt_hands):
        for a, b in itertools.combinations(dealt_hands[:60], 2):
            assert compare_hands(a, b) == Comparison.from_order(hand_key(a), hand_key(b))

    def test_transitive(self, dealt_hands):
        hands = dealt_hands[:25]
        for a, b, c in itertools.permutations(hands[:12], 3):
            if compare_hands(a, b) >= 0 and compare_hands(b, c) >= 0:
                assert compare_hands(a, c) >= 0
