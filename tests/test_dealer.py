"""Tests for dealing hands from one or more shuffled decks."""

from collections import Counter

import numpy as np
import pytest

from poker_showdown import set_seed
from poker_showdown.engine import best_hand, deal_card_lists, deal_hands, shuffled_shoe
from poker_showdown.rules import create_standard_deck, parse_hand_string


class TestShoe:
    def test_single_deck_is_a_permutation(self):
        shoe = shuffled_shoe(1, seed=7)
        assert sorted(shoe) == sorted(create_standard_deck())

    def test_multi_deck_card_counts(self):
        shoe = shuffled_shoe(3, seed=7)
        assert len(shoe) == 156
        assert set(Counter(shoe).values()) == {3}

    def test_same_seed_same_order(self):
        assert shuffled_shoe(2, seed=99) == shuffled_shoe(2, seed=99)

    def test_accepts_generator(self):
        rng = np.random.default_rng(5)
        first = shuffled_shoe(1, rng)
        second = shuffled_shoe(1, rng)
        assert first != second

    def test_zero_decks_rejected(self):
        with pytest.raises(ValueError):
            shuffled_shoe(0)


class TestDealing:
    def test_deal_hands_round_trip(self):
        hands = deal_hands(10, seed=3)
        card_lists = deal_card_lists(10, seed=3)
        assert [parse_hand_string(h) for h in hands] == card_lists

    def test_single_deck_hands_share_no_cards(self):
        card_lists = deal_card_lists(10, seed=11)
        dealt = [c for cards in card_lists for c in cards]
        assert len(dealt) == 50
        assert len(set(dealt)) == 50

    def test_over_dealing_rejected(self):
        with pytest.raises(ValueError):
            deal_hands(11, num_decks=1)
        assert len(deal_hands(20, num_decks=2, seed=1)) == 20

    def test_dealt_tables_have_winners(self):
        rng = np.random.default_rng(2024)
        for _ in range(20):
            hands = deal_hands(6, seed=rng)
            winners = best_hand(hands)
            assert winners
            assert all(w in hands for w in winners)


def test_set_seed_returns_seed():
    assert set_seed(42) == 42
    assert isinstance(set_seed(), int)
