"""Tests for the showdown engine.

Tests cover:
- Single winner across categories
- Tie-break rank and rank-sum resolution
- Tied winners returned in input order, original strings untouched
- Single-hand and empty input
- Error propagation: first invalid hand aborts the call
- Config options: duplicate cards, vectorised classification
"""

import logging

import pytest
from poker_showdown import (
    Category,
    ShowdownConfig,
    best_hand,
    evaluate_hands,
    rank_hands,
    InvalidHandLength,
    InvalidRank,
    InvalidSuit,
    FiveOfAKindError,
    DuplicateCardError,
)


@pytest.fixture(params=[False, True], ids=["scalar", "vectorized"])
def config(request):
    return ShowdownConfig(vectorized=request.param)


class TestBestHand:
    def test_single_hand_wins(self, config):
        assert best_hand(["2♤ 3♡ 4♧ 5♢ 7♤"], config) == ["2♤ 3♡ 4♧ 5♢ 7♤"]

    def test_single_hand_still_validated(self, config):
        with pytest.raises(InvalidHandLength):
            best_hand(["2♤ 3♡ 4♧ 5♢"], config)

    def test_single_five_of_a_kind_rejected(self, config):
        with pytest.raises(FiveOfAKindError):
            best_hand(["8♤ 8♡ 8♧ 8♢ 8♤"], config)

    def test_empty_input(self, config):
        assert best_hand([], config) == []

    def test_highest_card_wins(self, config):
        hands = ["4♢ 5♤ 7♧ 8♡ J♧", "2♤ 4♡ 7♧ 9♢ Q♤", "3♤ 5♡ 6♧ 8♢ 10♤"]
        assert best_hand(hands, config) == ["2♤ 4♡ 7♧ 9♢ Q♤"]

    def test_better_category_wins_regardless_of_ranks(self, config):
        hands = ["2♡ 2♤ 2♧ 3♢ 3♤", "A♤ A♡ A♧ K♢ Q♤"]
        assert best_hand(hands, config) == ["2♡ 2♤ 2♧ 3♢ 3♤"]

    def test_ace_low_straight_loses_to_six_high(self, config):
        hands = ["A♤ 2♡ 3♧ 4♢ 5♤", "2♤ 3♡ 4♧ 5♢ 6♤"]
        assert best_hand(hands, config) == ["2♤ 3♡ 4♧ 5♢ 6♤"]

    def test_wheel_beats_three_of_a_kind(self, config):
        hands = ["A♤ A♡ A♧ K♢ Q♤", "A♤ 2♡ 3♧ 4♢ 5♤"]
        assert best_hand(hands, config) == ["A♤ 2♡ 3♧ 4♢ 5♤"]

    def test_royal_flush_beats_everything(self, config):
        hands = ["9♤ 9♡ 9♧ 9♢ A♤", "10♤ J♤ Q♤ K♤ A♤", "9♡ 10♡ J♡ Q♡ K♡"]
        assert best_hand(hands, config) == ["10♤ J♤ Q♤ K♤ A♤"]

    def test_two_pair_higher_pair_wins(self, config):
        hands = ["4♤ 4♡ 3♧ 3♢ 9♤", "2♤ 2♡ 5♧ 5♢ 3♤"]
        assert best_hand(hands, config) == ["2♤ 2♡ 5♧ 5♢ 3♤"]

    def test_higher_quad_beats_higher_kicker(self, config):
        hands = ["3♤ 3♡ 3♧ 3♢ 6♤", "4♤ 4♡ 4♧ 4♢ 5♤"]
        assert best_hand(hands, config) == ["4♤ 4♡ 4♧ 4♢ 5♤"]

    def test_full_house_trips_decide(self, config):
        hands = ["4♤ 4♡ 7♧ 7♢ 7♤", "8♤ 8♡ 2♧ 2♢ 8♧"]
        assert best_hand(hands, config) == ["8♤ 8♡ 2♧ 2♢ 8♧"]

    def test_multi_deck_quads_decided_by_rank_sum(self, config):
        hands = ["8♤ 8♡ 8♧ 8♢ 7♤", "8♤ 8♡ 8♧ 8♢ 9♤"]
        assert best_hand(hands, config) == ["8♤ 8♡ 8♧ 8♢ 9♤"]

    def test_rank_sum_decides_equal_pairs(self, config):
        hands = ["J♤ J♡ 3♧ 8♢ 2♤", "J♧ J♢ 4♤ 8♡ 2♢"]
        assert best_hand(hands, config) == ["J♧ J♢ 4♤ 8♡ 2♢"]

    def test_tied_winners_keep_input_order(self, config):
        hands = ["3♡ 4♡ 5♤ 6♤ 8♢", "2♤ 3♡ 4♧ 5♢ 7♤", "3♤ 4♤ 5♡ 6♡ 8♧"]
        assert best_hand(hands, config) == ["3♡ 4♡ 5♤ 6♤ 8♢", "3♤ 4♤ 5♡ 6♡ 8♧"]

    def test_ties_returned_in_input_order_not_rank_order(self, config):
        hands = ["2♤ 3♡ 4♧ 5♢ 7♤", "10♧ J♧ Q♧ K♧ A♧", "2♡ 3♧ 4♢ 5♤ 7♡", "10♡ J♡ Q♡ K♡ A♡"]
        assert best_hand(hands, config) == ["10♧ J♧ Q♧ K♧ A♧", "10♡ J♡ Q♡ K♡ A♡"]

    def test_same_category_same_tie_break_different_sum_not_tied(self, config):
        # Both queen-high; rank sum separates them
        hands = ["2♤ 4♡ 7♧ 9♢ Q♤", "3♤ 4♡ 7♧ 9♢ Q♡"]
        assert best_hand(hands, config) == ["3♤ 4♡ 7♧ 9♢ Q♡"]

    def test_identical_strings_both_returned(self, config):
        hands = ["4♤ 5♤ 6♤ 7♤ 8♤", "4♤ 5♤ 6♤ 7♤ 8♤"]
        assert best_hand(hands, config) == hands

    def test_output_is_original_strings(self, config):
        hands = ["010♤ J♤ Q♤ K♤ A♤", "2♤ 3♡ 4♧ 5♢ 7♤"]
        assert best_hand(hands, config) == ["010♤ J♤ Q♤ K♤ A♤"]

    def test_input_not_mutated(self, config):
        hands = ["2♤ 3♡ 4♧ 5♢ 7♤", "10♧ J♧ Q♧ K♧ A♧"]
        snapshot = list(hands)
        best_hand(hands, config)
        assert hands == snapshot

    def test_accepts_tuple(self, config):
        hands = ("2♤ 3♡ 4♧ 5♢ 7♤", "3♤ 3♡ 4♧ 5♢ 7♤")
        assert best_hand(hands, config) == ["3♤ 3♡ 4♧ 5♢ 7♤"]


class TestErrors:
    def test_invalid_length_aborts(self):
        with pytest.raises(InvalidHandLength):
            best_hand(["2♤ 3♡ 4♧ 5♢ 7♤", "2♤ 2♡ 2♧ 2♢"])

    def test_invalid_rank_aborts(self):
        with pytest.raises(InvalidRank):
            best_hand(["1♤ 2♡ 3♧ 4♢ 5♤", "2♤ 3♡ 4♧ 5♢ 7♤"])

    def test_invalid_suit_aborts(self):
        with pytest.raises(InvalidSuit):
            best_hand(["2♤ 3♡ 4♧ 5♢ 7♤", "2X 3♡ 4♧ 5♢ 6♤"])

    def test_first_invalid_hand_reported(self):
        with pytest.raises(InvalidRank) as exc_info:
            best_hand(["2♤ 3♡ 4♧ 5♢ 7♤", "1♤ 2♡ 3♧ 4♢ 5♤", "2X 3♡ 4♧ 5♢ 6♤"])
        assert exc_info.value.hand == "1♤ 2♡ 3♧ 4♢ 5♤"

    def test_five_of_a_kind_among_others(self):
        with pytest.raises(FiveOfAKindError):
            best_hand(["2♤ 3♡ 4♧ 5♢ 7♤", "8♤ 8♡ 8♧ 8♢ 8♤"])

    def test_duplicate_cards_option(self):
        hands = ["A♤ A♤ K♡ Q♧ J♢", "2♤ 3♡ 4♧ 5♢ 7♤"]
        assert best_hand(hands) == ["A♤ A♤ K♡ Q♧ J♢"]
        with pytest.raises(DuplicateCardError):
            best_hand(hands, ShowdownConfig(allow_duplicate_cards=False))


class TestRankingHelpers:
    def test_evaluate_hands_in_input_order(self, config):
        hands = ["2♤ 3♡ 4♧ 5♢ 7♤", "8♤ 8♡ 8♧ 8♢ 9♤"]
        evaluated = evaluate_hands(hands, config)
        assert [h.original_index for h in evaluated] == [0, 1]
        assert [h.category for h in evaluated] == [Category.HIGH_CARD, Category.FOUR_KIND]

    def test_rank_hands_best_first(self, config):
        hands = ["2♤ 3♡ 4♧ 5♢ 7♤", "8♤ 8♡ 8♧ 8♢ 9♤", "4♤ 4♡ 3♧ 3♢ 9♤"]
        ranked = rank_hands(hands, config)
        assert [h.original_index for h in ranked] == [1, 2, 0]

    def test_rank_hands_stable_for_ties(self, config):
        hands = ["2♤ 3♡ 4♧ 5♢ 7♤", "2♡ 3♧ 4♢ 5♤ 7♡"]
        assert [h.original_index for h in rank_hands(hands, config)] == [0, 1]


def test_debug_logging_reports_winners(caplog):
    with caplog.at_level(logging.DEBUG, logger="poker_showdown.engine.showdown"):
        best_hand(["2♤ 3♡ 4♧ 5♢ 7♤", "3♤ 3♡ 4♧ 5♢ 7♤"])
    assert "1 winner(s) at indices [1]" in caplog.text
