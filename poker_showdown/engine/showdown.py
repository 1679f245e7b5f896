"""Showdown: pick the winning hand(s) from a batch of hand strings.

This module provides:
- ShowdownConfig: Options controlling parsing and classification
- evaluate_hands: Parse and classify every hand, in input order
- rank_hands: Classified hands ordered best first
- best_hand: The original strings of every hand tied for best

Showdown flow:
1. Parse every hand in input order; the first invalid hand aborts the call
2. A single hand wins outright once it parses
3. Classify the rest (one by one, or in one vectorised batch)
4. Find the best (category, tie-break rank, rank sum)
5. Return every hand equal to it, in the order the caller gave them
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from poker_showdown.rules import (
    Card,
    Hand,
    classify_cards,
    classify_hands_batch,
    hand_sort_key,
    parse_hand_string,
)

logger = logging.getLogger(__name__)


@dataclass
class ShowdownConfig:
    """Showdown configuration.

    Attributes:
        allow_duplicate_cards: Accept the same card twice in one hand, treating
            the decks in play as independent. If False, a repeated card raises
            DuplicateCardError.
        vectorized: Classify all hands in a single numpy pass instead of one by one
    """

    allow_duplicate_cards: bool = True
    vectorized: bool = False


DEFAULT_CONFIG = ShowdownConfig()


def _parse_all(hands: Sequence[str], config: ShowdownConfig) -> List[List[Card]]:
    return [parse_hand_string(h, allow_duplicate_cards=config.allow_duplicate_cards) for h in hands]


def _classify_all(card_lists: List[List[Card]], config: ShowdownConfig) -> List[Hand]:
    if config.vectorized:
        return classify_hands_batch(card_lists)
    return [classify_cards(cards, original_index=i) for i, cards in enumerate(card_lists)]


def evaluate_hands(hands: Sequence[str], config: Optional[ShowdownConfig] = None) -> List[Hand]:
    """Parse and classify every hand.

    Args:
        hands: Hand strings like "2♤ 3♡ 4♧ 5♢ 7♤"
        config: Showdown options (defaults to ShowdownConfig())

    Returns:
        Classified hands in input order, original_index set to the input position

    Raises:
        HandParseError: For the first hand that fails to parse
    """
    config = config or DEFAULT_CONFIG
    return _classify_all(_parse_all(hands, config), config)


def rank_hands(hands: Sequence[str], config: Optional[ShowdownConfig] = None) -> List[Hand]:
    """Classify every hand and order them best first.

    Equal hands keep their input order.
    """
    return sorted(evaluate_hands(hands, config), key=hand_sort_key)


def best_hand(hands: Sequence[str], config: Optional[ShowdownConfig] = None) -> List[str]:
    """Find the winning hand(s).

    Args:
        hands: Hand strings drawn from one or more decks
        config: Showdown options (defaults to ShowdownConfig())

    Returns:
        The original, unmodified strings of every hand tied for best, in input order

    Raises:
        HandParseError: For the first hand that fails to parse; no partial result
    """
    config = config or DEFAULT_CONFIG
    card_lists = _parse_all(hands, config)

    if len(card_lists) <= 1:
        return list(hands)

    classified = _classify_all(card_lists, config)
    best = max(h.strength for h in classified)
    winners = [h.original_index for h in classified if h.strength == best]
    logger.debug("showdown of %d hands: %d winner(s) at indices %s", len(hands), len(winners), winners)
    return [hands[i] for i in sorted(winners)]
