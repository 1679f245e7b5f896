"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Hand string parsing and validation (parsing.py)
- Hand category detection and comparison (hands.py)
- Vectorised batch classification (batch.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    HAND_SIZE,
    are_consecutive,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
    format_cards,
)

from .parsing import (
    HandParseError,
    InvalidHandLength,
    InvalidSuit,
    InvalidRank,
    FiveOfAKindError,
    DuplicateCardError,
    parse_rank,
    parse_card,
    parse_hand_string,
    validate_cards,
)

from .hands import (
    Category,
    Hand,
    CATEGORY_NAMES,
    classify_cards,
    is_flush,
    straight_high_rank,
    hand_sort_key,
    compare_hands,
    describe_hand,
    describe_categories,
)

from .batch import (
    encode_hands,
    classify_batch,
    classify_hands_batch,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "HAND_SIZE",
    "are_consecutive",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    "format_cards",
    # Parsing
    "HandParseError",
    "InvalidHandLength",
    "InvalidSuit",
    "InvalidRank",
    "FiveOfAKindError",
    "DuplicateCardError",
    "parse_rank",
    "parse_card",
    "parse_hand_string",
    "validate_cards",
    # Hands
    "Category",
    "Hand",
    "CATEGORY_NAMES",
    "classify_cards",
    "is_flush",
    "straight_high_rank",
    "hand_sort_key",
    "compare_hands",
    "describe_hand",
    "describe_categories",
    # Batch
    "encode_hands",
    "classify_batch",
    "classify_hands_batch",
]
