"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2
The Ace also plays low in the wheel straight (A-2-3-4-5).

This module provides:
- Rank constants and ordering
- Card representation
- Suit definitions
- Deck and grouping utilities
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List


class Rank(IntEnum):
    """Card ranks valued by their pip count (higher value = stronger rank).

    Face cards continue the numbering: J=11, Q=12, K=13, A=14.
    """

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
    ACE = 14


class Suit(IntEnum):
    """Card suits. Suits carry no ordering in play, only flush equality."""

    DIAMOND = 0
    CLUB = 1
    HEART = 2
    SPADE = 3


# Rank symbols for display
RANK_SYMBOLS = {
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
    Rank.ACE: "A",
}

# Suit symbols, the only ones accepted when parsing
SUIT_SYMBOLS = {
    Suit.DIAMOND: "♢",
    Suit.CLUB: "♧",
    Suit.HEART: "♡",
    Suit.SPADE: "♤",
}

# Face symbols to rank mapping (numeric ranks are parsed as integers)
FACE_SYMBOLS = {
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

MIN_NUMERIC_RANK = Rank.TWO
MAX_NUMERIC_RANK = Rank.TEN

# Number of cards in every hand
HAND_SIZE = 5


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like '3♡' or '10♤'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            InvalidSuit: If the token does not end with a suit symbol
            InvalidRank: If the rank prefix is not 2-10, J, Q, K or A
        """
        from .parsing import parse_card

        return parse_card(s)


def are_consecutive(ranks: List[int]) -> bool:
    """Check if a sorted list of unique ranks are consecutive.

    Args:
        ranks: List of ranks (should be sorted and unique)

    Returns:
        True if all ranks are consecutive
    """
    if len(ranks) < 2:
        return True

    for i in range(1, len(ranks)):
        if int(ranks[i]) - int(ranks[i - 1]) != 1:
            return False
    return True


def get_rank_counts(cards: List[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: List of Card objects

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
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: List[Card]) -> List[Card]:
    """Sort cards by rank (ascending), then by suit."""
    return sorted(cards)


def format_cards(cards: List[Card]) -> str:
    """Render cards in the canonical space-separated hand format."""
    return " ".join(str(c) for c in cards)
