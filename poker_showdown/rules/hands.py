"""Hand category detection and comparison.

Categories (best to worst):
- Straight flush: five consecutive ranks, one suit
- Four of a kind: four cards of one rank
- Full house: three of one rank + two of another
- Flush: five cards of one suit
- Straight: five consecutive ranks (A-2-3-4-5 counts, with the Ace low)
- Three of a kind
- Two pair
- One pair
- High card

Comparison rules:
- Category first
- Then the tie-break rank: the quad, trip or (higher) pair rank for grouped
  hands, the straight's high card for straights, the top card otherwise
- Then the rank sum of all five cards, which separates multi-deck hands such
  as 8-8-8-8-9 and 8-8-8-8-7
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

from .parsing import FiveOfAKindError
from .ranks import Card, Rank, RANK_SYMBOLS, are_consecutive, format_cards, get_rank_counts

WHEEL_RANKS = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]


class Category(IntEnum):
    """Hand categories. Lower value = better hand."""

    STRAIGHT_FLUSH = 0
    FOUR_KIND = 1
    FULL_HOUSE = 2
    FLUSH = 3
    STRAIGHT = 4
    THREE_KIND = 5
    TWO_PAIR = 6
    ONE_PAIR = 7
    HIGH_CARD = 8


CATEGORY_NAMES = {
    Category.STRAIGHT_FLUSH: "Straight flush",
    Category.FOUR_KIND: "Four of a kind",
    Category.FULL_HOUSE: "Full house",
    Category.FLUSH: "Flush",
    Category.STRAIGHT: "Straight",
    Category.THREE_KIND: "Three of a kind",
    Category.TWO_PAIR: "Two pair",
    Category.ONE_PAIR: "One pair",
    Category.HIGH_CARD: "High card",
}


@dataclass(frozen=True)
class Hand:
    """A classified five-card hand.

    Attributes:
        category: The hand category
        tie_break_rank: Rank deciding precedence within the category
        rank_sum: Sum of the five raw ranks (Ace always 14)
        original_index: Position of the hand in the caller's input, -1 if unknown
    """

    category: Category
    tie_break_rank: Rank
    rank_sum: int
    original_index: int = -1

    @property
    def strength(self) -> Tuple[int, int, int]:
        """Comparable strength tuple, higher is better."""
        return (-int(self.category), int(self.tie_break_rank), self.rank_sum)

    def ties_with(self, other: "Hand") -> bool:
        """True if both hands have the same category, tie-break rank and rank sum."""
        return self.strength == other.strength

    def __str__(self) -> str:
        return describe_hand(self)


def is_flush(cards: List[Card]) -> bool:
    """Check whether all cards share one suit."""
    return len({c.suit for c in cards}) == 1


def straight_high_rank(cards: List[Card]) -> Optional[Rank]:
    """Return the high rank of a straight, or None if the cards are not one.

    The wheel (A-2-3-4-5) is a straight with high rank FIVE.
    """
    ranks = sorted(c.rank for c in cards)
    if ranks == WHEEL_RANKS:
        return Rank.FIVE
    if are_consecutive(ranks):
        return ranks[-1]
    return None


def _group_rank(rank_counts: Dict[Rank, int], size: int) -> Rank:
    # Highest rank among the groups of the given size
    return max(rank for rank, count in rank_counts.items() if count == size)


def classify_cards(cards: List[Card], original_index: int = -1) -> Hand:
    """Classify five cards into a category with its tie-break key.

    Args:
        cards: Exactly five Card objects
        original_index: Position of the hand in the caller's input

    Returns:
        Hand with category, tie-break rank and rank sum

    Raises:
        FiveOfAKindError: If all five cards share one rank
    """
    rank_sum = sum(int(c.rank) for c in cards)
    rank_counts = get_rank_counts(cards)
    sizes = sorted(rank_counts.values(), reverse=True)
    distinct = len(rank_counts)

    if distinct == 1:
        raise FiveOfAKindError(hand=format_cards(cards))

    if distinct == 2:
        if sizes[0] == 4:
            category = Category.FOUR_KIND
            tie_break = _group_rank(rank_counts, 4)
        else:
            category = Category.FULL_HOUSE
            tie_break = _group_rank(rank_counts, 3)
    elif distinct == 3:
        if sizes[0] == 3:
            category = Category.THREE_KIND
            tie_break = _group_rank(rank_counts, 3)
        else:
            category = Category.TWO_PAIR
            tie_break = _group_rank(rank_counts, 2)
    elif distinct == 4:
        category = Category.ONE_PAIR
        tie_break = _group_rank(rank_counts, 2)
    else:
        flush = is_flush(cards)
        high = straight_high_rank(cards)
        if high is not None:
            category = Category.STRAIGHT_FLUSH if flush else Category.STRAIGHT
            tie_break = high
        else:
            category = Category.FLUSH if flush else Category.HIGH_CARD
            tie_break = max(c.rank for c in cards)

    return Hand(
        category=category,
        tie_break_rank=tie_break,
        rank_sum=rank_sum,
        original_index=original_index,
    )


def hand_sort_key(hand: Hand) -> Tuple[int, int, int]:
    """Sort key putting the best hand first when sorting ascending."""
    return (int(hand.category), -int(hand.tie_break_rank), -hand.rank_sum)


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 is better
        Negative if hand2 is better
        Zero if they tie
    """
    s1, s2 = hand1.strength, hand2.strength
    if s1 == s2:
        return 0
    return 1 if s1 > s2 else -1


def describe_hand(hand: Hand) -> str:
    """Human-readable description, e.g. 'Straight, 5 high'."""
    name = CATEGORY_NAMES[hand.category]
    rank = RANK_SYMBOLS[hand.tie_break_rank]
    if hand.category in (Category.STRAIGHT_FLUSH, Category.STRAIGHT, Category.FLUSH, Category.HIGH_CARD):
        return f"{name}, {rank} high"
    if hand.category == Category.TWO_PAIR:
        return f"{name}, {rank}s up"
    return f"{name}, {rank}s"


def describe_categories() -> Dict[Category, str]:
    """Get a description of requirements for each category.

    Returns:
        Dict mapping Category to description string, best first
    """
    return {
        Category.STRAIGHT_FLUSH: "Five consecutive ranks of one suit",
        Category.FOUR_KIND: "Four cards of the same rank",
        Category.FULL_HOUSE: "Three cards of one rank + two of another",
        Category.FLUSH: "Five cards of one suit",
        Category.STRAIGHT: "Five consecutive ranks (A-2-3-4-5 allowed, Ace low)",
        Category.THREE_KIND: "Three cards of the same rank",
        Category.TWO_PAIR: "Two pairs of different ranks",
        Category.ONE_PAIR: "Two cards of the same rank",
        Category.HIGH_CARD: "None of the above",
    }
