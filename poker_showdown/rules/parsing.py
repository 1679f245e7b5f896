"""Hand string parsing and validation.

A hand is written as five space-separated tokens, each a rank followed
directly by a suit symbol, e.g. "10♤ J♤ Q♤ K♤ A♤".

Parsing rules:
- Exactly 5 tokens, otherwise InvalidHandLength
- Every token ends with one of ♢ ♧ ♡ ♤, otherwise InvalidSuit
- The remaining prefix is J, Q, K, A or a decimal integer 2-10, otherwise InvalidRank
- Tokens are checked left to right and the first failure is raised
"""

import re
from typing import List, Optional

from .ranks import (
    Card,
    Rank,
    FACE_SYMBOLS,
    SYMBOL_TO_SUIT,
    MIN_NUMERIC_RANK,
    MAX_NUMERIC_RANK,
    HAND_SIZE,
)

_DECIMAL = re.compile(r"[0-9]+")


class HandParseError(ValueError):
    """Raised when a hand string cannot be turned into a valid 5-card hand.

    Attributes:
        hand: The offending hand string (None when parsing a lone token)
        token: The offending card token, if the failure is token-specific
    """

    reason = "invalid hand"

    def __init__(self, hand: Optional[str] = None, token: Optional[str] = None):
        self.hand = hand
        self.token = token
        message = self.reason
        if token is not None:
            message = f"{message}: {token!r}"
        if hand is not None:
            message = f"{message} in hand {hand!r}"
        super().__init__(message)


class InvalidHandLength(HandParseError):
    """The hand does not consist of exactly five tokens."""

    reason = "invalid hand length"


class InvalidSuit(HandParseError):
    """A token does not end with a recognised suit symbol."""

    reason = "invalid suit"


class InvalidRank(HandParseError):
    """A token's rank prefix is not 2-10, J, Q, K or A."""

    reason = "invalid rank"


class FiveOfAKindError(HandParseError):
    """All five cards share one rank (only possible with several decks)."""

    reason = "five of a kind is not supported"


class DuplicateCardError(HandParseError):
    """The same card appears twice in a hand while duplicates are disallowed."""

    reason = "duplicate card"


def parse_rank(rank_str: str) -> Rank:
    """Parse the rank prefix of a card token.

    Raises:
        InvalidRank: If the prefix is not a face symbol or an integer in [2, 10]
    """
    if rank_str in FACE_SYMBOLS:
        return FACE_SYMBOLS[rank_str]
    if not _DECIMAL.fullmatch(rank_str):
        raise InvalidRank(token=rank_str)
    value = int(rank_str)
    if value < MIN_NUMERIC_RANK or value > MAX_NUMERIC_RANK:
        raise InvalidRank(token=rank_str)
    return Rank(value)


def parse_card(token: str) -> Card:
    """Parse a single card token such as '10♤' or 'A♡'.

    Raises:
        InvalidSuit: If the token lacks a suit symbol
        InvalidRank: If the rank prefix is not accepted
    """
    for symbol, suit in SYMBOL_TO_SUIT.items():
        if token.endswith(symbol):
            rank_str = token[: -len(symbol)]
            try:
                rank = parse_rank(rank_str)
            except InvalidRank:
                raise InvalidRank(token=token) from None
            return Card(rank=rank, suit=suit)
    raise InvalidSuit(token=token)


def validate_cards(cards: List[Card], hand: Optional[str] = None, allow_duplicate_cards: bool = True) -> None:
    """Reject parsed hands that cannot be ranked.

    Args:
        cards: The five parsed cards
        hand: Original hand string, for error messages
        allow_duplicate_cards: If False, the same rank and suit may not repeat

    Raises:
        FiveOfAKindError: If all five cards share one rank
        DuplicateCardError: If a card repeats and duplicates are disallowed
    """
    if len({c.rank for c in cards}) == 1:
        raise FiveOfAKindError(hand=hand)

    if not allow_duplicate_cards:
        seen = set()
        for card in cards:
            if card in seen:
                raise DuplicateCardError(hand=hand, token=str(card))
            seen.add(card)


def parse_hand_string(hand: str, allow_duplicate_cards: bool = True) -> List[Card]:
    """Parse a hand string into exactly five cards, in token order.

    Args:
        hand: Hand string like "2♤ 3♡ 4♧ 5♢ 7♤"
        allow_duplicate_cards: Accept the same card twice (multi-deck play)

    Returns:
        List of five Card objects

    Raises:
        HandParseError: The first problem found, see the module docstring
    """
    tokens = hand.split(" ")
    if len(tokens) != HAND_SIZE:
        raise InvalidHandLength(hand=hand)

    cards = []
    for token in tokens:
        try:
            cards.append(parse_card(token))
        except HandParseError as e:
            raise type(e)(hand=hand, token=token) from None

    validate_cards(cards, hand=hand, allow_duplicate_cards=allow_duplicate_cards)
    return cards
