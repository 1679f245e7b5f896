"""Random dealing of five-card hands from one or more shuffled decks."""

from typing import List, Union

import numpy as np

from poker_showdown.rules import Card, HAND_SIZE, create_standard_deck, format_cards

SeedLike = Union[int, np.random.Generator, None]


def _as_generator(seed: SeedLike) -> np.random.Generator:
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def shuffled_shoe(num_decks: int = 1, seed: SeedLike = None) -> List[Card]:
    """Combine num_decks standard decks and shuffle them.

    Args:
        num_decks: Number of 52-card decks in the shoe
        seed: Seed or numpy Generator for the shuffle

    Returns:
        List of 52 * num_decks cards
    """
    if num_decks < 1:
        raise ValueError(f"num_decks must be at least 1, got {num_decks}")
    shoe = create_standard_deck() * num_decks
    order = _as_generator(seed).permutation(len(shoe))
    return [shoe[i] for i in order]


def deal_card_lists(num_hands: int, num_decks: int = 1, seed: SeedLike = None) -> List[List[Card]]:
    """Deal num_hands five-card hands from a freshly shuffled shoe.

    Raises:
        ValueError: If the shoe holds fewer than num_hands * 5 cards
    """
    shoe = shuffled_shoe(num_decks, seed)
    if num_hands * HAND_SIZE > len(shoe):
        raise ValueError(f"cannot deal {num_hands} hands from {num_decks} deck(s): {len(shoe)} cards available")
    return [shoe[i * HAND_SIZE : (i + 1) * HAND_SIZE] for i in range(num_hands)]


def deal_hands(num_hands: int, num_decks: int = 1, seed: SeedLike = None) -> List[str]:
    """Deal hand strings in the canonical "10♤ J♤ Q♤ K♤ A♤" format."""
    return [format_cards(cards) for cards in deal_card_lists(num_hands, num_decks, seed)]
