#!/usr/bin/env python3
"""Smoke test for the showdown engine.

Deals random tables from a shoe of one or more decks and checks that:
- Every dealt hand parses back into the cards it was dealt
- The scalar and vectorised classifiers agree on every hand
- best_hand returns a non-empty subset of the table, in input order

Usage:
    python -m poker_showdown.scripts.smoke_showdown --tables 200
    python -m poker_showdown.scripts.smoke_showdown --tables 500 --decks 3 --seed 42 --verbose
"""

import argparse
import sys
import time
from collections import Counter
from typing import Optional

import numpy as np

from poker_showdown.engine import ShowdownConfig, best_hand, deal_card_lists
from poker_showdown.rules import (
    CATEGORY_NAMES,
    Category,
    classify_cards,
    classify_hands_batch,
    format_cards,
    parse_hand_string,
)
from poker_showdown.utils.seeding import set_seed


def run_table(
    rng: np.random.Generator,
    num_hands: int,
    num_decks: int,
    stats: Counter,
    verbose: bool = False,
) -> None:
    """Deal and check a single table, accumulating counts into stats."""
    card_lists = deal_card_lists(num_hands, num_decks, rng)
    # Five of a kind is rejected by design; only possible with several decks
    card_lists = [cards for cards in card_lists if len({c.rank for c in cards}) > 1]
    stats["hands"] += len(card_lists)
    if not card_lists:
        return

    hands = [format_cards(cards) for cards in card_lists]
    for hand, cards in zip(hands, card_lists):
        if parse_hand_string(hand) != cards:
            stats["parse_errors"] += 1
            if verbose:
                print(f"  Parse mismatch: {hand}")

    scalar = [classify_cards(cards, original_index=i) for i, cards in enumerate(card_lists)]
    batch = classify_hands_batch(card_lists)
    for s, b in zip(scalar, batch):
        stats[s.category.name] += 1
        if s != b:
            stats["parity_errors"] += 1
            if verbose:
                print(f"  Parity mismatch on {hands[s.original_index]}: {s!r} != {b!r}")

    winners = best_hand(hands)
    vec_winners = best_hand(hands, ShowdownConfig(vectorized=True))
    positions = [hands.index(w) for w in winners]
    if not winners or winners != vec_winners or positions != sorted(positions):
        stats["winner_errors"] += 1
        if verbose:
            print(f"  Winner mismatch: {winners} vs {vec_winners}")
    elif verbose:
        print(f"  {len(hands)} hands -> {winners}")


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Smoke test for the showdown engine")
    parser.add_argument("--tables", type=int, default=100, help="Number of tables to deal (default: 100)")
    parser.add_argument("--hands", type=int, default=6, help="Hands per table (default: 6)")
    parser.add_argument("--decks", type=int, default=1, help="Decks in the shoe (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: None for random)")
    parser.add_argument("--verbose", action="store_true", help="Print detailed output")
    args = parser.parse_args(argv)

    seed = set_seed(args.seed)
    rng = np.random.default_rng(seed)
    print(f"Dealing {args.tables} table(s) of {args.hands} hands from {args.decks} deck(s), seed={seed}")

    stats: Counter = Counter()
    start = time.time()
    for _ in range(args.tables):
        run_table(rng, args.hands, args.decks, stats, verbose=args.verbose)
    elapsed = time.time() - start

    print(f"\nClassified {stats['hands']} hands in {elapsed:.2f}s")
    for category in Category:
        print(f"  {CATEGORY_NAMES[category]:<16} {stats[category.name]}")

    failures = stats["parse_errors"] + stats["parity_errors"] + stats["winner_errors"]
    if failures:
        print(
            f"\nFAILED: {stats['parse_errors']} parse, {stats['parity_errors']} parity, "
            f"{stats['winner_errors']} winner error(s)"
        )
        return 1
    print("\nOK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
