#!/usr/bin/env python3
"""Pick the winning poker hand(s) from the command line.

Hands are five space-separated cards, e.g. "10♤ J♤ Q♤ K♤ A♤".
Suits: ♢ ♧ ♡ ♤. Ranks: 2-10, J, Q, K, A.

Usage:
    python -m poker_showdown.scripts.best_hand "4♤ 4♡ 3♧ 3♢ 9♤" "2♤ 3♡ 4♧ 5♢ 6♤"
    python -m poker_showdown.scripts.best_hand --file hands.txt --ranking
    cat hands.txt | python -m poker_showdown.scripts.best_hand --plain
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from poker_showdown.engine import ShowdownConfig, best_hand, rank_hands
from poker_showdown.rules import HandParseError, describe_hand

logger = logging.getLogger(__name__)

# Exit status for rejected input
EXIT_INVALID_HAND = 2


def read_hands(args: argparse.Namespace) -> List[str]:
    """Collect hands from positional arguments, --file, or stdin (in that order)."""
    if args.hands:
        return list(args.hands)
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            lines = f.read().splitlines()
    else:
        lines = sys.stdin.read().splitlines()
    return [line for line in lines if line.strip()]


def build_ranking_table(hands: List[str], config: ShowdownConfig) -> Table:
    """Table of every hand ordered best first, winners highlighted."""
    table = Table(title="Showdown", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Hand")
    table.add_column("Category")
    table.add_column("Rank sum", justify="right")

    ranked = rank_hands(hands, config)
    best = ranked[0].strength if ranked else None
    for hand in ranked:
        table.add_row(
            str(hand.original_index),
            hands[hand.original_index],
            describe_hand(hand),
            str(hand.rank_sum),
            style="bold green" if hand.strength == best else None,
        )
    return table


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find the winning poker hand(s)")
    parser.add_argument("hands", nargs="*", help="Hands to compare (quote each hand)")
    parser.add_argument("--file", type=str, default=None, help="Read one hand per line from a file")
    parser.add_argument(
        "--no-duplicates",
        action="store_true",
        help="Reject hands containing the same card twice",
    )
    parser.add_argument(
        "--vectorized",
        action="store_true",
        help="Classify all hands in one numpy pass",
    )
    parser.add_argument("--ranking", action="store_true", help="Show every hand ranked best first")
    parser.add_argument("--plain", action="store_true", help="Print winning hands one per line")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = ShowdownConfig(
        allow_duplicate_cards=not args.no_duplicates,
        vectorized=args.vectorized,
    )
    hands = read_hands(args)
    logger.info("comparing %d hand(s)", len(hands))

    console = Console()
    try:
        winners = best_hand(hands, config)
        table = build_ranking_table(hands, config) if args.ranking and len(hands) > 1 else None
    except HandParseError as e:
        if args.plain:
            print(f"error: {e}", file=sys.stderr)
        else:
            Console(stderr=True).print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
        return EXIT_INVALID_HAND

    if args.plain:
        for hand in winners:
            print(hand)
        return 0

    if table is not None:
        console.print(table)
    if not winners:
        console.print("No hands given.")
        return 0
    label = "Winner" if len(winners) == 1 else f"Winners ({len(winners)}-way tie)"
    console.print(f"[bold]{label}:[/bold]")
    for hand in winners:
        console.print(f"  {hand}", highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
