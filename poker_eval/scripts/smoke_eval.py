#!/usr/bin/env python3
"""Smoke test for the card evaluation helpers.

This script deals N random hands and runs every evaluation helper on them
to verify basic properties:
- Longest sequences are non-empty and laid out as consecutive ranks
- Rank and suit groupings partition the hand
- N-of-a-kind groups are strictly ordered by (size, rank)
- Re-running on the same hand gives the same result

Usage:
    python -m poker_eval.scripts.smoke_eval --hands 1000
    python -m poker_eval.scripts.smoke_eval --hands 200 --seed 42 --verbose
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

import numpy as np
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from poker_eval.rules import (
    NUM_CARDS,
    NUM_RANKS,
    Card,
    Rank,
    get_longest_sequence,
    get_n_of_a_kinds,
    get_rank_counts,
    group_cards_by_rank,
    group_cards_by_suit,
    idx_to_card,
)
from poker_eval.utils.seeding import set_seed

console = Console()
logger = logging.getLogger(__name__)


@dataclass
class SmokeConfig:
    """Smoke run configuration."""

    hands: int = 500
    min_cards: int = 1
    max_cards: int = 9
    seed: Optional[int] = None
    verbose: bool = False


def deal_hand(rng: np.random.Generator, num_cards: int) -> Set[Card]:
    """Deal `num_cards` distinct cards from a fresh deck."""
    indices = rng.choice(NUM_CARDS, size=num_cards, replace=False)
    return {idx_to_card(int(idx)) for idx in indices}


def check_sequence_layout(ranks: List[Rank]) -> bool:
    """True if `ranks` is a run of consecutive ranks, or a wheel with one Ace slot in front."""
    if len(ranks) > NUM_RANKS:
        return False

    values = [int(rank) for rank in ranks]
    if len(ranks) >= 2 and ranks[0] == Rank.ACE and ranks[1] == Rank.TWO:
        values[0] = 1

    return values == list(range(values[0], values[0] + len(values))) if values else True


def check_hand(cards: Set[Card]) -> List[str]:
    """Run all helpers on one hand.

    Args:
        cards: The hand to check

    Returns:
        List of error descriptions (empty if every check passed)
    """
    errors = []

    sequence = get_longest_sequence(cards)
    if cards and len(sequence) < 1:
        errors.append("empty sequence for a non-empty hand")
    if not check_sequence_layout(sequence.ranks()):
        errors.append(f"sequence {sequence} is not a consecutive run")
    if not sequence.cards() <= cards:
        errors.append(f"sequence {sequence} holds cards not in the hand")
    if any(len(slot) == 0 for slot in sequence):
        errors.append(f"sequence {sequence} has an empty slot")
    if list(get_longest_sequence(cards)) != list(sequence):
        errors.append(f"sequence {sequence} is not reproducible")

    for name, grouped in (("rank", group_cards_by_rank(cards)), ("suit", group_cards_by_suit(cards))):
        union = set().union(*grouped.values()) if grouped else set()
        if union != cards or sum(len(bucket) for bucket in grouped.values()) != len(cards):
            errors.append(f"{name} grouping does not partition the hand")

    groups = get_n_of_a_kinds(cards)
    if len(groups) != len(get_rank_counts(cards)):
        errors.append("n-of-a-kind count differs from distinct rank count")
    for stronger, weaker in zip(groups, groups[1:]):
        if not stronger.strength > weaker.strength:
            errors.append(f"n-of-a-kinds out of order: {stronger} before {weaker}")

    return errors


def run_smoke(config: SmokeConfig) -> Dict[str, int]:
    """Deal and check `config.hands` random hands.

    Args:
        config: Smoke run configuration

    Returns:
        Dict with run statistics
    """
    if not 0 <= config.min_cards <= config.max_cards <= NUM_CARDS:
        raise ValueError(f"Invalid card range: {config.min_cards}..{config.max_cards}")

    seed = set_seed(config.seed)
    rng = np.random.default_rng(seed)

    stats = {
        "seed": seed,
        "hands": 0,
        "cards": 0,
        "failed_hands": 0,
        "errors": 0,
        "wheels": 0,
        "max_sequence": 0,
    }

    for _ in range(config.hands):
        num_cards = int(rng.integers(config.min_cards, config.max_cards + 1))
        cards = deal_hand(rng, num_cards)

        errors = check_hand(cards)
        sequence = get_longest_sequence(cards)

        stats["hands"] += 1
        stats["cards"] += len(cards)
        stats["wheels"] += int(sequence.is_wheel)
        stats["max_sequence"] = max(stats["max_sequence"], len(sequence))

        if errors:
            stats["failed_hands"] += 1
            stats["errors"] += len(errors)
            for error in errors:
                logger.error("Hand %s: %s", sorted(cards), error)
        else:
            logger.debug("Hand %s -> %s", sorted(cards), sequence)

    return stats


def main():
    parser = argparse.ArgumentParser(description="Smoke test for the card evaluation helpers")
    parser.add_argument(
        "--hands",
        type=int,
        default=SmokeConfig.hands,
        help=f"Number of hands to deal (default: {SmokeConfig.hands})",
    )
    parser.add_argument(
        "--min-cards",
        type=int,
        default=SmokeConfig.min_cards,
        help=f"Fewest cards per hand (default: {SmokeConfig.min_cards})",
    )
    parser.add_argument(
        "--max-cards",
        type=int,
        default=SmokeConfig.max_cards,
        help=f"Most cards per hand (default: {SmokeConfig.max_cards})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: None for random)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every hand",
    )
    args = parser.parse_args()

    config = SmokeConfig(
        hands=args.hands,
        min_cards=args.min_cards,
        max_cards=args.max_cards,
        seed=args.seed,
        verbose=args.verbose,
    )

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    start_time = time.time()
    stats = run_smoke(config)
    elapsed = time.time() - start_time

    table = Table(title="Smoke Summary")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for key, value in stats.items():
        table.add_row(key, str(value))
    table.add_row("time", f"{elapsed:.2f}s")
    console.print(table)

    if stats["errors"] > 0:
        console.print(f"[bold red]FAILED[/]: {stats['errors']} error(s) in {stats['failed_hands']} hand(s)")
        sys.exit(1)

    console.print("[bold green]PASSED[/]: all hands checked")
    sys.exit(0)


if __name__ == "__main__":
    main()
