#!/usr/bin/env python3
"""Smoke test for the showdown hand evaluator.

This script deals random pairs of hands from a shuffled deck and verifies
basic ordering properties:
- Every dealt hand validates and classifies
- compare(h, h) is EQUAL
- compare(a, b) is the inverse of compare(b, a)
- Shuffling the cards inside a hand changes nothing
- compare agrees with hand_key

Usage:
    python -m showdown.scripts.smoke_eval --hands 1000
    python -m showdown.scripts.smoke_eval --hands 200 --seed 42 --verbose
"""

import argparse
import logging
import sys
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from rich import box
from rich.console import Console
from rich.table import Table

from showdown.rules import (
    CATEGORY_NAMES,
    Card,
    Comparison,
    HandCategory,
    HAND_SIZE,
    compare_hands,
    create_standard_deck,
    evaluate_hand,
    validate_hand,
)
from showdown.utils.seeding import set_seed

logger = logging.getLogger(__name__)


@dataclass
class SmokeConfig:
    """Smoke run configuration."""

    hands: int = 1000
    seed: Optional[int] = None
    verbose: bool = False


@dataclass
class SmokeStats:
    """Counters collected over a smoke run."""

    pairs: int = 0
    errors: int = 0
    categories: Counter = field(default_factory=Counter)
    outcomes: Counter = field(default_factory=Counter)


def deal_pair(deck: List[Card], rng: np.random.Generator) -> tuple:
    """Deal two disjoint five-card hands from the deck."""
    idx = rng.permutation(len(deck))[: 2 * HAND_SIZE]
    cards = [deck[i] for i in idx]
    return cards[:HAND_SIZE], cards[HAND_SIZE:]


def check_pair(hand_a: List[Card], hand_b: List[Card], rng: np.random.Generator) -> List[str]:
    """Check the ordering properties on one pair of hands.

    Returns:
        List of problem descriptions (empty when all checks pass)
    """
    problems = []

    for hand in (hand_a, hand_b):
        validate_hand(hand)
        if compare_hands(hand, hand) != Comparison.EQUAL:
            problems.append(f"not reflexive: {hand}")

    forward = compare_hands(hand_a, hand_b)
    backward = compare_hands(hand_b, hand_a)
    if forward != backward.inverted():
        problems.append(f"not antisymmetric: {forward.name} / {backward.name}")

    shuffled_a = [hand_a[i] for i in rng.permutation(HAND_SIZE)]
    shuffled_b = [hand_b[i] for i in rng.permutation(HAND_SIZE)]
    if compare_hands(shuffled_a, shuffled_b) != forward:
        problems.append("result changed when cards were reordered")

    by_key = Comparison.from_order(evaluate_hand(hand_a).key, evaluate_hand(hand_b).key)
    if by_key != forward:
        problems.append(f"hand_key disagrees: {by_key.name} vs {forward.name}")

    return problems


def run_smoke(config: SmokeConfig, console: Console) -> SmokeStats:
    """Deal and check config.hands pairs of hands."""
    seed = set_seed(config.seed)
    rng = np.random.default_rng(seed)
    deck = create_standard_deck()
    stats = SmokeStats()

    logger.info("Dealing %d pair(s) with seed %d", config.hands, seed)

    for _ in range(config.hands):
        hand_a, hand_b = deal_pair(deck, rng)
        problems = check_pair(hand_a, hand_b, rng)

        evaluated_a = evaluate_hand(hand_a)
        evaluated_b = evaluate_hand(hand_b)
        stats.pairs += 1
        stats.categories[evaluated_a.category] += 1
        stats.categories[evaluated_b.category] += 1
        stats.outcomes[compare_hands(hand_a, hand_b)] += 1

        if config.verbose:
            console.print(f"  {evaluated_a}  vs  {evaluated_b}")

        for problem in problems:
            stats.errors += 1
            logger.error("%s | %s vs %s", problem, evaluated_a, evaluated_b)

    return stats


def render_summary(stats: SmokeStats) -> Table:
    table = Table(title="Category distribution", box=box.SIMPLE, show_header=True)
    table.add_column("Category")
    table.add_column("Hands", justify="right")
    table.add_column("Share", justify="right")

    total = max(sum(stats.categories.values()), 1)
    for category in reversed(HandCategory):
        count = stats.categories.get(category, 0)
        table.add_row(CATEGORY_NAMES[category], str(count), f"{100.0 * count / total:.2f}%")

    return table


def main():
    parser = argparse.ArgumentParser(description="Smoke test for the showdown hand evaluator")
    parser.add_argument(
        "--hands",
        type=int,
        default=SmokeConfig.hands,
        help=f"Number of hand pairs to deal (default: {SmokeConfig.hands})",
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
        help="Print every dealt pair",
    )
    args = parser.parse_args()
    config = SmokeConfig(hands=args.hands, seed=args.seed, verbose=args.verbose)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    console = Console()
    start_time = time.time()
    stats = run_smoke(config, console)
    elapsed = time.time() - start_time

    console.print(render_summary(stats))
    console.print(
        f"Pairs: {stats.pairs}  "
        f"(first wins {stats.outcomes[Comparison.GREATER]}, "
        f"second wins {stats.outcomes[Comparison.LESSER]}, "
        f"split {stats.outcomes[Comparison.EQUAL]})"
    )
    console.print(f"Time: {elapsed:.2f}s")

    if stats.errors > 0:
        console.print(f"[red]FAILED: {stats.errors} error(s) detected[/red]")
        sys.exit(1)

    console.print("[green]PASSED: All checks succeeded[/green]")
    sys.exit(0)


if __name__ == "__main__":
    main()
