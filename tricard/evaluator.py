from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .errors import EmptyInput
from .hands import Hand
from .models import Category, Ordering


def describe_category(category: Category) -> str:
    return category.value.lower()


def compare_within_category(hand_a: Hand, hand_b: Hand) -> Ordering:
    """Order two hands of the same category.

    Pairs are ranked by their pair key alone, so the unpaired card never breaks a
    tie. Every other category compares ranks from the highest card down.
    """
    if hand_a.category != hand_b.category:
        raise ValueError(
            f"Cannot compare {describe_category(hand_a.category)} with {describe_category(hand_b.category)}"
        )
    if hand_a.category == Category.PAIR:
        return _order(hand_a.pair_key, hand_b.pair_key)
    for rank_a, rank_b in zip(reversed(hand_a.ranks), reversed(hand_b.ranks)):
        if rank_a != rank_b:
            return _order(rank_a, rank_b)
    return Ordering.EQUAL


def _order(left, right) -> Ordering:
    if left > right:
        return Ordering.GREATER
    if left < right:
        return Ordering.LESS
    return Ordering.EQUAL


def resolve_winners(hands: Sequence[Tuple[int, Hand]]) -> List[int]:
    """Return the ids of every player holding an equal-best hand, in input order."""
    if not hands:
        raise EmptyInput("No hands to evaluate")

    top_category = max(hand.category for _, hand in hands)
    best: Optional[Hand] = None
    for _, hand in hands:
        if hand.category != top_category:
            continue
        if best is None or compare_within_category(hand, best) == Ordering.GREATER:
            best = hand
    assert best is not None

    return [
        player_id
        for player_id, hand in hands
        if hand.category == top_category and compare_within_category(hand, best) == Ordering.EQUAL
    ]
