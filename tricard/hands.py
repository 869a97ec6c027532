from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .cards import Card, Rank, parse_label
from .errors import MalformedRecord
from .models import Category

HAND_SIZE = 3


@dataclass(frozen=True)
class Hand:
    """Three cards kept in non-decreasing rank order with a cached category."""

    cards: Tuple[Card, ...]
    category: Category = field(init=False)

    def __post_init__(self) -> None:
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise MalformedRecord(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        # sorted() is stable, so cards of equal rank keep their input order.
        ordered = tuple(sorted(cards, key=lambda card: card.rank))
        object.__setattr__(self, "cards", ordered)
        object.__setattr__(self, "category", _classify_sorted(ordered))

    @classmethod
    def from_labels(cls, labels: Sequence[str]) -> "Hand":
        return cls(tuple(parse_label(label) for label in labels))

    @property
    def ranks(self) -> Tuple[Rank, ...]:
        return tuple(card.rank for card in self.cards)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(card.label for card in self.cards)

    @property
    def pair_key(self) -> Optional[Rank]:
        """Rank held by exactly two cards; ``None`` if no rank appears exactly twice.

        With three sorted cards and one duplicated rank this is always the rank of
        the middle card.
        """
        for rank, count in Counter(self.ranks).items():
            if count == 2:
                return rank
        return None


def classify(hand: Hand) -> Category:
    return _classify_sorted(hand.cards)


def _classify_sorted(cards: Sequence[Card]) -> Category:
    low, mid, high = (card.rank for card in cards)
    # Ace only plays high: A-2-3 is not a straight.
    is_straight = mid == low + 1 and high == low + 2
    is_flush = len({card.suit for card in cards}) == 1
    is_triple = low == high

    if is_straight and is_flush:
        return Category.STRAIGHT_FLUSH
    if is_triple:
        return Category.THREE_OF_RANK
    if is_straight:
        return Category.STRAIGHT
    if is_flush:
        return Category.FLUSH
    if low == mid or mid == high:
        return Category.PAIR
    return Category.HIGH_CARD
