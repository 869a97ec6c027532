from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Category(str, Enum):
    HIGH_CARD = "HIGH_CARD"
    PAIR = "PAIR"
    FLUSH = "FLUSH"
    STRAIGHT = "STRAIGHT"
    THREE_OF_RANK = "THREE_OF_RANK"
    STRAIGHT_FLUSH = "STRAIGHT_FLUSH"

    @property
    def priority(self) -> int:
        return CATEGORY_PRIORITY[self]

    # Ordering follows CATEGORY_PRIORITY, not the str values or declaration order.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.priority < other.priority

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.priority <= other.priority

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.priority > other.priority

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.priority >= other.priority


CATEGORY_PRIORITY = {
    Category.STRAIGHT_FLUSH: 5,
    Category.THREE_OF_RANK: 4,
    Category.STRAIGHT: 3,
    Category.FLUSH: 2,
    Category.PAIR: 1,
    Category.HIGH_CARD: 0,
}


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass
class RoundConfig:
    max_players: Optional[int] = None
    distinct_cards: bool = False
