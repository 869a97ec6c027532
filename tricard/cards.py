from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from .errors import InvalidRankToken, InvalidSuitToken, MalformedRecord

RANKS = "AKQJT98765432"
SUITS = "SHDC"


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return RANKS[Rank.ACE - self]

    @classmethod
    def from_char(cls, char: str) -> "Rank":
        if len(char) != 1 or char not in RANKS:
            raise InvalidRankToken(f"Invalid rank: {char!r}")
        return cls(Rank.ACE - RANKS.index(char))


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: str

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise InvalidRankToken(f"Invalid rank: {self.rank!r}")
        if self.suit not in SUITS:
            raise InvalidSuitToken(f"Invalid suit: {self.suit!r}")

    @property
    def label(self) -> str:
        return f"{self.rank.symbol}{self.suit}"


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card(rank, suit) for rank in Rank for suit in SUITS]
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards


def cards_to_labels(cards: List[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    """Build a card from a rank character plus a suit character, e.g. ``"TD"``.

    Rank characters are case-sensitive (``2``-``9``, ``T``, ``J``, ``Q``, ``K``,
    ``A``); suit characters are matched case-insensitively.
    """
    if not isinstance(label, str) or len(label) != 2:
        raise MalformedRecord(f"Invalid card label: {label!r}")
    rank = Rank.from_char(label[0])
    suit = label[1].upper()
    if suit not in SUITS:
        raise InvalidSuitToken(f"Invalid suit: {label[1]!r} in {label!r}")
    return Card(rank, suit)
