"""3-card poker showdown evaluator shared by the console program and the host."""

from .cards import Card, RANKS, SUITS, Rank, build_deck, deal, parse_label
from .errors import (
    DuplicateCard,
    DuplicatePlayer,
    EmptyInput,
    InvalidPlayerCount,
    InvalidRankToken,
    InvalidSuitToken,
    MalformedRecord,
    ShowdownError,
)
from .evaluator import compare_within_category, describe_category, resolve_winners
from .hands import Hand, classify
from .models import Category, Ordering, RoundConfig
from .parser import parse_records, parse_round
from .showdown import RoundOutcome, evaluate_records, evaluate_round

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "Rank",
    "build_deck",
    "deal",
    "parse_label",
    "DuplicateCard",
    "DuplicatePlayer",
    "EmptyInput",
    "InvalidPlayerCount",
    "InvalidRankToken",
    "InvalidSuitToken",
    "MalformedRecord",
    "ShowdownError",
    "compare_within_category",
    "describe_category",
    "resolve_winners",
    "Hand",
    "classify",
    "Category",
    "Ordering",
    "RoundConfig",
    "parse_records",
    "parse_round",
    "RoundOutcome",
    "evaluate_records",
    "evaluate_round",
]
