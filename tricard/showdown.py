from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import ShowdownError
from .evaluator import describe_category, resolve_winners
from .hands import Hand
from .models import RoundConfig
from .parser import parse_records, parse_round

LOGGER = logging.getLogger("tricard")


@dataclass
class RoundOutcome:
    # Either winners are set (error is None) or error is set and winners stay empty.
    hands: List[Tuple[int, Hand]] = field(default_factory=list)
    winners: List[int] = field(default_factory=list)
    error: Optional[ShowdownError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate_round(text: str, config: Optional[RoundConfig] = None) -> RoundOutcome:
    """Parse console-protocol text and resolve the winners of one round."""
    try:
        hands = parse_round(text, config)
    except ShowdownError as exc:
        return RoundOutcome(error=exc)
    return _resolve(hands)


def evaluate_records(
    records: Iterable[Tuple[object, Sequence[str]]],
    config: Optional[RoundConfig] = None,
) -> RoundOutcome:
    try:
        hands = parse_records(records, config)
    except ShowdownError as exc:
        return RoundOutcome(error=exc)
    return _resolve(hands)


def _resolve(hands: List[Tuple[int, Hand]]) -> RoundOutcome:
    for player_id, hand in hands:
        LOGGER.debug("Player %s holds %s (%s)", player_id, " ".join(hand.labels), describe_category(hand.category))
    try:
        winners = resolve_winners(hands)
    except ShowdownError as exc:
        return RoundOutcome(hands=hands, error=exc)
    LOGGER.debug("Winners: %s", winners)
    return RoundOutcome(hands=hands, winners=winners)


def format_winners(winners: Sequence[int]) -> str:
    return " ".join(str(player_id) for player_id in winners)


def format_error(error: ShowdownError) -> str:
    return f"{error.code}: {error}"


def outcome_payload(outcome: RoundOutcome) -> Dict[str, object]:
    if outcome.error is not None:
        return {"code": outcome.error.code, "msg": str(outcome.error)}
    return {
        "winners": list(outcome.winners),
        "hands": [
            {
                "id": player_id,
                "cards": list(hand.labels),
                "category": describe_category(hand.category),
            }
            for player_id, hand in outcome.hands
        ],
    }
