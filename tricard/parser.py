"""Turn external input into validated ``(player_id, Hand)`` pairs.

Two front doors share the same checks:

* ``parse_round`` reads the console protocol: a player count followed by that
  many ``id card card card`` records, separated by any whitespace.
* ``parse_records`` reads already-structured records, as sent to the host.

Both raise a ``ShowdownError`` subclass before any evaluation happens.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .cards import Card
from .errors import DuplicateCard, DuplicatePlayer, InvalidPlayerCount, MalformedRecord
from .hands import HAND_SIZE, Hand
from .models import RoundConfig

RECORD_WIDTH = 1 + HAND_SIZE


def parse_round(text: str, config: Optional[RoundConfig] = None) -> List[Tuple[int, Hand]]:
    config = config or RoundConfig()
    tokens = text.split()
    if not tokens:
        raise InvalidPlayerCount("Missing player count")
    player_count = _parse_player_count(tokens[0], config)

    body = tokens[1:]
    expected = player_count * RECORD_WIDTH
    if len(body) < expected:
        complete = len(body) // RECORD_WIDTH
        raise MalformedRecord(
            f"Record {complete + 1} is incomplete: expected an id and {HAND_SIZE} cards"
        )
    if len(body) > expected:
        raise MalformedRecord(f"Unexpected trailing input after {player_count} records: {body[expected]!r}")

    records = [
        (body[idx], body[idx + 1 : idx + RECORD_WIDTH])
        for idx in range(0, expected, RECORD_WIDTH)
    ]
    return parse_records(records, config)


def parse_records(
    records: Iterable[Tuple[object, Sequence[str]]],
    config: Optional[RoundConfig] = None,
) -> List[Tuple[int, Hand]]:
    config = config or RoundConfig()
    hands: List[Tuple[int, Hand]] = []
    seen_players: Set[int] = set()
    seen_cards: Set[Card] = set()

    for raw_id, labels in records:
        player_id = _parse_player_id(raw_id)
        if player_id in seen_players:
            raise DuplicatePlayer(f"Player {player_id} appears more than once")
        seen_players.add(player_id)

        hand = build_hand(player_id, labels)
        if config.distinct_cards:
            for card in hand.cards:
                if card in seen_cards:
                    raise DuplicateCard(f"Card {card.label} dealt twice (player {player_id})")
                seen_cards.add(card)
        hands.append((player_id, hand))

    if config.max_players is not None and len(hands) > config.max_players:
        raise InvalidPlayerCount(f"At most {config.max_players} players allowed, got {len(hands)}")
    return hands


def build_hand(player_id: int, labels: Sequence[str]) -> Hand:
    if not isinstance(labels, (list, tuple)) or len(labels) != HAND_SIZE:
        raise MalformedRecord(f"Player {player_id} must hold exactly {HAND_SIZE} cards")
    return Hand.from_labels(labels)


def _parse_player_count(token: str, config: RoundConfig) -> int:
    try:
        count = int(token)
    except ValueError:
        raise InvalidPlayerCount(f"Player count must be an integer, got {token!r}") from None
    if count <= 0:
        raise InvalidPlayerCount(f"Player count must be positive, got {count}")
    if config.max_players is not None and count > config.max_players:
        raise InvalidPlayerCount(f"At most {config.max_players} players allowed, got {count}")
    return count


def _parse_player_id(raw_id: object) -> int:
    if isinstance(raw_id, bool):
        raise MalformedRecord(f"Player id must be an integer, got {raw_id!r}")
    if isinstance(raw_id, int):
        return raw_id
    if isinstance(raw_id, str):
        try:
            return int(raw_id)
        except ValueError:
            pass
    raise MalformedRecord(f"Player id must be an integer, got {raw_id!r}")
