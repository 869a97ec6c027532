#!/usr/bin/env python3
"""Deal random 3-card rounds and tally categories, ties, and winners.

Rounds are dealt from a freshly shuffled 52-card deck, so no card repeats
within a round. By default they are evaluated in-process; pass ``--url`` to
send them to a running showdown host instead.

Example:
    python scripts/round_sim.py --players 6 --rounds 500 --seed 7
    python scripts/round_sim.py --players 4 --rounds 50 --url ws://localhost:8765
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import websockets

from tricard.cards import build_deck, cards_to_labels, deal
from tricard.hands import HAND_SIZE
from tricard.models import RoundConfig
from tricard.showdown import evaluate_records, outcome_payload

LOGGER = logging.getLogger("round_sim")

MAX_PLAYERS = 52 // HAND_SIZE


@dataclass
class SimStats:
    rounds: int = 0
    tied_rounds: int = 0
    categories: Counter = field(default_factory=Counter)
    winning_categories: Counter = field(default_factory=Counter)

    def record(self, payload: Dict[str, Any]) -> None:
        self.rounds += 1
        winners = payload["winners"]
        if len(winners) > 1:
            self.tied_rounds += 1
        by_id = {entry["id"]: entry["category"] for entry in payload["hands"]}
        self.categories.update(by_id.values())
        self.winning_categories[by_id[winners[0]]] += 1


def deal_round(players: int, rng: random.Random) -> List[Tuple[int, List[str]]]:
    deck = build_deck(seed=rng.randrange(2**32))
    return [(player_id, cards_to_labels(deal(deck, HAND_SIZE))) for player_id in range(players)]


def round_message(round_id: int, records: List[Tuple[int, List[str]]]) -> Dict[str, Any]:
    return {
        "type": "evaluate",
        "round_id": round_id,
        "players": [{"id": player_id, "cards": labels} for player_id, labels in records],
    }


def run_local(players: int, rounds: int, seed: Optional[int]) -> SimStats:
    rng = random.Random(seed)
    stats = SimStats()
    config = RoundConfig(distinct_cards=True)
    for _ in range(rounds):
        outcome = evaluate_records(deal_round(players, rng), config)
        if outcome.error is not None:
            raise RuntimeError(f"Dealt round rejected: {outcome.error}")
        stats.record(outcome_payload(outcome))
    return stats


async def run_remote(url: str, players: int, rounds: int, seed: Optional[int]) -> SimStats:
    rng = random.Random(seed)
    stats = SimStats()
    async with websockets.connect(url) as ws:
        for round_id in range(rounds):
            await ws.send(json.dumps(round_message(round_id, deal_round(players, rng))))
            reply = json.loads(await ws.recv())
            if reply.get("type") != "result":
                LOGGER.warning("Round %s rejected by host: %s", round_id, reply)
                continue
            stats.record(reply)
    return stats


def report(stats: SimStats) -> None:
    LOGGER.info("Rounds: %s (ties: %s)", stats.rounds, stats.tied_rounds)
    for category, count in stats.categories.most_common():
        LOGGER.info("  dealt %-15s %6d", category, count)
    for category, count in stats.winning_categories.most_common():
        LOGGER.info("  won   %-15s %6d", category, count)


def main() -> None:
    parser = argparse.ArgumentParser(description="Random 3-card round simulator")
    parser.add_argument("--players", type=int, default=4)
    parser.add_argument("--rounds", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--url", default=None, help="Evaluate against a running host, e.g. ws://localhost:8765")
    args = parser.parse_args()

    if not 1 <= args.players <= MAX_PLAYERS:
        parser.error(f"--players must be between 1 and {MAX_PLAYERS}")

    if args.url:
        stats = asyncio.run(run_remote(args.url, args.players, args.rounds, args.seed))
    else:
        stats = run_local(args.players, args.rounds, args.seed)
    report(stats)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
