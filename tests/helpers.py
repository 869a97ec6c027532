from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from tricard.hands import Hand


def make_hand(*labels: str) -> Hand:
    """Build a hand from card labels, e.g. ``make_hand("AS", "KH", "TD")``."""
    return Hand.from_labels(labels)


def make_round(*hands: Sequence[str]) -> List[Tuple[int, Hand]]:
    """Seat each hand at ids 0..n-1 in the given order."""
    return [(player_id, Hand.from_labels(labels)) for player_id, labels in enumerate(hands)]


def round_text(records: Iterable[Tuple[int, Sequence[str]]]) -> str:
    """Render records in the console protocol: count line, then one record per line."""
    records = list(records)
    lines = [str(len(records))]
    lines.extend(f"{player_id} {' '.join(labels)}" for player_id, labels in records)
    return "\n".join(lines) + "\n"
