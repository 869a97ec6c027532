import argparse
import logging
import sys
from typing import List, Optional

from .errors import MalformedRecord
from .evaluator import describe_category
from .models import RoundConfig
from .showdown import evaluate_round, format_error, format_winners

LOGGER = logging.getLogger("tricard")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find the winners of a 3-card poker round")
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Round description (player count, then 'id card card card' records); defaults to stdin",
    )
    parser.add_argument("--max-players", type=int, default=None)
    parser.add_argument(
        "--distinct-cards",
        action="store_true",
        help="Reject rounds where the same card is dealt twice",
    )
    parser.add_argument("--explain", action="store_true", help="Print every hand's category to stderr")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level)

    try:
        text = _read_input(args.input)
    except OSError as exc:
        parser.error(f"can't read {args.input!r}: {exc.strerror or exc}")
    except UnicodeDecodeError as exc:
        error = MalformedRecord(f"Input is not valid UTF-8 (byte {exc.start})")
        print(f"error: {format_error(error)}", file=sys.stderr)
        return 2

    config = RoundConfig(max_players=args.max_players, distinct_cards=args.distinct_cards)
    outcome = evaluate_round(text, config)

    if outcome.error is not None:
        LOGGER.info("Rejected round: %s", outcome.error)
        print(f"error: {format_error(outcome.error)}", file=sys.stderr)
        return 2

    if args.explain:
        for player_id, hand in outcome.hands:
            print(f"{player_id} {' '.join(hand.labels)} {describe_category(hand.category)}", file=sys.stderr)
    print(format_winners(outcome.winners))
    return 0


if __name__ == "__main__":
    sys.exit(main())
