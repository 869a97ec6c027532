import argparse
import asyncio
import logging

from tricard.models import RoundConfig
from .server import ShowdownHost

logging.basicConfig(level=logging.INFO)


def main() -> None:
    parser = argparse.ArgumentParser(description="3-card showdown evaluation host")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--max-players", type=int, default=None)
    parser.add_argument(
        "--distinct-cards",
        action="store_true",
        help="Reject rounds where the same card is dealt twice",
    )
    args = parser.parse_args()

    config = RoundConfig(max_players=args.max_players, distinct_cards=args.distinct_cards)

    server = ShowdownHost(config)
    asyncio.run(server.start(host=args.host, port=args.port))


if __name__ == "__main__":
    main()
