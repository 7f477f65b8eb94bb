"""
Command line entry point: fetch jokes by id and print them.

    icndb-get 23 42 1337
"""

import logging
import sys
from typing import Iterator, List, Optional

from .config import Config
from .errors import IcndbError
from .models import U64_MAX, Joke


def parse_ids(args: List[str]) -> Iterator[int]:
    """Yield every argument that is an unsigned 64-bit integer, skip the rest."""
    for arg in args:
        if not (arg.isascii() and arg.isdigit()):
            continue
        value = int(arg)
        if value <= U64_MAX:
            yield value


def format_joke(joke: Joke) -> str:
    categories = ", ".join(joke.categories)
    return f"{joke.id}: {joke.content} [{categories}]"


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    config = Config.load()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    failed = False
    with config.client() as client:
        for joke_id in parse_ids(argv):
            try:
                print(format_joke(client.get_by_id(joke_id)))
            except IcndbError as e:
                failed = True
                print(f"{joke_id}: {e}", file=sys.stderr)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
