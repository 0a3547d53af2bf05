from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from .config import load_settings
from .errors import InvalidArgument, LottoError
from .services import RunController, get_random_source


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise InvalidArgument(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog="lotto649",
        description="Generate random Lotto 6/49 tickets (6 numbers from 1 to 49).",
    )
    parser.add_argument("count", nargs="?", default=None, help="Number of tickets (default 5)")
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Add a bonus number and never repeat a ticket within the run",
    )
    parser.add_argument("--seed", default=None, help="Seed for reproducible draws")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    return parser


# ملخص: يضبط Loguru ليكتب الرسائل التشخيصية إلى stderr فقط.
def setup_logging(verbose: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format="{message}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging()
    try:
        args = build_parser().parse_args(argv)
        if args.verbose:
            setup_logging(verbose=True)
        settings = load_settings(count=args.count, unique=args.unique, seed=args.seed)
        source = get_random_source(settings.seed)
        RunController(source, unique=settings.unique).run(settings.count)
    except LottoError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
