"""Process entry point: run the UCI loop on stdin/stdout."""

import argparse
import logging
import sys

from chessbro.config import CONFIG, MAX_SEARCH_DEPTH, MIN_SEARCH_DEPTH, parse_depth
from chessbro.core.board import FenError
from chessbro.session import Session
from interface.uci import UCI

logger = logging.getLogger(__name__)


def _depth_arg(value: str) -> int:
    depth = parse_depth(value)
    if depth is None:
        raise argparse.ArgumentTypeError(
            f"depth must be an integer from {MIN_SEARCH_DEPTH} to {MAX_SEARCH_DEPTH}, got {value!r}")
    return depth


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="chessbro", description="ChessBro UCI engine")
    parser.add_argument("--depth", type=_depth_arg, default=None, help="search depth in full moves")
    parser.add_argument("--log-level", default=CONFIG.log_level)
    args = parser.parse_args(argv)

    # stdout carries the protocol; logs go to stderr only.
    logging.basicConfig(stream=sys.stderr, level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    uci = UCI(Session(depth=args.depth))
    try:
        uci.run(sys.stdin)
    except FenError as e:
        logger.error("fatal: %s", e)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
