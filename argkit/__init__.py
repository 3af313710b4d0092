import sys
import logging

from . import args, cli, const, loader, vt100  # noqa: F401
from .args import Comparison, ParseResult, Positional  # noqa: F401
from .config import Config  # noqa: F401
from .loader import Marker, parse  # noqa: F401


def main() -> int:
    try:
        cli.exec(sys.argv[1:])
        return 0

    except RuntimeError as e:
        logging.debug("Command failed", exc_info=e)
        vt100.error(str(e))
        cli.usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
