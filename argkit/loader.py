import logging

from enum import Enum
from typing import Optional

from .args import ParseResult, Positional, Value
from .config import Config

_logger = logging.getLogger(__name__)


class Marker(Enum):
    """
    The option indicator a token starts with.
    """

    NONE = 0
    SLASH = 1
    DASH = 2
    DOUBLE_DASH = 3

    @property
    def width(self) -> int:
        """Length of the indicator."""
        if self == Marker.NONE:
            return 0
        if self == Marker.DOUBLE_DASH:
            return 2
        return 1


def marker(arg: str, config: Config) -> Marker:
    """Classifies a token. `--` is checked before `-` since both share the dash."""
    if config.useSlashOptions and arg.startswith("/"):
        return Marker.SLASH
    if config.useDashOptions and arg.startswith("--"):
        return Marker.DOUBLE_DASH
    if config.useDashOptions and arg.startswith("-"):
        return Marker.DASH
    return Marker.NONE


def _resolveName(name: str, kind: Marker, config: Config) -> str:
    if config.trimIndicator:
        name = name[kind.width :]
    if config.ignoreCase:
        name = name.lower()
    return name


def _expandFlags(name: str, config: Config) -> list[str]:
    """Splits `-abc` into one flag per letter, `-!abc` into negated ones."""
    if not config.trimIndicator:
        name = name[1:]

    negate = config.negateFlags and name.startswith("!")
    if negate:
        name = name[1:]

    flags = [f"!{c}" if negate else c for c in name]
    if not config.trimIndicator:
        flags = [f"-{flag}" for flag in flags]
    return flags


def parse(args: list[str], config: Optional[Config] = None) -> ParseResult:
    """
    Sorts `args` into options, positionals and passed through arguments.

    Never fails: any argument list, however odd, yields a result where each
    token is either an option name, an option value, a positional or part
    of the pass through tail.

    Args:
        args: The arguments to parse, as given to the program.
        config: The switches to use, `Config()` when omitted.
    """
    if config is None:
        config = Config()

    _logger.debug(f"Parsing {len(args)} arguments")

    result = ParseResult()
    i = 0
    while i < len(args):
        arg = args[i]
        kind = marker(arg, config)
        if kind == Marker.NONE:
            result.positionals.append(Positional(i, arg))
            i += 1
            continue

        value: Value = None
        if "=" in arg:
            name, value = arg.split("=", 1)
            name = _resolveName(name, kind, config)
        else:
            name = _resolveName(arg, kind, config)
            # the pass through marker never takes a value
            passing = config.enablePassThrough and name == ""
            if (
                not passing
                and i + 1 < len(args)
                and marker(args[i + 1], config) == Marker.NONE
            ):
                i += 1
                value = args[i]

        if config.enablePassThrough and name == "":
            _logger.debug(f"Passing through {len(args) - i - 1} arguments")
            result.passThrough.extend(args[i + 1 :])
            return result

        flags: list[str] = []
        if config.useSingleDashFlags and kind == Marker.DASH:
            flags = _expandFlags(name, config)

        if len(flags) > 0:
            for flag in flags:
                result.addOption(flag, value)
        else:
            result.addOption(name, value)

        i += 1

    return result
