import sys
import logging

from . import const, loader, vt100
from .args import ParseResult
from .config import Config

_logger = logging.getLogger(__name__)

# --- Options ---------------------------------------------------------------- #

OPTIONS: list[tuple[str | None, str, str]] = [
    (None, "case-sensitive", "Keep the case of option names"),
    (None, "no-dash", "Don't treat '-' and '--' as option markers"),
    (None, "slash", "Treat '/' as an option marker"),
    (None, "flags", "Split '-abc' into the flags 'a', 'b' and 'c'"),
    (None, "negate", "Split '-!abc' into '!a', '!b' and '!c'"),
    (None, "keep-indicator", "Keep '-', '--' and '/' in option names"),
    (None, "pass-through", "Stop at '--' and pass the remaining tokens through"),
    (None, "json", "Print the result as JSON"),
    (None, "verbose", "Enable verbose logging"),
    ("h", "help", "Show this help message"),
    ("u", "usage", "Show usage information"),
    (None, "version", "Show current version"),
]

SELF = Config(useSlashOptions=False, enablePassThrough=True)
"""How argkit reads its own arguments."""


def _flag(res: ParseResult, short: str | None, long: str) -> bool:
    try:
        enabled = res.consumeFlag(long)
        if short:
            enabled = res.consumeFlag(short) or enabled
        return enabled
    except ValueError as e:
        raise RuntimeError(str(e)) from e


def configFromArgs(res: ParseResult) -> Config:
    """Builds the tokenizer config selected by the command line switches, consuming them."""
    config = Config(
        ignoreCase=not _flag(res, None, "case-sensitive"),
        useDashOptions=not _flag(res, None, "no-dash"),
        useSlashOptions=_flag(res, None, "slash"),
        useSingleDashFlags=_flag(res, None, "flags"),
        negateFlags=_flag(res, None, "negate"),
        trimIndicator=not _flag(res, None, "keep-indicator"),
        enablePassThrough=_flag(res, None, "pass-through"),
    )

    if config.useSingleDashFlags and not config.useDashOptions:
        vt100.warning("'--flags' has no effect together with '--no-dash'")

    if config.negateFlags and not config.useSingleDashFlags:
        vt100.warning("'--negate' has no effect without '--flags'")

    return config


def usage():
    res = ""
    for short, long, _ in OPTIONS:
        flag = f"-{short}, --{long}" if short else f"--{long}"
        res += f"[{flag}] "
    print(f"Usage: {const.ARGV0} {res}-- <tokens...>")


def help():
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Description")
    print(vt100.indent(const.DESCRIPTION))
    print()

    vt100.subtitle("Options")
    for short, long, description in OPTIONS:
        flag = f"-{short}, --{long}" if short else f"--{long}"
        print(vt100.indent(f"{flag} {description}"))
    print()


def render(result: ParseResult, asJson: bool, color: bool) -> str:
    if asJson:
        return result.to_json(indent=2)

    if color:
        return vt100.highlight(result)

    res = result.toDisplayString()
    if result.passThrough:
        res += " -- " + " ".join(result.passThrough)
    return res.strip()


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt=const.LOG_DATE_FORMAT,
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format=const.LOG_FORMAT,
                datefmt=const.LOG_DATE_FORMAT,
            )


def exec(argv: list[str]):
    """
    Runs the command line.

    Raises:
        RuntimeError: On unknown options, stray operands or bad switch values.
    """
    res = loader.parse(argv, SELF)

    if _flag(res, "h", "help"):
        help()
        return

    if _flag(res, "u", "usage"):
        usage()
        return

    if _flag(res, None, "version"):
        print(f"{const.ARGV0} v{const.VERSION_STR}")
        return

    logger.setup(_flag(res, None, "verbose"))
    asJson = _flag(res, None, "json")
    config = configFromArgs(res)

    if len(res.options) > 0:
        raise RuntimeError(f"Unknown option '--{next(iter(res.options))}'")

    operand = res.consumeArg()
    if operand is not None:
        raise RuntimeError(f"Unexpected operand '{operand}', tokens go after '--'")

    _logger.info(f"Tokenizing {len(res.passThrough)} tokens with {config.to_json()}")

    result = loader.parse(res.passThrough, config)
    print(render(result, asJson, sys.stdout.isatty()))
