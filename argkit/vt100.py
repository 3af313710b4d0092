import sys

from .args import ParseResult

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BOLD = "\033[1m"
FAINT = "\033[2m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str):
    print(f"{BOLD+WHITE+UNDERLINE}{text}{RESET}")


def subtitle(text: str):
    print(f"{BOLD+WHITE}{text}{RESET}:")


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)


def warning(msg: str) -> None:
    print(f"{YELLOW}Warning:{RESET} {msg}\n", file=sys.stderr)


def highlight(result: ParseResult) -> str:
    """Same layout as `ParseResult.toDisplayString` with options, values and the tail colored."""
    parts: list[str] = []
    for name, values in result.options.items():
        for value in values:
            if value:
                parts.append(f"{GREEN}--{name}{RESET} {value}")
            else:
                parts.append(f"{GREEN}--{name}{RESET}")
    for positional in result.positionals:
        parts.append(positional.text)
    if result.passThrough:
        parts.append(f"{FAINT}-- {' '.join(result.passThrough)}{RESET}")
    return " ".join(parts)
