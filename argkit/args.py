import dataclasses as dt

from enum import Enum
from typing import NamedTuple, Optional
from dataclasses_json import DataClassJsonMixin, config

Value = Optional[str]
"""An option value, `None` when the option was given without one."""

_TRUE = ("true", "True", "y", "yes", "Y", "Yes", "1")
_FALSE = ("false", "False", "n", "no", "N", "No", "0")


class Positional(NamedTuple):
    index: int
    """Position of the token in the original argument list."""
    text: str


class Comparison(Enum):
    """
    How command names are compared by the match predicates.
    """

    ORDINAL = "ordinal"
    IGNORE_CASE = "ignore-case"

    def equals(self, lhs: str, rhs: str) -> bool:
        if self == Comparison.IGNORE_CASE:
            return lhs.casefold() == rhs.casefold()
        return lhs == rhs


def _decodePositionals(values: list) -> list[Positional]:
    return [Positional(int(index), str(text)) for index, text in values]


@dt.dataclass
class ParseResult(DataClassJsonMixin):
    """
    The tokens of an argument list sorted into options, positionals and
    passed through arguments.

    Two results are equal when they hold the same option names with the same
    value lists, the same positionals and the same pass through tail.
    """

    options: dict[str, list[Value]] = dt.field(default_factory=dict)
    """Option name to one value per occurrence, in the order they appeared."""
    positionals: list[Positional] = dt.field(
        default_factory=list, metadata=config(decoder=_decodePositionals)
    )
    """Tokens that are not options, with their original index."""
    passThrough: list[str] = dt.field(default_factory=list)
    """Tokens after the pass through marker, untouched."""

    def addOption(self, name: str, value: Value):
        self.options.setdefault(name, []).append(value)

    def _matches(
        self, command: Optional[list[str]], comparison: Comparison, exact: bool
    ) -> bool:
        if command is None:
            raise ValueError("Expected a command to match, got None")

        if exact and len(command) != len(self.positionals):
            return False

        if len(command) > len(self.positionals):
            return False

        for expected, positional in zip(command, self.positionals):
            if not comparison.equals(expected, positional.text):
                return False
        return True

    def matchesCommand(
        self, command: list[str], comparison: Comparison = Comparison.ORDINAL
    ) -> bool:
        """
        Checks if the positionals are exactly `command`.

        Raises:
            ValueError: If `command` is None.
        """
        return self._matches(command, comparison, True)

    def matchesCommandAtStart(
        self, command: list[str], comparison: Comparison = Comparison.ORDINAL
    ) -> bool:
        """
        Checks if the positionals start with `command`. An empty command always matches.

        Raises:
            ValueError: If `command` is None.
        """
        return self._matches(command, comparison, False)

    def toDisplayString(self) -> str:
        """
        Renders the options as `--name value` (or `--name` when the value is
        empty or missing) followed by the positionals. Meant for tracing, the
        output can't always be parsed back to the same result.
        """
        parts: list[str] = []
        for name, values in self.options.items():
            for value in values:
                if value:
                    parts.append(f"--{name} {value}")
                else:
                    parts.append(f"--{name}")
        for positional in self.positionals:
            parts.append(positional.text)
        return " ".join(parts)

    def __str__(self) -> str:
        return self.toDisplayString()

    # --- Consuming ---------------------------------------------------------- #

    def consumePrefix(self, prefix: str) -> dict[str, list[Value]]:
        result: dict[str, list[Value]] = {}
        for key in list(self.options.keys()):
            if key.startswith(prefix):
                result[key[len(prefix) :]] = self.options.pop(key)
        return result

    def consumeOpt(self, key: str) -> list[Value]:
        return self.options.pop(key, [])

    def tryConsumeOpt(self, key: str) -> list[Value] | None:
        return self.options.pop(key, None)

    def consumeFlag(self, key: str) -> bool:
        """
        Removes the option `key` and reads it as a switch. The last occurrence
        wins; an occurrence without a value turns the switch on.

        Raises:
            ValueError: If the value is not a yes/no word.
        """
        values = self.consumeOpt(key)
        if len(values) == 0:
            return False

        value = values[-1]
        if value is None or value in _TRUE:
            return True
        elif value in _FALSE:
            return False
        raise ValueError(f"Invalid value '{value}' for switch '{key}'")

    def consumeArg(self) -> str | None:
        if len(self.positionals) == 0:
            return None

        first = self.positionals[0]
        del self.positionals[0]
        return first.text
