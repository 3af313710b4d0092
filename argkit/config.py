import os
import dataclasses as dt

from dataclasses_json import DataClassJsonMixin


def _slashDefault() -> bool:
    # on unix a token starting with / is usually a path
    return os.name == "nt"


@dt.dataclass(frozen=True)
class Config(DataClassJsonMixin):
    """
    Behavior switches for the tokenizer. A config is never modified by a parse.
    """

    ignoreCase: bool = True
    """Convert option names to lower case."""
    useDashOptions: bool = True
    """Recognize `-` and `--` as option markers."""
    useSlashOptions: bool = dt.field(default_factory=_slashDefault)
    """Recognize `/` as an option marker."""
    useSingleDashFlags: bool = False
    """Split `-abc` into the flags `a`, `b` and `c`. Requires `useDashOptions`."""
    negateFlags: bool = False
    """Split `-!abc` into `!a`, `!b` and `!c` instead of `!`, `a`, `b` and `c`. Requires `useSingleDashFlags`."""
    trimIndicator: bool = True
    """Strip `-`, `--` or `/` from option names. The negation prefix is kept."""
    enablePassThrough: bool = False
    """Stop at an option with an empty name (`--`) and pass everything after it through."""

    def parse(self, args: list[str]):
        from .loader import parse

        return parse(args, self)
