from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .exceptions import UsageError

FORMAT_ARGUMENTS = (
    "indent",
    "allman",
    "linebreaks",
    "semicolons",
    "commas",
    "comments",
    "ranges",
    "empty",
    "trimwhitespace",
    "insertlines",
    "removelines",
    "header",
    "ifdef",
    "hexliterals",
    "experimental",
    "fragment",
)

COMMAND_LINE_ARGUMENTS = ("output", "inferoptions") + FORMAT_ARGUMENTS + ("cache", "help", "version")


@dataclass(frozen=True)
class RawArguments:
    """Flag values by name plus positional inputs, as captured from the command line."""

    flags: Mapping[str, str] = field(default_factory=dict)
    inputs: tuple[str, ...] = ()

    def __post_init__(self):
        unknown = sorted(set(self.flags) - set(COMMAND_LINE_ARGUMENTS))
        if unknown:
            raise UsageError(f"unknown option: --{unknown[0]}")
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))
        object.__setattr__(self, "inputs", tuple(self.inputs))

    @classmethod
    def from_params(cls, inputs: Iterable[str] | None, params: dict[str, object]) -> "RawArguments":
        """Build from parsed CLI parameters. None means absent; True marks a bare flag."""
        flags = {}
        for key, value in params.items():
            if value is None or value is False:
                continue
            flags[key] = "" if value is True else str(value)
        return cls(flags=flags, inputs=tuple(inputs or ()))

    def get(self, key: str) -> str | None:
        return self.flags.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.flags

    def positional(self, position: int) -> str | None:
        """Input path at a 1-based position, or None past the end."""
        if 1 <= position <= len(self.inputs):
            return self.inputs[position - 1]
        return None
