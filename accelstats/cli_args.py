"""Minimal command-line argument parser and a timing helper."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable


class ArgumentError(RuntimeError):
    """Raised when command-line arguments are invalid."""


@dataclass
class Argument:
    """A registered command-line option."""

    name: str
    help: str = ""
    required: bool = False
    has_value: bool = True
    default_value: str = ""
    value: str = ""

    def __post_init__(self) -> None:
        if not self.value:
            self.value = self.default_value


@dataclass
class MutuallyExclusiveGroup:
    """Names of options that may not be given together."""

    arguments: list[str] = field(default_factory=list)

    def add_argument(self, name: str) -> None:
        self.arguments.append(name)


class ArgParser:
    """Parser for ``--name value`` and ``--flag`` style options."""

    def __init__(self, usage: str = "") -> None:
        self.usage = usage
        self.arguments: dict[str, Argument] = {}
        self._groups: list[MutuallyExclusiveGroup] = []

    def add_argument(
        self,
        name: str,
        help: str = "",
        required: bool = False,
        has_value: bool = True,
        default_value: str = "",
    ) -> None:
        self.arguments[name] = Argument(name, help, required, has_value, default_value)

    def add_mutually_exclusive_group(self) -> MutuallyExclusiveGroup:
        group = MutuallyExclusiveGroup()
        self._groups.append(group)
        return group

    def parse_args(self, argv: list[str]) -> None:
        """Parse ``argv`` (without the program name), storing values on the arguments."""
        parsed: set[str] = set()
        tokens = iter(argv)
        for arg in tokens:
            if arg == "--help":
                self.print_help()
            option = self.arguments.get(arg)
            if option is None:
                raise ArgumentError(f"Unknown argument: {arg}")
            parsed.add(arg)
            if option.has_value:
                try:
                    option.value = next(tokens)
                except StopIteration:
                    raise ArgumentError(f"Argument {arg} requires a value.") from None
            else:
                option.value = "true"

        for name, option in self.arguments.items():
            if option.required and name not in parsed:
                raise ArgumentError(f"Missing required argument: {name}")

        for group in self._groups:
            if sum(1 for name in group.arguments if name in parsed) > 1:
                names = ", ".join(group.arguments)
                raise ArgumentError(
                    f"Mutually exclusive arguments {names} cannot be used together."
                )

    def get(self, name: str) -> str:
        """Return the current value of option ``name``."""
        try:
            return self.arguments[name].value
        except KeyError:
            raise ArgumentError(f"Argument {name} not found.") from None

    def help_text(self) -> str:
        lines = [f"Usage: {self.usage}", "List of arguments:"]
        for name, option in self.arguments.items():
            default = f" (default: {option.default_value})" if option.default_value else ""
            required = " [required]" if option.required else ""
            lines.append(f"{name}: {option.help}{default}{required}")
        return "\n".join(lines) + "\n"

    def print_help(self) -> None:
        sys.stderr.write(self.help_text())


def measure_time(func: Callable[..., Any], *args: Any, **kwargs: Any) -> tuple[float, Any]:
    """Call ``func`` and return ``(elapsed_seconds, result)``."""
    start = time.perf_counter()
    result = func(*args, **kwargs)
    return time.perf_counter() - start, result