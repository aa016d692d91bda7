"""Loading of accelerometer samples from CSV files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

from .policy import ExecutionPolicy

_MAX_LINE = 255

_NUMBER = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass
class AccelData:
    """Accelerometer samples split into x, y and z columns."""

    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)
    z: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.x)


def _leading_float(token: str | None) -> float:
    """Parse the longest numeric prefix of ``token``; 0.0 when there is none."""
    if token is None:
        return 0.0
    match = _NUMBER.match(token)
    return float(match.group()) if match else 0.0


def _parse_line(line: str) -> tuple[float, float, float]:
    tokens = [t for t in line[:_MAX_LINE].split(",") if t]
    values = tokens[1:4]
    values += [None] * (3 - len(values))
    x, y, z = (_leading_float(v) for v in values)
    return x, y, z


def load_data(
    filename: str | PathLike[str],
    policy: ExecutionPolicy = ExecutionPolicy.SEQUENTIAL,
) -> AccelData:
    """Read ``timestamp,x,y,z`` rows, skipping the header line.

    Only newline-terminated lines are read; a trailing unterminated line is ignored.
    Raises ``OSError`` if the file cannot be read and ``ValueError`` if it holds no lines.
    """
    with open(filename, "rb") as handle:
        content = handle.read().decode("latin-1")

    lines = content.split("\n")[:-1]
    if not lines:
        raise ValueError(f"File {filename} contains no lines")

    rows = policy.map(_parse_line, lines[1:])
    data = AccelData()
    for x, y, z in rows:
        data.x.append(x)
        data.y.append(y)
        data.z.append(z)
    return data