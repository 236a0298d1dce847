"""Reading and writing numeric matrices as comma-separated text."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def _parse_cell(cell: str) -> float:
    """Parse the leading number of a cell; trailing text is ignored."""
    match = _LEADING_NUMBER.match(cell)
    if match is None:
        raise ValueError(f"not a number: {cell!r}")
    return float(match.group(1))


def read_csv(path: PathType) -> list[list[float]]:
    """Read a CSV file into a list of rows, skipping empty cells and rows."""
    with open(path, encoding="utf-8") as handle:
        matrix = []
        for line in handle:
            row = [_parse_cell(cell) for cell in line.rstrip("\n").split(",") if cell]
            if row:
                matrix.append(row)
    return matrix


def write_csv(path: PathType, data: Iterable[Iterable[float]]) -> None:
    """Write rows of numbers to a CSV file, six significant digits each."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for row in data:
            handle.write(",".join(f"{float(value):g}" for value in row))
            handle.write("\n")