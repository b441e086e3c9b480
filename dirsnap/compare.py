"""Comparison of two saved listing versions."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import takewhile
from typing import TextIO

STOP_MARK = "stop"


@dataclass(frozen=True)
class Difference:
    """A line position at which two versions differ."""

    index: int
    before: str
    after: str


def _not_stop(line: str) -> bool:
    return STOP_MARK not in line


def split_versions(lines: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split lines into the first two versions, each ended by a line holding ``stop``."""
    remaining = iter(lines)
    first = list(takewhile(_not_stop, remaining))
    second = list(takewhile(_not_stop, remaining))
    return first, second


def diff_versions(first: list[str], second: list[str]) -> list[Difference]:
    """Compare the versions line by line over the length of the second plus one.

    Missing lines count as empty.
    """
    differences = []
    for index in range(len(second) + 1):
        before = first[index] if index < len(first) else ""
        after = second[index] if index < len(second) else ""
        if before != after:
            differences.append(Difference(index, before, after))
    return differences


def compare_versions(stream: TextIO, out: TextIO | None = None) -> list[Difference]:
    """Read two versions from ``stream``, report their differences and return them."""
    out = sys.stdout if out is None else out
    differences = diff_versions(*split_versions(stream))
    for _ in differences:
        out.write("Fisierul s a modificat\n")
    for difference in differences:
        out.write(f"{difference.before} <->\n{difference.after}\n")
    return differences