"""Interactive tool that saves directory listings and compares saved versions."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

from dirsnap.compare import STOP_MARK, compare_versions
from dirsnap.traverse import write_listing

MAX_ARGUMENTS = 10
PROMPT = (
    "Daca vrei sa salvezi o versiune de fisiere , apasa tasta 1. "
    "Daca vrei sa compari , apasa tasta 2"
)


class Mode(Enum):
    """What the user chose to do."""

    SAVE = 1
    COMPARE = 2


def output_path(argv: Sequence[str]) -> str:
    """Return the argument that follows ``-o``."""
    try:
        position = list(argv).index("-o")
    except ValueError:
        raise ValueError("missing -o option") from None
    if position + 1 >= len(argv):
        raise ValueError("-o needs a file name")
    return argv[position + 1]


def _root_dir(argv: Sequence[str]) -> str:
    skip_next = False
    for arg in argv:
        if skip_next:
            skip_next = False
            continue
        if arg == "-o":
            skip_next = True
            continue
        return arg
    raise ValueError("no directory given")


def save_version(stream: TextIO, root: str | os.PathLike[str]) -> int:
    """Append the listing of ``root`` and a stop mark; return the number of entries."""
    count = write_listing(stream, root)
    stream.write(STOP_MARK + "\n")
    return count


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > MAX_ARGUMENTS:
        print("Prea multe argumente")
        return 1
    try:
        path = output_path(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(path)
    try:
        stream = open(path, "a+", encoding="utf-8")
    except OSError:
        print("Eroare la deschidere de fisier")
        return 1

    with stream:
        print(PROMPT)
        try:
            mode = Mode(int(input().strip()))
        except (ValueError, EOFError):
            return 0
        if mode is Mode.SAVE:
            try:
                root = _root_dir(args)
            except ValueError as exc:
                print(exc, file=sys.stderr)
                return 1
            save_version(stream, root)
        else:
            stream.seek(0)
            compare_versions(stream)
    return 0