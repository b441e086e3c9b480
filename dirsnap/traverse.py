"""Recursive directory listings in the snapshot text format."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TextIO


class EntryKind(Enum):
    """Kind of a listed directory entry; the value is its line prefix."""

    DIRECTORY = "Director"
    FILE = "Fisier"


@dataclass(frozen=True)
class Entry:
    """One entry met while walking a directory tree."""

    kind: EntryKind
    name: str
    path: str

    def line(self) -> str:
        """Return the listing line for this entry, without a newline."""
        return f"{self.kind.value}: {self.name}"


def iter_entries(root: str | os.PathLike[str]) -> Iterator[Entry]:
    """Yield every entry below ``root``, each directory followed by its contents.

    Entries come in the order the operating system lists them. A directory
    that cannot be opened is reported on standard error and skipped.
    """
    root = os.fspath(root)
    try:
        with os.scandir(root) as listing:
            children = list(listing)
    except OSError as exc:
        print(f"Eroare la opendir: {exc}", file=sys.stderr)
        return

    for child in children:
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if is_dir:
            yield Entry(EntryKind.DIRECTORY, child.name, child.path)
            yield from iter_entries(child.path)
        else:
            yield Entry(EntryKind.FILE, child.name, child.path)


def write_listing(
    stream: TextIO,
    root: str | os.PathLike[str],
    on_file: Callable[[Entry], None] | None = None,
) -> int:
    """Write the listing of ``root`` to ``stream`` and return the number of lines.

    ``on_file`` is called for each non-directory entry after its line is written.
    """
    count = 0
    for entry in iter_entries(root):
        stream.write(entry.line() + "\n")
        count += 1
        if on_file is not None and entry.kind is EntryKind.FILE:
            on_file(entry)
    return count