"""Snapshot several directory trees in parallel and scan suspicious files."""

from __future__ import annotations

import contextlib
import multiprocessing
import os
import stat
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from dirsnap.traverse import Entry, write_listing

MAX_ARGUMENTS = 9
SHELL = "/bin/sh"
SCRIPT = "verify_for_malicious.sh"
SNAPSHOT_PREFIX = "SNAPSHOT"
SCAN_MODE = (
    stat.S_IRUSR | stat.S_IWUSR | stat.S_IXUSR | stat.S_IRGRP | stat.S_IROTH
)


class ArgumentError(ValueError):
    """The command line cannot be used."""


@dataclass(frozen=True)
class Options:
    """Parsed command line.

    ``targets`` pairs each directory to snapshot with its position on the
    command line, counting the program name as position 0.
    """

    output_dir: str
    safe_dir: str
    targets: tuple[tuple[int, str], ...]

    def snapshot_path(self, position: int) -> str:
        """Return the snapshot file for the target at ``position``."""
        return os.path.join(self.output_dir, f"{SNAPSHOT_PREFIX}{position}")


def _option_value(args: list[str], flag: str) -> tuple[int, str]:
    try:
        position = args.index(flag)
    except ValueError:
        raise ArgumentError(f"missing {flag} option") from None
    if position + 1 >= len(args):
        raise ArgumentError(f"{flag} needs a directory")
    return position, args[position + 1]


def parse_options(argv: Sequence[str]) -> Options:
    """Parse arguments (without the program name) into :class:`Options`."""
    args = list(argv)
    if len(args) > MAX_ARGUMENTS:
        raise ArgumentError("Prea multe argumente")
    out_pos, output_dir = _option_value(args, "-o")
    safe_pos, safe_dir = _option_value(args, "-s")
    reserved = {out_pos, out_pos + 1, safe_pos, safe_pos + 1}
    targets = tuple(
        (position + 1, arg)
        for position, arg in enumerate(args)
        if position not in reserved
    )
    return Options(output_dir, safe_dir, targets)


def is_suspect(path: str | os.PathLike[str]) -> bool:
    """Return True for a regular file that has no permission bits at all."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return mode == stat.S_IFREG


def scan_file(path: str | os.PathLike[str], script: str = SCRIPT) -> int:
    """Make ``path`` readable, run the check script on it and return its exit code.

    Raises :class:`OSError` if the permissions cannot be changed.
    """
    os.chmod(path, SCAN_MODE)
    result = subprocess.run([SHELL, script, os.fspath(path)], check=False)
    return result.returncode


def take_snapshot(
    root: str, snapshot_path: str | os.PathLike[str], script: str = SCRIPT
) -> int:
    """Write the listing of ``root`` to ``snapshot_path``; return the number of entries.

    Every suspicious file met on the way is handed to :func:`scan_file`.
    """

    def check(entry: Entry) -> None:
        if is_suspect(entry.path):
            scan_file(entry.path, script)

    with open(snapshot_path, "w", encoding="utf-8") as stream:
        stream.write(f"Director principal: {root}\n")
        return write_listing(stream, root, check)


def _snapshot_worker(root: str, snapshot_path: str, script: str) -> None:
    try:
        take_snapshot(root, snapshot_path, script)
    except OSError as exc:
        print(f"Eroare la deschidere: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Snapshot for {root} created successfully", flush=True)
    sys.exit(0)


def _ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        with contextlib.suppress(OSError):
            os.mkdir(path, 0o777)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_options(args)
    except ArgumentError as exc:
        print(exc)
        return 1

    _ensure_dir(options.output_dir)
    _ensure_dir(options.safe_dir)

    script = os.path.abspath(SCRIPT)
    workers = []
    for position, root in options.targets:
        worker = multiprocessing.Process(
            target=_snapshot_worker,
            args=(root, options.snapshot_path(position), script),
        )
        worker.start()
        workers.append(worker)

    sys.stdout.flush()
    for worker in workers:
        worker.join()
        print(
            f" Procesul cu PID-ul : {worker.pid} s a incheiat cu codul: {worker.exitcode}"
        )
    return 0