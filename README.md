# dirsnap

`dirsnap` walks directory trees and writes plain-text listings of what it
finds: one line per entry, `Director: <name>` for a subdirectory and
`Fisier: <name>` for anything else, descending into each subdirectory right
after its line. Entries appear in the order the operating system lists them.
A directory that cannot be opened is reported on standard error and skipped.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Snapshots of several directories

```
dirsnap -o SNAPSHOT_DIR -s SAFE_DIR DIR [DIR ...]
```

* `-o SNAPSHOT_DIR` is where the snapshots are written. It is created if it
  does not exist.
* `-s SAFE_DIR` is the safe directory. It is created if it does not exist.
* Every other argument is a directory to record. Each one is recorded in its
  own process, and its listing goes to `SNAPSHOT_DIR/SNAPSHOT<n>`, where
  `<n>` is the position of that directory on the command line (the first
  argument after the command name is position 1). The first line of a
  snapshot is `Director principal: <DIR>`.

Both `-o` and `-s` must be given, each followed by a value. At most nine
arguments are accepted after the command name; more than that is refused
with `Prea multe argumente`.

While walking, a regular file that has no permission bits at all is treated
as suspect: its mode is set to `rwxr--r--` and it is passed to
`verify_for_malicious.sh` from the current directory, run with `/bin/sh`.
Each process prints `Snapshot for <DIR> created successfully` when it is
done, and once a process has finished its process id and exit code are
reported.

## Saving and comparing versions interactively

```
dirsnap-lab DIR -o LISTING
```

The command prints the name of `LISTING`, opens it for appending and asks
for a choice:

* `1` appends the listing of `DIR` (the first argument that is not `-o` or
  its value) to `LISTING`, ending the version with a line `stop`.
* `2` reads the first two versions from `LISTING` and compares them line by
  line. For every differing line it prints `Fisierul s a modificat`, then
  prints each differing pair as `old <->` followed by `new`.

Any other answer ends the command without doing anything. At most ten
arguments are accepted.

## Using it from Python

```python
import io
from dirsnap.traverse import iter_entries, write_listing
from dirsnap.compare import split_versions, diff_versions

for entry in iter_entries("some/dir"):
    print(entry.line())

listing = io.StringIO()
count = write_listing(listing, "some/dir", None)

with open("LISTING", encoding="utf-8") as stream:
    first, second = split_versions(stream)
for difference in diff_versions(first, second):
    print(difference.index, difference.before, difference.after)
```

`dirsnap.compare.compare_versions` reads two versions from a stream and
writes the report described above; `dirsnap.labtool.save_version` appends a
listing and its `stop` line to a stream.

`dirsnap.project` offers the pieces of the snapshot command on their own:
`parse_options` (raising `ArgumentError` on a bad command line),
`is_suspect`, `scan_file` and `take_snapshot`.

## What it does not do

* `verify_for_malicious.sh` is not part of the package; suspect files can
  only be checked if such a script is present in the current directory.
* The safe directory is only created. Nothing is moved or copied into it.
* The snapshot command does not compare snapshots with earlier ones; only
  `dirsnap-lab` compares, and only the first two versions in its file.