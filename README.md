# dotsym

`dotsym` puts your dotfiles in place by creating symbolic links. The links to
make are declared in a plain org-mode table, called `DOTS` by default.

## Installation

```
pip install .
```

## The declaration file

Each table row has a name, a source path, a destination path and an operation:

```
| Name   | Source        | Destination        | Operation |
|--------+---------------+--------------------+-----------|
| bash   | bash/.bashrc  | .bashrc            | symfile   |
| nvim   | nvim          | .config/nvim       | symdir    |
| old    | legacy/thing  | .thing             | ignore    |
```

- Each line is split on `|`. Lines with fewer than four `|` characters are
  skipped; otherwise the second to fifth fields are the name, source,
  destination and operation, with surrounding spaces removed.
- Sources are joined to the source prefix, which defaults to the current
  directory.
- Destinations are joined to the destination prefix, which defaults to your
  home directory. One trailing `/` is dropped from prefixes and destinations.
- The operation is one of `symfile`, `symdir` or `ignore`, in any case.
  A `symfile` source must be an existing file and a `symdir` source an
  existing directory. An `ignore` row is exempt from the source check but is
  still linked. Any other operation is an error.

A header row is read like any other row, so when the file starts with a header
row and its separator line, pass `--headers` to skip the first two lines.
Error messages give line numbers counted from the top of the file when
`--headers` is used.

## Usage

```
dotsym [-V] [-f] [-j] [--source-prefix DIR] [--dest-prefix DIR]
       [-t {org,csv}] [-d FILE] [-u URL]
```

| Option                    | Meaning                                          |
|---------------------------|--------------------------------------------------|
| `-V`, `--version`         | Print the version and exit.                      |
| `-f`, `--force`           | Remove anything already at a destination first.  |
| `-j`, `--headers`         | Skip the first two lines of the file.            |
| `--source-prefix DIR`     | Prefix for source paths (default: current dir).  |
| `--dest-prefix DIR`       | Prefix for destinations (default: home dir).     |
| `-t`, `--file-format FMT` | `org` (default) or `csv`.                        |
| `-d`, `--dots FILE`       | Declaration file (default: `DOTS`).              |
| `-u`, `--url URL`         | Experimental; accepted but not used.             |

Every row is checked before any link is made. If a row is wrong, each problem
is printed to standard error with its file and line, and `dotsym` exits with
status 1 without creating any link. A missing declaration file also gives
status 1. Otherwise, for each row the missing parent directories of the
destination are created and the link is made. With `--force`, an existing
file, directory or symbolic link at the destination is removed first. A link
that cannot be made is reported on standard error, and the remaining rows are
still processed. Progress is printed on standard output as `[DEBUG]` and
`[LOG]` lines.

## Use from Python

```python
from dotsym.dotfiles import Dots, Flags

flags = Flags.build("org", headers=True, force=False,
                    source_prefix="/srv/dotfiles", destination_prefix="/home/me")
dots = Dots(flags)
dots.parse_file("DOTS")
dots.verify()      # raises DotfilesError if any row is invalid
dots.execute()
```

`Dots.errors()` yields the problem messages without printing or raising.
A `Dots` can be iterated over for its `Dot` entries, has a length, and its
string form lists one entry per line. `Dot.execute(flags)` links a single
entry and raises `DotfilesError` if the link cannot be made.

## What it does not do

- The `csv` format can be selected, but reading a file in it fails with an
  error; only org tables are read.
- The `--url` option does not fetch or clone anything.
- Nothing is ever unlinked or restored: there is no uninstall or status
  command.