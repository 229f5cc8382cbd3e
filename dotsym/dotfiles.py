"""Parsing, checking and linking of dotfile declarations."""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator


class DotfilesError(Exception):
    """Raised when a dotfiles declaration cannot be read, checked or applied."""


class Op(Enum):
    """What to do with one declared dotfile."""

    SYMFILE = "Symfile"
    SYMDIR = "Symdir"
    IGNORE = "Ignore"
    INVALID = "Invalid"


class FileFormat(Enum):
    """Formats a declaration file can be written in."""

    ORG_TABLE = "org"
    CSV = "csv"


def parse_format(text: str) -> FileFormat:
    """Return the file format named by ``text``."""
    try:
        return FileFormat(text)
    except ValueError:
        raise DotfilesError(f"Invalid format {text}.") from None


_OPS = {
    "symfile": Op.SYMFILE,
    "symdir": Op.SYMDIR,
    "ignore": Op.IGNORE,
}


def parse_op(text: str) -> Op:
    """Return the operation named by ``text``, case-insensitively; unknown names are invalid."""
    return _OPS.get(text.strip().lower(), Op.INVALID)


def strip_dir(path: str) -> str:
    """Drop one trailing slash, unless the path is just that slash."""
    if path.endswith("/") and len(path) > 1:
        return path[:-1]
    return path


def format_error(filename: str, line: int, name: str, message: str) -> str:
    """Format a diagnostic pointing at a line of the declaration file."""
    return f"./{filename}:{line}:0 -> Dotfile `{name}`\n\t{message}"


@dataclass(frozen=True)
class Flags:
    """Settings that control how declarations are read and applied."""

    file_format: FileFormat
    headers: bool
    force: bool
    source_prefix: str
    destination_prefix: str

    @classmethod
    def build(
        cls,
        file_format: str,
        headers: bool,
        force: bool,
        source_prefix: str,
        destination_prefix: str,
    ) -> Flags:
        """Build flags from raw option values."""
        return cls(
            file_format=parse_format(file_format),
            headers=headers,
            force=force,
            source_prefix=strip_dir(source_prefix),
            destination_prefix=strip_dir(destination_prefix),
        )


@dataclass
class Dot:
    """One declared link from a source path to a destination path."""

    line: int
    name: str
    source: str
    dest: str
    operation: Op

    @classmethod
    def from_fields(cls, line: int, name: str, source: str, dest: str, op: str) -> Dot:
        """Build a dot from the raw fields of a declaration row."""
        return cls(
            line=line,
            name=name.strip(),
            source=source.strip(),
            dest=strip_dir(dest.strip()),
            operation=parse_op(op),
        )

    def __str__(self) -> str:
        return (
            f"[{self.name}:{self.line}] {self.source} -> {self.dest} "
            f"| {self.operation.value}"
        )

    def execute(self, flags: Flags) -> None:
        """Create the symbolic link, replacing an existing destination when forced."""
        dest_path = Path(self.dest)
        try:
            dest_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass

        print(f"[DEBUG]: Destination path before executing is {dest_path}")
        print(f"[DEBUG]: Destination path exists? {str(dest_path.exists()).lower()}")

        if flags.force and dest_path.exists():
            if dest_path.is_symlink():
                dest_path.unlink()
            elif dest_path.is_dir():
                shutil.rmtree(dest_path)
            elif dest_path.is_file():
                dest_path.unlink()
            else:
                raise DotfilesError(
                    "Path can only be either a file or directory (or symlink): "
                    f"{dest_path}"
                )

        try:
            os.symlink(
                self.source,
                self.dest,
                target_is_directory=self.operation is Op.SYMDIR,
            )
        except OSError as err:
            message = (
                f"Error {err} while symlinking {self.source} to {self.dest} "
                f"({self.operation.value})"
            )
            print(format_error("", self.line, self.name, message), file=sys.stderr)
            raise DotfilesError("Error while symlinking") from err
        print(f"[LOG] Source {self.source} to dest {self.dest}")


@dataclass
class Dots:
    """The dotfiles read from one declaration file."""

    flags: Flags
    filename: str = ""
    dotfiles: list[Dot] = field(default_factory=list)

    def __init__(self, flags: Flags) -> None:
        self.flags = flags
        self.filename = ""
        self.dotfiles = []

    def __iter__(self) -> Iterator[Dot]:
        return iter(self.dotfiles)

    def __len__(self) -> int:
        return len(self.dotfiles)

    def __str__(self) -> str:
        return "".join(f"{dot}\n" for dot in self.dotfiles)

    def parse_file(self, filename: str) -> None:
        """Read the declarations in ``filename`` and append them."""
        path = Path(filename)
        if not path.exists():
            raise DotfilesError(f"File {filename} does not exist.")
        contents = path.read_text()

        if self.flags.file_format is FileFormat.CSV:
            raise DotfilesError("ERROR: the csv format is not supported yet.")

        lines = contents.splitlines()
        if self.flags.headers:
            lines = lines[2:]
        for num, line in enumerate(lines):
            values = line.split("|")
            if len(values) < 5:
                continue
            source = f"{self.flags.source_prefix}/{values[2].strip()}"
            dest = f"{self.flags.destination_prefix}/{values[3].strip()}"
            self.dotfiles.append(Dot.from_fields(num, values[1], source, dest, values[4]))
        self.filename = filename

    def errors(self) -> Iterator[str]:
        """Yield one message for each declared dotfile that has problems."""
        offset = 3 if self.flags.headers else 1
        for dot in self.dotfiles:
            line = dot.line + offset
            messages = []
            source_path = Path(dot.source)
            if dot.operation is Op.SYMFILE and not source_path.is_file():
                messages.append(f"Path to the source file {dot.source} is not valid")
            elif dot.operation is Op.SYMDIR and not source_path.is_dir():
                messages.append(f"Path to the source directory {dot.source} is not valid")
            elif dot.operation is Op.INVALID:
                messages.append(
                    "Invalid operation. Only allowed `Symfile` or `Symdir` "
                    "for files or directories respectively"
                )

            dest_path = Path(dot.dest)
            if dest_path.parent == dest_path:
                messages.append(f"Path to destination {dot.dest} is not a valid")

            if messages:
                yield "".join(
                    format_error(self.filename, line, dot.name, message)
                    for message in messages
                )

    def verify(self) -> None:
        """Report every problem on stderr and raise if there was any."""
        found = False
        for error in self.errors():
            found = True
            print(f"ERROR: {error}", file=sys.stderr)
        if found:
            raise DotfilesError("Dotfiles contains errors.")

    def execute(self) -> None:
        """Link every dotfile, carrying on past the ones that fail."""
        for dot in self.dotfiles:
            try:
                dot.execute(self.flags)
            except DotfilesError:
                pass