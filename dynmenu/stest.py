"""Filter a list of files by their properties."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["UsageError", "Criteria", "parse_args", "select", "main"]

_FLAGS = "abcdefghlpqrsuvwx"
USAGE = "usage: stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"


class UsageError(Exception):
    """The command line could not be understood."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Criteria:
    """Tests a file must pass; ``newer`` and ``older`` are mtimes in seconds."""

    flags: frozenset[str] = frozenset()
    newer: int | None = None
    older: int | None = None

    def _holds(self, path: str, name: str) -> bool:
        flags = self.flags
        try:
            st = os.stat(path)
        except (OSError, ValueError):
            return False
        mode = st.st_mode
        mtime = int(st.st_mtime)
        return (
            ("a" in flags or not name.startswith("."))
            and ("b" not in flags or stat.S_ISBLK(mode))
            and ("c" not in flags or stat.S_ISCHR(mode))
            and ("d" not in flags or stat.S_ISDIR(mode))
            and ("e" not in flags or os.access(path, os.F_OK))
            and ("f" not in flags or stat.S_ISREG(mode))
            and ("g" not in flags or bool(mode & stat.S_ISGID))
            and ("h" not in flags or os.path.islink(path))
            and (self.newer is None or mtime > self.newer)
            and (self.older is None or mtime < self.older)
            and ("p" not in flags or stat.S_ISFIFO(mode))
            and ("r" not in flags or os.access(path, os.R_OK))
            and ("s" not in flags or st.st_size > 0)
            and ("u" not in flags or bool(mode & stat.S_ISUID))
            and ("w" not in flags or os.access(path, os.W_OK))
            and ("x" not in flags or os.access(path, os.X_OK))
        )

    def test(self, path: str, name: str) -> bool:
        """Return whether the file at ``path``, shown as ``name``, is selected."""
        return self._holds(path, name) != ("v" in self.flags)


def _mtime(path: str) -> int | None:
    try:
        return int(os.stat(path).st_mtime)
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return None


def parse_args(argv: Iterable[str]) -> tuple[Criteria, list[str]]:
    """Parse options; return the criteria and the remaining operands."""
    args = list(argv)
    flags: set[str] = set()
    newer: int | None = None
    older: int | None = None
    i = 0
    while i < len(args):
        arg = args[i]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        if arg == "--":
            i += 1
            break
        for j, opt in enumerate(arg[1:], start=1):
            if opt in "no":
                rest = arg[j + 1 :]
                if rest:
                    value = rest
                elif i + 1 < len(args):
                    i += 1
                    value = args[i]
                else:
                    raise UsageError()
                if opt == "n":
                    newer = _mtime(value)
                else:
                    older = _mtime(value)
                break
            if opt not in _FLAGS:
                raise UsageError()
            flags.add(opt)
        i += 1
    return Criteria(frozenset(flags), newer, older), args[i:]


def _directory_entries(path: str) -> list[str] | None:
    try:
        names = os.listdir(path)
    except OSError:
        return None
    return [".", "..", *sorted(names)]


def select(criteria: Criteria, paths: Iterable[str]) -> Iterator[str]:
    """Yield the names of the files among ``paths`` that pass ``criteria``.

    With the ``l`` flag a directory stands for its entries.
    """
    for path in paths:
        entries = _directory_entries(path) if "l" in criteria.flags else None
        if entries is None:
            if criteria.test(path, path):
                yield path
            continue
        for name in entries:
            if criteria.test(f"{path}/{name}", name):
                yield name


def _stdin_lines() -> Iterator[str]:
    for line in sys.stdin:
        yield line[:-1] if line.endswith("\n") else line


def main(argv: list[str] | None = None) -> int:
    """Print the selected files; return 0 if any matched, 1 if none, 2 on misuse."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        criteria, paths = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 2
    if paths:
        names: Iterator[str] = select(criteria, paths)
    else:
        names = (line for line in _stdin_lines() if criteria.test(line, line))
    matched = False
    for name in names:
        if "q" in criteria.flags:
            return 0
        matched = True
        print(name)
    return 0 if matched else 1


if __name__ == "__main__":
    sys.exit(main())