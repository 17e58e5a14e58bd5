"""Command line and terminal front end of the menu."""

from __future__ import annotations

import os
import re
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

from .config import Config, Scheme
from .editor import MAX_BYTES, LineEditor
from .matching import Item, Matcher
from .menu import Menu
from .utf8 import decode
from .util import FatalError, die

__all__ = ["VERSION", "USAGE", "Options", "UsageError", "parse_args", "read_items", "main"]

VERSION = "4.9"
USAGE = (
    "usage: dynmenu [-bfivx] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "               [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)

_RESET = "\x1b[0m"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """The command line could not be understood."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


@dataclass
class Options:
    """Everything the command line sets."""

    config: Config = field(default_factory=Config)
    fast: bool = False
    case_insensitive: bool = False
    monitor: int = -1
    embed: str | None = None
    show_version: bool = False


def _atoi(s: str) -> int:
    """Read a leading integer the lenient way; anything else counts as 0."""
    found = _INT_PREFIX.match(s)
    return int(found.group(1)) if found else 0


def parse_args(argv: Iterable[str]) -> Options:
    """Parse the command-line options (without the program name)."""
    args = deque(argv)
    options = Options()
    cfg = options.config
    while args:
        arg = args.popleft()
        if arg == "-v":
            options.show_version = True
            return options
        if arg == "-b":
            cfg.topbar = False
        elif arg == "-f":
            options.fast = True
        elif arg == "-i":
            options.case_insensitive = True
        elif arg == "-x":
            cfg.use_prefix = not cfg.use_prefix
        elif not args:
            raise UsageError()
        elif arg == "-l":
            cfg.lines = _atoi(args.popleft())
        elif arg == "-m":
            options.monitor = _atoi(args.popleft())
        elif arg == "-p":
            cfg.prompt = args.popleft()
        elif arg == "-fn":
            cfg.fonts[0] = args.popleft()
        elif arg == "-nb":
            cfg.set_color(Scheme.NORM, "bg", args.popleft())
        elif arg == "-nf":
            cfg.set_color(Scheme.NORM, "fg", args.popleft())
        elif arg == "-sb":
            cfg.set_color(Scheme.SEL, "bg", args.popleft())
        elif arg == "-sf":
            cfg.set_color(Scheme.SEL, "fg", args.popleft())
        elif arg == "-w":
            options.embed = args.popleft()
        else:
            raise UsageError()
    return options


def read_items(stream: Iterable[str] | Iterable[bytes] | TextIO | BinaryIO) -> list[Item]:
    """Read one item per line; overlong lines are split into several items."""
    items: list[Item] = []
    for line in stream:
        data = line.encode("utf-8", "surrogateescape") if isinstance(line, str) else line
        for start in range(0, len(data), MAX_BYTES):
            chunk = data[start : start + MAX_BYTES]
            text = chunk.split(b"\n", 1)[0].decode("utf-8", "replace")
            items.append(Item(text))
    return items


@dataclass(frozen=True)
class _Key:
    name: str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False


_CSI_FINAL = {"A": "Up", "B": "Down", "C": "Right", "D": "Left", "H": "Home", "F": "End"}
_CSI_TILDE = {
    "1": "Home",
    "7": "Home",
    "4": "End",
    "8": "End",
    "3": "Delete",
    "5": "Prior",
    "6": "Next",
}


def _read_char(data: bytes, pos: int) -> tuple[str, int]:
    codepoint, consumed = decode(data[pos:])
    if consumed == 0:
        consumed = len(data) - pos
    return chr(codepoint), consumed


def _parse_keys(data: bytes) -> Iterator[_Key]:
    """Turn raw terminal input into key presses."""
    pos = 0
    while pos < len(data):
        byte = data[pos]
        if byte == 0x1B:
            if pos + 1 == len(data):
                yield _Key("Escape")
                return
            if data[pos + 1] in b"[O":
                end = pos + 2
                while end < len(data) and 0x30 <= data[end] <= 0x3F:
                    end += 1
                if end >= len(data) or not 0x40 <= data[end] <= 0x7E:
                    yield _Key(chr(data[pos + 1]), alt=True)
                    pos += 2
                    continue
                params = data[pos + 2 : end].decode("ascii").split(";")
                final = chr(data[end])
                name = _CSI_TILDE.get(params[0]) if final == "~" else _CSI_FINAL.get(final)
                modifier = _atoi(params[1]) - 1 if len(params) > 1 else 0
                if name is not None:
                    yield _Key(
                        name,
                        ctrl=bool(modifier & 4),
                        alt=bool(modifier & 2),
                        shift=bool(modifier & 1),
                    )
                pos = end + 1
                continue
            char, consumed = _read_char(data, pos + 1)
            yield _Key(char, alt=True)
            pos += 1 + consumed
        elif byte in (0x0D, 0x0A):
            yield _Key("Return")
            pos += 1
        elif byte == 0x09:
            yield _Key("Tab")
            pos += 1
        elif byte == 0x7F:
            yield _Key("BackSpace")
            pos += 1
        elif 0x01 <= byte <= 0x1A:
            yield _Key(chr(byte + 0x60), ctrl=True)
            pos += 1
        elif byte < 0x20:
            pos += 1
        else:
            char, consumed = _read_char(data, pos)
            yield _Key(char)
            pos += consumed


def _measure(text: str) -> int:
    return len(text) + 2


def _fit(text: str, width: int) -> str:
    width = max(width, 0)
    return text[:width].ljust(width)


def _paint(text: str, sgr: str) -> str:
    return f"{sgr}{text}{_RESET}" if sgr and text else text


def _hex_rgb(color: str) -> tuple[int, int, int] | None:
    digits = color[1:]
    if not color.startswith("#") or len(digits) not in (3, 6):
        return None
    try:
        value = int(digits, 16)
    except ValueError:
        return None
    if len(digits) == 3:
        return tuple(((value >> shift) & 0xF) * 17 for shift in (8, 4, 0))  # type: ignore[return-value]
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


_FALLBACK_STYLE = {Scheme.NORM: "", Scheme.SEL: "\x1b[7m", Scheme.OUT: "\x1b[4m"}


def _style(config: Config, scheme: Scheme) -> str:
    fg = _hex_rgb(config.color(scheme, "fg"))
    bg = _hex_rgb(config.color(scheme, "bg"))
    if fg is None or bg is None:
        return _FALLBACK_STYLE[scheme]
    return "\x1b[38;2;{};{};{}m\x1b[48;2;{};{};{}m".format(*fg, *bg)


_CTRL_MAP = {
    "a": "Home",
    "b": "Left",
    "c": "Escape",
    "d": "Delete",
    "e": "End",
    "f": "Right",
    "g": "Escape",
    "h": "BackSpace",
    "i": "Tab",
    "n": "Down",
    "p": "Up",
}
_ALT_MAP = {"g": "Home", "G": "End", "h": "Up", "j": "Next", "k": "Prior", "l": "Down"}
_NAMES = frozenset(
    {
        "Return",
        "KP_Enter",
        "Tab",
        "BackSpace",
        "Delete",
        "Left",
        "Right",
        "Up",
        "Down",
        "Home",
        "End",
        "Next",
        "Prior",
        "Escape",
    }
)


class _Session:
    """State of one menu run: the input field, the matches and the output."""

    def __init__(self, options: Options, items: list[Item], columns: int = 80) -> None:
        cfg = options.config
        self.options = options
        self.columns = columns
        # A negative count wraps around to a huge one and is then capped.
        lines = len(items) if cfg.lines < 0 else min(cfg.lines, len(items))
        self.prompt_width = len(cfg.prompt) + 1 if cfg.prompt else 0
        widest = max((_measure(item.text) for item in items), default=0)
        self.input_width = min(widest, columns // 3)
        width = columns - (self.prompt_width + self.input_width + 2)
        matcher = Matcher(use_prefix=cfg.use_prefix, case_insensitive=options.case_insensitive)
        self.editor = LineEditor(delimiters=cfg.worddelimiters)
        self.menu = Menu(items, matcher, lines=lines, width=width, measure=_measure)
        self.printed: list[str] = []
        self.status: int | None = None

    def _rematch(self) -> None:
        self.menu.update(self.editor.text)

    def press(self, key: str, *, ctrl: bool = False, alt: bool = False, shift: bool = False) -> None:
        """Handle one key: a key name or a typed character."""
        if self.status is not None:
            return
        editor = self.editor
        if ctrl:
            if key in _CTRL_MAP:
                key = _CTRL_MAP[key]
            elif key in ("j", "J", "m", "M"):
                key, ctrl = "Return", False
            elif key == "k":
                editor.kill_right()
                self._rematch()
                return
            elif key == "u":
                editor.kill_left()
                self._rematch()
                return
            elif key == "w":
                if editor.kill_word():
                    self._rematch()
                return
            elif key == "Left":
                editor.move_word(-1)
                return
            elif key == "Right":
                editor.move_word(+1)
                return
            elif key == "[":
                self.status = 1
                return
            elif key not in ("Return", "KP_Enter"):
                return
        elif alt:
            if key == "b":
                editor.move_word(-1)
                return
            if key == "f":
                editor.move_word(+1)
                return
            if key not in _ALT_MAP:
                return
            key = _ALT_MAP[key]
        self._dispatch(key, ctrl, shift)

    def _dispatch(self, key: str, ctrl: bool, shift: bool) -> None:
        editor, menu = self.editor, self.menu
        at_end = editor.cursor == len(editor.text)
        if key == "Delete":
            if editor.delete():
                self._rematch()
        elif key == "BackSpace":
            if editor.backspace():
                self._rematch()
        elif key == "End":
            if not at_end:
                editor.end()
            else:
                menu.last()
        elif key == "Escape":
            self.status = 1
        elif key == "Home":
            if not menu.first():
                editor.home()
        elif key in ("Left", "Up"):
            if key == "Left":
                sel = menu.selection()
                first = sel is None or sel is menu.matches[0]
                if editor.cursor and (first or menu.lines > 0):
                    editor.move_left()
                    return
                if menu.lines > 0:
                    return
            menu.select_prev()
        elif key in ("Right", "Down"):
            if key == "Right":
                if not at_end:
                    editor.move_right()
                    return
                if menu.lines > 0:
                    return
            menu.select_next()
        elif key == "Next":
            menu.page_next()
        elif key == "Prior":
            menu.page_prev()
        elif key in ("Return", "KP_Enter"):
            sel = menu.selection()
            self.printed.append(sel.text if sel is not None and not shift else editor.text)
            if not ctrl:
                self.status = 0
            elif sel is not None:
                sel.out = True
        elif key == "Tab":
            editor.complete(menu.matches)
        elif key not in _NAMES and key and key.isprintable():
            if editor.insert(key):
                self._rematch()

    def _style_of(self, item: Item, styles: dict[Scheme, str]) -> str:
        if item is self.menu.selection():
            return styles[Scheme.SEL]
        return styles[Scheme.OUT] if item.out else styles[Scheme.NORM]

    def render(self, columns: int | None = None) -> tuple[list[str], int]:
        """Return the screen rows and the column of the text cursor."""
        if columns is None:
            columns = self.columns
        cfg = self.options.config
        menu, editor = self.menu, self.editor
        styles = {scheme: _style(cfg, scheme) for scheme in Scheme}
        x = self.prompt_width
        parts: list[str] = []
        if cfg.prompt:
            parts.append(_paint(_fit(cfg.prompt, x), styles[Scheme.SEL]))
        width = columns - x if menu.lines > 0 or not menu.matches else self.input_width
        width = max(width, 0)
        parts.append(_paint(_fit(editor.text, width), styles[Scheme.NORM]))
        assert editor.cursor is not None
        cursor_col = x + min(editor.cursor, max(width - 1, 0))
        rows: list[str] = []
        if menu.lines > 0:
            for item in menu.visible():
                cell = _fit(" " + item.text, columns - x)
                rows.append(" " * x + _paint(cell, self._style_of(item, styles)))
        elif menu.matches:
            pos = x + width
            parts.append("<" if menu.has_previous_page else " ")
            pos += 1
            for item in menu.visible():
                room = columns - pos - 1
                if room <= 0:
                    break
                cell = _fit(f" {item.text} ", min(_measure(item.text), room))
                parts.append(_paint(cell, self._style_of(item, styles)))
                pos += len(cell)
            if menu.has_next_page:
                parts.append(" " * max(columns - 1 - pos, 0) + ">")
        rows.insert(0, "".join(parts))
        return rows, cursor_col


class _Terminal:
    """The controlling terminal in raw mode, for drawing and reading keys."""

    def __enter__(self) -> _Terminal:
        try:
            import termios
            import tty
        except ImportError:
            die("no terminal support")
        try:
            self._fd = os.open("/dev/tty", os.O_RDWR)
        except OSError:
            die("cannot open terminal:")
        self._termios = termios
        try:
            self._saved = termios.tcgetattr(self._fd)
            tty.setraw(self._fd)
        except termios.error:
            os.close(self._fd)
            die("cannot set up terminal")
        return self

    def __exit__(self, *exc_info: object) -> None:
        try:
            self.write("\r\x1b[J")
        finally:
            self._termios.tcsetattr(self._fd, self._termios.TCSADRAIN, self._saved)
            os.close(self._fd)

    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._fd).columns
        except OSError:
            return 80

    def read(self) -> bytes:
        return os.read(self._fd, 64)

    def write(self, text: str) -> None:
        os.write(self._fd, text.encode("utf-8", "replace"))

    def draw(self, rows: list[str], column: int) -> None:
        out = "\r\x1b[J" + "\r\n".join(rows)
        if len(rows) > 1:
            out += f"\x1b[{len(rows) - 1}A"
        out += "\r"
        if column:
            out += f"\x1b[{column}C"
        self.write(out)


def _interact(options: Options, items: list[Item], term: _Terminal) -> _Session:
    session = _Session(options, items, term.columns())
    while session.status is None:
        term.draw(*session.render(term.columns()))
        data = term.read()
        if not data:
            session.status = 1
            break
        for key in _parse_keys(data):
            session.press(key.name, ctrl=key.ctrl, alt=key.alt, shift=key.shift)
            if session.status is not None:
                break
    return session


def _run(options: Options) -> _Session:
    stdin = getattr(sys.stdin, "buffer", sys.stdin)
    if options.fast and not sys.stdin.isatty():
        with _Terminal() as term:
            items = read_items(stdin)
            return _interact(options, items, term)
    items = read_items(stdin)
    with _Terminal() as term:
        return _interact(options, items, term)


def main(argv: list[str] | None = None) -> int:
    """Run the menu; return 0 after a selection, 1 when cancelled or on error."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.show_version:
        print(f"dynmenu-{VERSION}")
        return 0
    try:
        session = _run(options)
    except FatalError as exc:
        print(exc.message, file=sys.stderr)
        return exc.status
    for line in session.printed:
        print(line)
    return session.status if session.status is not None else 1


if __name__ == "__main__":
    sys.exit(main())