"""The single-line input field with its cursor."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .matching import Item

__all__ = ["MAX_BYTES", "LineEditor"]

MAX_BYTES = 8191


def _byte_length(s: str) -> int:
    return len(s.encode("utf-8", errors="surrogatepass"))


@dataclass
class LineEditor:
    """Editable text with a cursor counted in characters.

    The text never grows beyond ``max_bytes`` bytes of UTF-8.  Editing
    methods return whether anything changed.
    """

    text: str = ""
    cursor: int | None = None
    delimiters: str = " "
    max_bytes: int = MAX_BYTES

    def __post_init__(self) -> None:
        if self.cursor is None:
            self.cursor = len(self.text)
        elif not 0 <= self.cursor <= len(self.text):
            raise ValueError("cursor outside the text")

    @property
    def _pos(self) -> int:
        assert self.cursor is not None
        return self.cursor

    def _is_delimiter(self, char: str) -> bool:
        return char in self.delimiters

    def _remove_before(self, count: int) -> None:
        pos = self._pos
        self.text = self.text[: pos - count] + self.text[pos:]
        self.cursor = pos - count

    def insert(self, s: str) -> bool:
        """Insert ``s`` at the cursor unless the text would grow too long."""
        if _byte_length(self.text) + _byte_length(s) > self.max_bytes:
            return False
        pos = self._pos
        self.text = self.text[:pos] + s + self.text[pos:]
        self.cursor = pos + len(s)
        return True

    def backspace(self) -> bool:
        """Delete the character before the cursor."""
        if self._pos == 0:
            return False
        self._remove_before(1)
        return True

    def delete(self) -> bool:
        """Delete the character under the cursor."""
        if self._pos >= len(self.text):
            return False
        self.cursor = self._pos + 1
        return self.backspace()

    def kill_right(self) -> bool:
        """Delete everything from the cursor to the end."""
        changed = self._pos < len(self.text)
        self.text = self.text[: self._pos]
        return changed

    def kill_left(self) -> bool:
        """Delete everything before the cursor."""
        changed = self._pos > 0
        self._remove_before(self._pos)
        return changed

    def kill_word(self) -> bool:
        """Delete the word before the cursor with the delimiters after it."""
        start = self._pos
        while self._pos > 0 and self._is_delimiter(self.text[self._pos - 1]):
            self._remove_before(1)
        while self._pos > 0 and not self._is_delimiter(self.text[self._pos - 1]):
            self._remove_before(1)
        return self._pos != start

    def move_left(self) -> bool:
        """Move the cursor one character left."""
        if self._pos == 0:
            return False
        self.cursor = self._pos - 1
        return True

    def move_right(self) -> bool:
        """Move the cursor one character right."""
        if self._pos >= len(self.text):
            return False
        self.cursor = self._pos + 1
        return True

    def move_word(self, direction: int) -> bool:
        """Move to the start of the previous word (negative) or end of the next."""
        start = self._pos
        if direction < 0:
            while self._pos > 0 and self._is_delimiter(self.text[self._pos - 1]):
                self.cursor = self._pos - 1
            while self._pos > 0 and not self._is_delimiter(self.text[self._pos - 1]):
                self.cursor = self._pos - 1
        else:
            end = len(self.text)
            while self._pos < end and self._is_delimiter(self.text[self._pos]):
                self.cursor = self._pos + 1
            while self._pos < end and not self._is_delimiter(self.text[self._pos]):
                self.cursor = self._pos + 1
        return self._pos != start

    def home(self) -> bool:
        """Move the cursor to the start of the text."""
        moved = self._pos != 0
        self.cursor = 0
        return moved

    def end(self) -> bool:
        """Move the cursor to the end of the text."""
        moved = self._pos != len(self.text)
        self.cursor = len(self.text)
        return moved

    def complete(self, matches: Iterable[Item]) -> bool:
        """Replace the text by the longest common prefix of the matches."""
        candidates = [item.text for item in matches]
        if not candidates:
            return False
        first = candidates[0].encode("utf-8")[: self.max_bytes]
        first_text = first.decode("utf-8", errors="ignore")
        prefix = os.path.commonprefix([first_text, *candidates])
        self.text = prefix
        self.cursor = len(prefix)
        return True