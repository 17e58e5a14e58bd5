"""Selecting and ordering menu items that match typed input."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Item", "Matcher", "cistrstr", "tokenize"]

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(s: str) -> str:
    """Lower-case ASCII letters only, leaving every other character alone."""
    return s.translate(_ASCII_FOLD)


@dataclass(eq=False)
class Item:
    """One line of the menu; ``out`` marks items already printed."""

    text: str
    out: bool = False


def cistrstr(s: str, sub: str) -> int | None:
    """Return where ``sub`` first occurs in ``s`` ignoring ASCII case, or None.

    Nothing is ever found in an empty ``s``.
    """
    if not s:
        return None
    pos = _fold(s).find(_fold(sub))
    return pos if pos >= 0 else None


def tokenize(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [token for token in text.split(" ") if token]


@dataclass(frozen=True)
class Matcher:
    """Filters items by the tokens of the input.

    Every token must occur in an item for it to match.  Items that begin
    with the whole input come first, then those beginning with the first
    token, then (unless ``use_prefix``) the remaining ones.  With
    ``use_prefix`` off, the first group holds only exact matches.
    """

    use_prefix: bool = True
    case_insensitive: bool = False

    def _contains(self, s: str, sub: str) -> bool:
        if self.case_insensitive:
            return cistrstr(s, sub) is not None
        return sub in s

    def _starts(self, s: str, prefix: str) -> bool:
        if self.case_insensitive:
            return _fold(s).startswith(_fold(prefix))
        return s.startswith(prefix)

    def _equals(self, s: str, other: str) -> bool:
        if self.case_insensitive:
            return _fold(s) == _fold(other)
        return s == other

    def _leads(self, s: str, text: str) -> bool:
        if self.use_prefix:
            return self._starts(s, text)
        return self._equals(s, text)

    def match(self, items: Iterable[Item], text: str) -> list[Item]:
        """Return the items matching ``text``, best matches first."""
        tokens = tokenize(text)
        exact: list[Item] = []
        prefix: list[Item] = []
        substring: list[Item] = []
        for item in items:
            if not all(self._contains(item.text, token) for token in tokens):
                continue
            if not tokens or self._leads(item.text, text):
                exact.append(item)
            elif self._starts(item.text, tokens[0]):
                prefix.append(item)
            elif not self.use_prefix:
                substring.append(item)
        return exact + prefix + substring