"""Default appearance and behaviour settings of the menu."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = ["Scheme", "Config"]

_WHICH = ("fg", "bg")


class Scheme(enum.Enum):
    """Colour schemes: normal items, the selection and printed items."""

    NORM = 0
    SEL = 1
    OUT = 2


def _default_colors() -> dict[Scheme, dict[str, str]]:
    return {
        Scheme.NORM: {"fg": "#bbbbbb", "bg": "#222222"},
        Scheme.SEL: {"fg": "#eeeeee", "bg": "#005577"},
        Scheme.OUT: {"fg": "#000000", "bg": "#00ffff"},
    }


@dataclass
class Config:
    """Settings that command-line options may override."""

    topbar: bool = True
    fonts: list[str] = field(default_factory=lambda: ["JoyPixels:size=10"])
    prompt: str | None = None
    colors: dict[Scheme, dict[str, str]] = field(default_factory=_default_colors)
    lines: int = 0
    worddelimiters: str = " "
    use_prefix: bool = True

    @staticmethod
    def _check(which: str) -> None:
        if which not in _WHICH:
            raise ValueError(f"colour must be 'fg' or 'bg', not {which!r}")

    def color(self, scheme: Scheme, which: str) -> str:
        """Return the foreground or background colour of ``scheme``."""
        self._check(which)
        return self.colors[Scheme(scheme)][which]

    def set_color(self, scheme: Scheme, which: str, value: str) -> None:
        """Replace the foreground or background colour of ``scheme``."""
        self._check(which)
        self.colors[Scheme(scheme)][which] = value

    def is_delimiter(self, char: str) -> bool:
        """Return whether ``char`` separates words; the end of text does too."""
        if len(char) > 1:
            raise ValueError("expected a single character")
        return not char or char in self.worddelimiters