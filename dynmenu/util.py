"""Fatal error reporting and small numeric helpers."""

from __future__ import annotations

import sys
from typing import NoReturn

__all__ = ["FatalError", "die", "between"]


class FatalError(Exception):
    """An unrecoverable error; the program should exit with ``status``."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def die(fmt: str, *args: object) -> NoReturn:
    """Raise :class:`FatalError` with a printf-style message.

    A format ending in ``':'`` gets the description of the exception being
    handled appended, the way a system error would be reported.
    """
    message = fmt % args if args else fmt
    if fmt.endswith(":"):
        exc = sys.exc_info()[1]
        if exc is not None:
            if isinstance(exc, OSError) and exc.strerror:
                detail = exc.strerror
            else:
                detail = str(exc)
            message = f"{message} {detail}"
    raise FatalError(message)


def between(x: float, low: float, high: float) -> bool:
    """Return whether ``low <= x <= high``."""
    return low <= x <= high