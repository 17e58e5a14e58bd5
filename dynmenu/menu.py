"""The list of matching items with paging and a selection."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .matching import Item, Matcher

__all__ = ["Menu"]


class Menu:
    """Matching items laid out in pages.

    With ``lines`` above zero the list is vertical and a page holds that
    many items.  Otherwise items sit side by side: each costs its
    ``measure`` (capped at ``width``) and a page holds what fits in
    ``width``.
    """

    def __init__(
        self,
        items: Iterable[Item],
        matcher: Matcher | None = None,
        lines: int = 0,
        width: int = 0,
        measure: Callable[[str], int] = len,
    ) -> None:
        self.items = list(items)
        self.matcher = matcher if matcher is not None else Matcher()
        self.lines = max(lines, 0)
        self.width = width
        self.measure = measure
        self.text = ""
        self.matches: list[Item] = []
        self._curr = 0
        self._prev = 0
        self._next = 0
        self._sel: int | None = None
        self.update("")

    @property
    def has_previous_page(self) -> bool:
        """Whether items precede the current page."""
        return self._curr > 0

    @property
    def has_next_page(self) -> bool:
        """Whether items follow the current page."""
        return self._next < len(self.matches)

    def update(self, text: str) -> None:
        """Match the items against ``text`` and select the best match."""
        self.text = text
        self.matches = self.matcher.match(self.items, text)
        self._curr = 0
        self._sel = 0 if self.matches else None
        self.calc_offsets()

    def _cost(self, item: Item, room: int) -> int:
        if self.lines > 0:
            return 1
        return min(self.measure(item.text), room)

    def calc_offsets(self) -> None:
        """Work out where the next page and the previous page begin."""
        room = self.lines if self.lines > 0 else self.width
        used = 0
        nxt = self._curr
        for item in self.matches[self._curr :]:
            used += self._cost(item, room)
            if used > room:
                break
            nxt += 1
        self._next = nxt
        used = 0
        prev = self._curr
        for item in reversed(self.matches[: self._curr]):
            used += self._cost(item, room)
            if used > room:
                break
            prev -= 1
        self._prev = prev

    def select_next(self) -> bool:
        """Select the following match, turning the page when needed."""
        if self._sel is None or self._sel + 1 >= len(self.matches):
            return False
        self._sel += 1
        if self._sel == self._next:
            self._curr = self._next
            self.calc_offsets()
        return True

    def select_prev(self) -> bool:
        """Select the preceding match, turning the page back when needed."""
        if not self._sel:
            return False
        self._sel -= 1
        if self._sel + 1 == self._curr:
            self._curr = self._prev
            self.calc_offsets()
        return True

    def page_next(self) -> bool:
        """Show the next page and select its first item."""
        if not self.has_next_page:
            return False
        self._sel = self._curr = self._next
        self.calc_offsets()
        return True

    def page_prev(self) -> bool:
        """Show the previous page and select its first item."""
        if not self.matches:
            return False
        self._sel = self._curr = self._prev
        self.calc_offsets()
        return True

    def first(self) -> bool:
        """Select the first match; False if it was selected already."""
        if not self._sel:
            return False
        self._sel = self._curr = 0
        self.calc_offsets()
        return True

    def last(self) -> None:
        """Select the last match, with the last page filled from the end."""
        if self.has_next_page:
            self._curr = len(self.matches) - 1
            self.calc_offsets()
            self._curr = self._prev
            self.calc_offsets()
            while self.has_next_page:
                self._curr += 1
                self.calc_offsets()
        self._sel = len(self.matches) - 1 if self.matches else None

    def visible(self) -> list[Item]:
        """Return the items on the current page."""
        return self.matches[self._curr : self._next]

    def selection(self) -> Item | None:
        """Return the selected item, if any."""
        return None if self._sel is None else self.matches[self._sel]