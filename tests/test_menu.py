import pytest

from dynmenu.matching import Item, Matcher
from dynmenu.menu import Menu


def make(*names):
    return [Item(name) for name in names]


@pytest.fixture
def five():
    return make("a1", "a2", "a3", "a4", "a5")


def test_starts_with_everything_matched(five):
    menu = Menu(five, lines=2)
    assert menu.matches == five
    assert menu.selection() is five[0]
    assert menu.visible() == five[:2]


def test_vertical_page_size_is_lines(five):
    menu = Menu(five, lines=3)
    assert menu.visible() == five[:3]
    assert menu.has_next_page
    assert not menu.has_previous_page


def test_select_next_turns_page(five):
    menu = Menu(five, lines=2)
    assert menu.select_next()
    assert menu.select_next()
    assert menu.selection() is five[2]
    assert menu.visible() == five[2:4]


def test_select_prev_turns_page_back(five):
    menu = Menu(five, lines=2)
    menu.page_next()
    assert menu.select_prev()
    assert menu.selection() is five[1]
    assert menu.visible() == five[:2]


def test_select_prev_at_start_fails(five):
    menu = Menu(five, lines=2)
    assert not menu.select_prev()
    assert menu.selection() is five[0]


def test_select_next_at_end_fails(five):
    menu = Menu(five, lines=2)
    menu.last()
    assert not menu.select_next()
    assert menu.selection() is five[-1]


def test_paging(five):
    menu = Menu(five, lines=2)
    assert menu.page_next()
    assert menu.selection() is five[2]
    assert menu.page_prev()
    assert menu.selection() is five[0]
    assert menu.visible() == five[:2]


def test_last_fills_final_page(five):
    menu = Menu(five, lines=2)
    menu.last()
    assert menu.selection() is five[-1]
    assert menu.visible() == five[-2:]
    assert not menu.has_next_page
    assert not menu.page_next()


def test_first_returns_to_start(five):
    menu = Menu(five, lines=2)
    assert not menu.first()
    menu.last()
    assert menu.first()
    assert menu.selection() is five[0]
    assert menu.visible() == five[:2]


def test_horizontal_page_fits_width():
    items = make("aa", "bb", "cc")
    menu = Menu(items, width=len("aabb"), measure=len)
    assert menu.visible() == items[:2]
    assert menu.has_next_page


def test_horizontal_long_item_still_shown():
    items = make("a" * 50, "b")
    menu = Menu(items, width=len("abc"))
    assert menu.visible() == items[:1]


def test_update_filters_and_reselects():
    items = make("apple", "banana", "blueberry")
    menu = Menu(items, lines=5)
    menu.select_next()
    menu.update("b")
    assert menu.matches == items[1:]
    assert menu.selection() is items[1]
    assert menu.text == "b"


def test_no_matches():
    menu = Menu(make("apple"), lines=3)
    menu.update("zzz")
    assert menu.selection() is None
    assert menu.visible() == []
    assert not menu.page_prev()
    assert not menu.page_next()
    assert not menu.select_next()


def test_matcher_is_used():
    items = make("Apple", "apple")
    menu = Menu(items, matcher=Matcher(case_insensitive=True), lines=5)
    menu.update("APP")
    assert menu.matches == items


@pytest.mark.parametrize("lines,width", [(1, 0), (2, 0), (3, 0), (0, 4), (0, 7)])
def test_selection_always_visible(lines, width):
    items = make("aa", "bbb", "c", "dddd", "ee", "f", "ggg")
    menu = Menu(items, lines=lines, width=width)
    seen = [menu.selection()]
    assert menu.selection() in menu.visible()
    while menu.select_next():
        assert menu.selection() in menu.visible()
        seen.append(menu.selection())
    assert seen == items
    while menu.select_prev():
        assert menu.selection() in menu.visible()
    assert menu.selection() is items[0]