import pytest

from dynmenu.editor import MAX_BYTES, LineEditor
from dynmenu.matching import Item


def test_defaults_start_empty():
    editor = LineEditor()
    assert (editor.text, editor.cursor) == ("", 0)
    assert editor.max_bytes == MAX_BYTES


def test_initial_cursor_at_end():
    editor = LineEditor("hello")
    assert editor.cursor == len("hello")


def test_cursor_out_of_range_rejected():
    with pytest.raises(ValueError):
        LineEditor("abc", cursor=len("abcd"))


def test_insert_at_cursor():
    editor = LineEditor("held", cursor=len("he"))
    assert editor.insert("l")
    assert editor.text == "helld"
    assert editor.cursor == len("hel")


def test_insert_refused_when_too_long():
    editor = LineEditor(max_bytes=len("abc"))
    assert editor.insert("abc")
    assert not editor.insert("d")
    assert editor.text == "abc"


def test_insert_limit_counts_utf8_bytes():
    editor = LineEditor("ab", max_bytes=len("abc"))
    assert not editor.insert("\u00e9")
    assert editor.text == "ab"


def test_backspace_removes_whole_character():
    editor = LineEditor("caf\u00e9")
    assert editor.backspace()
    assert editor.text == "caf"
    assert editor.cursor == len("caf")


def test_backspace_at_start_does_nothing():
    editor = LineEditor("abc", cursor=0)
    assert not editor.backspace()
    assert editor.text == "abc"


def test_delete_under_cursor():
    editor = LineEditor("abc", cursor=len("a"))
    assert editor.delete()
    assert editor.text == "ac"
    assert editor.cursor == len("a")


def test_delete_at_end_does_nothing():
    editor = LineEditor("abc")
    assert not editor.delete()
    assert editor.text == "abc"


def test_kill_right_and_left():
    editor = LineEditor("hello world", cursor=len("hello"))
    assert editor.kill_right()
    assert editor.text == "hello"
    editor.cursor = len("he")
    assert editor.kill_left()
    assert (editor.text, editor.cursor) == ("llo", 0)
    assert not editor.kill_left()


def test_kill_word_removes_trailing_delimiters_first():
    editor = LineEditor("foo bar  ")
    assert editor.kill_word()
    assert editor.text == "foo "
    assert editor.kill_word()
    assert editor.text == ""
    assert not editor.kill_word()


def test_kill_word_uses_custom_delimiters():
    editor = LineEditor("/usr/local/", delimiters="/")
    editor.kill_word()
    assert editor.text == "/usr/"


def test_move_left_and_right_stop_at_edges():
    editor = LineEditor("ab", cursor=0)
    assert not editor.move_left()
    assert editor.move_right()
    assert editor.move_right()
    assert not editor.move_right()
    assert editor.cursor == len("ab")


def test_move_word_forward_and_back():
    text = "foo bar baz"
    editor = LineEditor(text, cursor=0)
    editor.move_word(1)
    assert editor.cursor == len("foo")
    editor.move_word(1)
    assert editor.cursor == len("foo bar")
    editor.cursor = len(text)
    editor.move_word(-1)
    assert editor.cursor == len("foo bar ")
    assert editor.text == text


def test_home_and_end():
    editor = LineEditor("abc", cursor=len("a"))
    assert editor.home()
    assert editor.cursor == 0
    assert editor.end()
    assert editor.cursor == len("abc")
    assert not editor.end()


def test_complete_takes_common_prefix():
    editor = LineEditor("f")
    matches = [Item("foobar"), Item("foobaz"), Item("foo")]
    assert editor.complete(matches)
    assert editor.text == "foo"
    assert editor.cursor == len("foo")


def test_complete_single_match_takes_whole_text():
    editor = LineEditor("fi")
    editor.complete([Item("firefox")])
    assert (editor.text, editor.cursor) == ("firefox", len("firefox"))


def test_complete_without_matches_keeps_text():
    editor = LineEditor("xyz")
    assert not editor.complete([])
    assert editor.text == "xyz"


def test_editing_round_trip():
    editor = LineEditor()
    for ch in "hello":
        editor.insert(ch)
    while editor.backspace():
        pass
    assert (editor.text, editor.cursor) == ("", 0)