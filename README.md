# dynmenu

`dynmenu` is a menu that runs in the terminal. It reads newline-separated
items from standard input, lets you narrow them down by typing, and
writes the chosen item (or the text you typed) to standard output. The
menu is drawn on the controlling terminal (`/dev/tty`), so standard input
and output stay free for piping.

It comes with `dynmenu-stest`, a filter that picks out files meeting given
conditions, which is handy for building the item list.

## Installation

```
pip install .
```

No third-party libraries are needed. The menu needs a POSIX terminal.

To run the test suite:

```
pip install ".[test]"
pytest
```

## dynmenu

```
ls | dynmenu -p "open:"
```

Typing splits the input on spaces into tokens; an item is listed only if
every token occurs in it. Ordering depends on prefix matching, which is
on by default and toggled by `-x`:

- prefix matching on: items that begin with the whole input come first,
  then items that begin with the first token;
- prefix matching off: items equal to the whole input come first, then
  items that begin with the first token, then every other item that
  contains all the tokens.

With `-i` the comparison ignores the case of ASCII letters.

Options:

| Option        | Meaning                                                     |
|---------------|-------------------------------------------------------------|
| `-v`          | print `dynmenu-4.9` and exit                                |
| `-i`          | match case-insensitively                                    |
| `-x`          | toggle prefix matching                                      |
| `-l lines`    | show matches as a vertical list of at most `lines` rows     |
| `-p prompt`   | prompt shown to the left of the input field                 |
| `-f`          | open the terminal before reading standard input             |
| `-nb`, `-nf`  | normal background and foreground colour (`#rgb`/`#rrggbb`)  |
| `-sb`, `-sf`  | selected background and foreground colour                   |
| `-b`, `-m monitor`, `-fn font`, `-w windowid` | accepted, but have no effect |

Without `-l` the matches are shown on one line after the input field,
with `<` and `>` marking further pages. Colours given as hex values are
drawn as 24-bit terminal colours; other values fall back to plain,
reverse-video (selection) and underline (printed items).

An unknown option, or an option missing its argument, prints a usage
message and exits with status 1. After a selection the exit status is 0;
when the menu is cancelled it is 1.

Keys:

| Key                          | Action                                      |
|------------------------------|---------------------------------------------|
| Return                       | print the selected item (or the typed text when nothing matches) and exit |
| Escape, Ctrl-C, Ctrl-G       | quit without printing, status 1             |
| Tab, Ctrl-I                  | complete to the longest common prefix of the matches |
| Left/Right, Ctrl-B/Ctrl-F    | move the cursor, or the selection at the ends of the text |
| Up/Down, Ctrl-P/Ctrl-N       | select the previous/next match              |
| Page Up/Page Down, Alt-K/Alt-J | previous/next page                        |
| Home/End, Ctrl-A/Ctrl-E      | go to the start/end of the text, then to the first/last match |
| Alt-G / Alt-Shift-G          | first / last match                          |
| Alt-H / Alt-L                | select the previous / next match            |
| Alt-B / Alt-F, Ctrl-Left/Right | move to the previous word start / next word end |
| BackSpace, Ctrl-H            | delete the character before the cursor      |
| Delete, Ctrl-D               | delete the character under the cursor       |
| Ctrl-K / Ctrl-U              | delete to the right / left of the cursor    |
| Ctrl-W                       | delete the word before the cursor           |

The input line holds at most 8191 bytes of UTF-8; longer input lines are
split into several items.

## dynmenu-stest

```
dynmenu-stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]
```

Prints each given file (or each line read from standard input when no
files are given) that passes every selected test:

- `-a` include hidden files (by default names starting with `.` are
  skipped), `-b` block special, `-c` character special, `-d` directory,
  `-e` exists, `-f` regular file, `-g` set-group-id, `-h` symbolic link,
  `-p` named pipe, `-r` readable, `-s` not empty, `-u` set-user-id,
  `-w` writable, `-x` executable
- `-n file` newer than file, `-o file` older than file (compared by
  modification time in whole seconds; if `file` cannot be examined an
  error is printed and the test is dropped)
- `-l` test the entries of each directory given (including `.` and
  `..`, in sorted order) and print their names
- `-q` print nothing, exit 0 on the first match
- `-v` invert the sense of the tests

It exits with 0 if anything matched, 1 if nothing did and 2 on a usage
error. For example, to pick an executable from a directory:

```
dynmenu-stest -flx /usr/bin | dynmenu
```

## Library use

The pieces behind both commands can be used on their own:

- `dynmenu.matching`: `Item`, `Matcher.match(items, text)`, `tokenize`,
  `cistrstr`
- `dynmenu.editor`: `LineEditor`, the input line with its cursor,
  editing commands and `complete(matches)`
- `dynmenu.menu`: `Menu`, which keeps the matches, the selection and the
  visible page (`select_next`, `page_next`, `first`, `last`, `visible`,
  `selection`, ...)
- `dynmenu.config`: `Config` and `Scheme`, the default settings and
  colours
- `dynmenu.stest`: `Criteria`, `parse_args` and `select` for filtering
  files
- `dynmenu.utf8`: lenient UTF-8 decoding (`decode`, `iter_codepoints`)
- `dynmenu.cli`: `parse_args`, `read_items` and `main`

```python
from dynmenu.matching import Item, Matcher

items = [Item("firefox"), Item("fish"), Item("gimp")]
[i.text for i in Matcher().match(items, "fi")]   # ['firefox', 'fish']
```

## What it does not do

`dynmenu` draws only on a text terminal. It opens no graphical window,
does not place itself at the top or bottom of a screen, does not choose a
monitor, load fonts or embed into another window; the options for those
are accepted and ignored. It also cannot paste from a selection or
clipboard.