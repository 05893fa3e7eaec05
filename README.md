# edline

edline is a small line-oriented text editor for the terminal, in the spirit of
`ed`. It reads one keystroke at a time and takes commands at a bare prompt. It
keeps the lines you type in memory, ordered by line number, and it keeps a
history of the commands you have entered.

It needs a POSIX system, because it uses `termios` to control the terminal.

## Installing

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Running

    edline

When standard input is a terminal, edline puts it into raw mode, with no
canonical input and no echo. It restores the previous settings when the editor
stops. When standard input is not a terminal, edline reads it as it is. The
editor stops on `q` or at the end of input.

## Commands

Type a command and press Enter.

| Input     | Effect                                                      |
|-----------|-------------------------------------------------------------|
| `N`       | set the current line to `N`                                 |
| `a`, `Na` | add text after the current line, or after line `N`          |
| `i`, `Ni` | add text at the current line, or at line `N`                |
| `d`, `Nd` | delete the current line, or line `N`                        |
| `M,Nx`    | run command `x` with the current line set to `N`            |
| `q`       | quit                                                        |

The command letters are `q`, `d`, `a` and `i`. If a command word holds more
than one of them, the last one counts. Any other letters in a word do nothing.
If the input cannot be read as a number, a range or a word, edline prints `?`.

A delete marks the line as deleted. It also drops every line that the buffer
tree stores on that node's left side.

### Adding text

After `a` or `i`, each line you type is stored at the current line number, and
the line number then goes up by one. Only printable characters are taken in
this mode. Typing `.` at the start of a line ends the mode straight away, with
no Enter needed.

## Keys

- **Backspace**: delete the character before the cursor.
- **Arrow keys**: every arrow key first clears the line you are typing.
  **Up** and **Down** then fill the line from the command history. Up shows
  the current entry and steps back. Down steps forward and shows that entry.
  **Left** and **Right** move the cursor, but the line is already empty at
  that point.

## Limits

- edline does not open, read or save files. Text exists only in memory, and
  it is gone when the editor stops.
- There is no command that prints the stored lines. In code you can read them
  with `BufferTree.nodes()`.

## Library use

You can also use the parts of the editor on their own:

- `edline.string_buffer.StringBuffer`: the line being typed. It has
  `insert`, `backspace`, `clear` and `move_cursor`.
- `edline.buffer_tree.BufferTree` and `LineNode`: the stored lines, in a
  binary tree keyed by line number. It has `insert`, `delete_line` and
  `nodes`. `create_buffer` makes a node from a `StringBuffer`.
- `edline.files.FileNode` and `create_file`: a doubly linked list of file
  descriptors, each with its own buffer tree. `create_file(-1, prev)` returns
  `None`.
- `edline.editor.check_state` and `edline.editor.process_line`: the command
  parser, which returns a `State`.
- `edline.editor.CommandHistory`: the command history with its up and down
  pointer.
- `edline.editor.Editor`: the input loop. It works over any pair of byte
  streams, for example `io.BytesIO` objects.
- `edline.terminal.change_mode` and `edline.terminal.raw_mode`: switch a
  terminal file descriptor into raw mode and back. `raw_mode` is a context
  manager.