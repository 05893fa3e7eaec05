"""Line editor: command parsing, history and the input loop."""

from __future__ import annotations

import re
import sys
from contextlib import nullcontext
from enum import Enum, auto
from typing import BinaryIO, Optional

from edline.buffer_tree import create_buffer
from edline.files import FileNode, create_file
from edline.string_buffer import StringBuffer
from edline.terminal import raw_mode

CLEAR_LINE = b"\x1b[2K\x1b[1G"
BACKSPACE = b"\x1b[D\x1b[P"
CURSOR_LEFT = b"\x1b[1D"
CURSOR_RIGHT = b"\x1b[1C"


class State(Enum):
    NORMAL = auto()
    ESC = auto()
    ESC_BRACKET = auto()
    EDIT_APPEND = auto()
    EDIT_INSERT = auto()
    BAD = auto()
    QUIT = auto()
    DELETE_LINE = auto()


_COMMANDS = {
    "q": State.QUIT,
    "d": State.DELETE_LINE,
    "a": State.EDIT_APPEND,
    "i": State.EDIT_INSERT,
}

_NUMBER = r"\s*([+-]?\d+)"
_WORD = r"\s*(\S{1,99})"
_LINE_ONLY = re.compile(_NUMBER)
_RANGE_COMMAND = re.compile(_NUMBER + "," + _NUMBER + _WORD)
_LINE_COMMAND = re.compile(_NUMBER + _WORD)
_COMMAND = re.compile(_WORD)


def check_state(command: str) -> State:
    """Return the state a command word asks for; the last command letter wins."""
    state = State.NORMAL
    for char in command:
        state = _COMMANDS.get(char, state)
    return state


def process_line(sb: StringBuffer) -> State:
    """Interpret the buffer as a command, updating its line position."""
    text = sb.text
    if match := _LINE_ONLY.fullmatch(text):
        sb.line_position = int(match.group(1))
        return State.NORMAL
    if match := _RANGE_COMMAND.fullmatch(text):
        line, word = int(match.group(2)), match.group(3)
    elif match := _LINE_COMMAND.fullmatch(text):
        line, word = int(match.group(1)), match.group(2)
    elif match := _COMMAND.fullmatch(text):
        return check_state(match.group(1))
    elif not text.strip():
        return State.NORMAL
    else:
        return State.BAD
    state = check_state(word)
    if state is not State.BAD:
        sb.line_position = line
    return state


class CommandHistory:
    """Entered commands, with a pointer that walks up and down."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._position = -1

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, text: str) -> None:
        """Record a command and point at it."""
        self._entries.append(text)
        self._position = len(self._entries) - 1

    def move(self, up: bool) -> Optional[str]:
        """Return the command to show next, or None if there is none.

        Going up shows the current entry and then steps back; going down
        steps forward and shows that entry.
        """
        if not self._entries:
            return None
        if up:
            text = self._entries[self._position]
            if self._position > 0:
                self._position -= 1
            return text
        if self._position + 1 >= len(self._entries):
            return None
        self._position += 1
        return self._entries[self._position]


class Editor:
    """Reads keystrokes, edits the current line and runs commands."""

    def __init__(self, file: FileNode, stdin: BinaryIO, stdout: BinaryIO) -> None:
        self.file = file
        self.stdin = stdin
        self.stdout = stdout
        self.buffer = StringBuffer()
        self.history = CommandHistory()

    def _write(self, data: bytes) -> None:
        self.stdout.write(data)
        flush = getattr(self.stdout, "flush", None)
        if flush is not None:
            flush()

    def _keys(self):
        while True:
            data = self.stdin.read(1)
            if not data:
                return
            yield data[0]

    def _clear_line(self) -> None:
        self._write(CLEAR_LINE)
        self.buffer.clear()

    def _show_history(self, up: bool) -> None:
        self._clear_line()
        text = self.history.move(up)
        if text is not None:
            self.buffer.text = text
            self.buffer.cursor = len(text)
            self._write(text.encode("latin-1"))

    def _move_cursor(self, direction: int) -> None:
        if self.buffer.move_cursor(direction):
            self._write(CURSOR_LEFT if direction < 0 else CURSOR_RIGHT)

    def _run_command(self) -> bool:
        """Execute the entered line; return False when the editor should stop."""
        self.history.add(self.buffer.text)
        result = process_line(self.buffer)
        self._clear_line()
        if result is State.QUIT:
            return False
        if result is State.BAD:
            self._write(b"?\n")
        elif result is State.EDIT_APPEND:
            self.add_edit(True)
        elif result is State.EDIT_INSERT:
            self.add_edit(False)
        elif result is State.DELETE_LINE:
            self.file.buffer_tree.delete_line(self.buffer.line_position)
        return True

    def run(self) -> None:
        """Process input until a quit command or end of input."""
        state = State.NORMAL
        for key in self._keys():
            if state is State.NORMAL:
                if key == 0x1B:
                    state = State.ESC
                elif key == 0x0A:
                    self._write(bytes([key]))
                    if not self._run_command():
                        return
                elif key == 0x7F:
                    self._write(BACKSPACE)
                    self.buffer.backspace()
                elif self.buffer.insert(chr(key)):
                    self._write(bytes([key]))
            elif state is State.ESC:
                state = State.ESC_BRACKET if key == ord("[") else State.NORMAL
            else:
                self._clear_line()
                if key == ord("A"):
                    self._show_history(True)
                elif key == ord("B"):
                    self._show_history(False)
                elif key == ord("C"):
                    self._move_cursor(1)
                elif key == ord("D"):
                    self._move_cursor(-1)
                state = State.NORMAL

    def add_edit(self, append: bool) -> None:
        """Read lines of text into the file until a lone '.' is typed."""
        sb = self.buffer
        if append:
            sb.line_position += 1
        for key in self._keys():
            if key == 0x0A:
                self._write(bytes([key]))
                self.file.buffer_tree.insert(create_buffer(sb))
                sb.line_position += 1
                self._clear_line()
            elif key == ord("."):
                self._write(bytes([key]))
                if sb.cursor == 0:
                    return
                sb.insert(".")
            elif 32 <= key < 127:
                self._write(bytes([key]))
                sb.insert(chr(key))


def main(argv=None) -> int:
    """Run the editor on the terminal."""
    stdin = sys.stdin.buffer.raw if hasattr(sys.stdin.buffer, "raw") else sys.stdin.buffer
    in_fd = sys.stdin.fileno()
    file = create_file(sys.stdout.fileno(), None)
    terminal = raw_mode(in_fd) if sys.stdin.isatty() else nullcontext()
    with terminal:
        Editor(file, stdin, sys.stdout.buffer).run()
    return 0