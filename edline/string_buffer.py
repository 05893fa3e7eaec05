"""The line being typed, with a cursor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StringBuffer:
    """Editable text of the current line and the line it refers to."""

    text: str = ""
    cursor: int = 0
    line_position: int = 0

    def __len__(self) -> int:
        return len(self.text)

    def insert(self, char: str) -> bool:
        """Insert a printable character at the cursor; return whether it was taken."""
        if len(char) != 1:
            raise ValueError("insert takes exactly one character")
        code = ord(char)
        if code < 32 or code > 127:
            return False
        self.text = self.text[: self.cursor] + char + self.text[self.cursor :]
        self.cursor += 1
        return True

    def backspace(self) -> bool:
        """Remove the character before the cursor, if any."""
        if self.cursor == 0:
            return False
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.cursor -= 1
        return True

    def clear(self) -> None:
        """Empty the text and put the cursor at the start."""
        self.text = ""
        self.cursor = 0

    def move_cursor(self, direction: int) -> bool:
        """Move left for a negative direction, otherwise right; return whether it moved."""
        if direction < 0:
            if self.cursor > 0:
                self.cursor -= 1
                return True
        elif self.cursor < len(self.text):
            self.cursor += 1
            return True
        return False