"""Lines of a file held in a binary tree ordered by line number."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from edline.string_buffer import StringBuffer


@dataclass
class LineNode:
    """One line of text and where it belongs."""

    text: str
    line: int
    deleted: bool = False
    left: Optional["LineNode"] = None
    right: Optional["LineNode"] = None


def create_buffer(sb: StringBuffer) -> LineNode:
    """Make a node from the buffer's text at its line position."""
    return LineNode(text=sb.text, line=sb.line_position)


class BufferTree:
    """Binary tree of lines; equal line numbers go to the left."""

    def __init__(self) -> None:
        self.root: Optional[LineNode] = None

    def insert(self, node: LineNode) -> None:
        """Place ``node`` in the tree by its line number."""
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if node.line <= current.line:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def delete_line(self, line: int) -> bool:
        """Flag the node for ``line`` as deleted and drop its left subtree.

        Returns whether a node for that line was found.
        """
        current = self.root
        while current is not None:
            if current.line > line:
                current = current.left
            elif current.line < line:
                current = current.right
            else:
                current.left = None
                current.deleted = True
                return True
        return False

    def nodes(self) -> Iterator[LineNode]:
        """Yield the nodes not flagged as deleted, in tree order."""
        stack: list[LineNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            if not current.deleted:
                yield current
            current = current.right