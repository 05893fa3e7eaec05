"""Open files as a doubly linked list, each with its own buffer tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from edline.buffer_tree import BufferTree


@dataclass(eq=False)
class FileNode:
    """A file descriptor with its lines, linked to its neighbours."""

    fd: int
    prev: Optional["FileNode"] = None
    next: Optional["FileNode"] = None
    buffer_tree: BufferTree = field(default_factory=BufferTree)

    def __iter__(self) -> Iterator["FileNode"]:
        node: Optional[FileNode] = self
        while node is not None:
            yield node
            node = node.next


def create_file(fd: int, prev: Optional[FileNode]) -> Optional[FileNode]:
    """Make a file node after ``prev``; an ``fd`` of -1 gives None."""
    if fd == -1:
        return None
    node = FileNode(fd=fd, prev=prev)
    if prev is not None:
        prev.next = node
    return node