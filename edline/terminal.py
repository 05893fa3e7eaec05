"""Switching a terminal between canonical and raw input."""

from __future__ import annotations

import termios
from contextlib import contextmanager
from typing import Iterator

_LFLAG = 3
_CC = 6


def change_mode(to_raw, fd, saved=None):
    """Put ``fd`` into raw mode, or restore ``saved`` settings.

    With ``to_raw`` true, the current settings are read and returned, and
    canonical input and echo are switched off with reads returning one byte
    at a time. Otherwise ``saved`` is applied and returned.
    """
    if to_raw:
        saved = termios.tcgetattr(fd)
        raw = list(saved)
        raw[_CC] = list(saved[_CC])
        raw[_LFLAG] &= ~(termios.ICANON | termios.ECHO)
        raw[_CC][termios.VMIN] = 1
        raw[_CC][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, raw)
        return saved
    if saved is None:
        raise ValueError("no saved terminal settings to restore")
    termios.tcsetattr(fd, termios.TCSANOW, saved)
    return saved


@contextmanager
def raw_mode(fd) -> Iterator[list]:
    """Keep ``fd`` in raw mode for the duration of the block."""
    saved = change_mode(True, fd)
    try:
        yield saved
    finally:
        change_mode(False, fd, saved)