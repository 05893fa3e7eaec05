import os
import termios

import pytest

from edline.terminal import change_mode, raw_mode


@pytest.fixture
def pty_fd():
    master, slave = os.openpty()
    yield slave
    os.close(slave)
    os.close(master)


def _cc_value(value):
    return value if isinstance(value, int) else ord(value)


def test_raw_mode_clears_canonical_and_echo(pty_fd):
    saved = change_mode(True, pty_fd)
    current = termios.tcgetattr(pty_fd)
    assert current[3] & termios.ICANON == 0
    assert current[3] & termios.ECHO == 0
    assert _cc_value(current[6][termios.VMIN]) == 1
    assert _cc_value(current[6][termios.VTIME]) == 0
    change_mode(False, pty_fd, saved)


def test_restore_brings_back_saved_settings(pty_fd):
    before = termios.tcgetattr(pty_fd)
    saved = change_mode(True, pty_fd)
    assert saved == before
    returned = change_mode(False, pty_fd, saved)
    assert returned is saved
    assert termios.tcgetattr(pty_fd) == before


def test_restore_without_saved_settings_raises(pty_fd):
    with pytest.raises(ValueError):
        change_mode(False, pty_fd, None)


def test_context_manager_restores(pty_fd):
    before = termios.tcgetattr(pty_fd)
    with raw_mode(pty_fd) as saved:
        assert saved == before
        assert termios.tcgetattr(pty_fd)[3] & termios.ICANON == 0
    assert termios.tcgetattr(pty_fd) == before