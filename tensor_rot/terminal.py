"""
terminal.py — Raw-Mode Terminal and Keypress Decoding
=======================================================

Keys are read one complete key at a time: a single byte, or an escape
sequence (ESC, its CSI/SS3 introducer, parameter bytes and the final byte)
consumed in full so the next read starts on a key boundary.
"""

import logging
import os
import select
import sys
import termios
import tty
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)


ESC = b"\x1b"
KEY_UP = b"\x1b[A"
KEY_DOWN = b"\x1b[B"
CTRL_C = b"\x03"
CTRL_D = b"\x04"


class Command(NamedTuple):
    """Decoded keypress.  kind: rotate, forward, backward, quit or noop."""
    kind: str
    axis: Optional[str] = None


NOOP = Command("noop")
QUIT = Command("quit")
FORWARD = Command("forward")
BACKWARD = Command("backward")

KEYMAP = {
    b"x": Command("rotate", "+x"), b"X": Command("rotate", "-x"),
    b"y": Command("rotate", "+y"), b"Y": Command("rotate", "-y"),
    b"z": Command("rotate", "+z"), b"Z": Command("rotate", "-z"),
    KEY_UP: FORWARD, b"k": FORWARD, b"]": FORWARD,
    KEY_DOWN: BACKWARD, b"j": BACKWARD, b"[": BACKWARD,
    b"q": QUIT, CTRL_C: QUIT, CTRL_D: QUIT,
}


def read_key(read, pending=None):
    """
    Read one complete key.

    Args:
        read: callable returning the next byte (b"" at end of input)
        pending: optional callable, True when another byte is ready; used to
            tell a lone ESC from the start of a sequence

    Returns:
        bytes of one key, or None at end of input
    """
    first = read()
    if not first:
        return None
    if first != ESC:
        return first
    if pending is not None and not pending():
        return first

    introducer = read()
    if not introducer:
        return first
    key = first + introducer
    if introducer not in (b"[", b"O"):
        return key  # Alt+key
    while True:
        byte = read()
        if not byte:
            return key
        key += byte
        # Final byte of a control sequence is in 0x40-0x7E
        if 0x40 <= byte[0] <= 0x7E:
            return key


def decode_key(key):
    """Map a key (bytes or None) to a Command."""
    if key is None:
        return QUIT
    return KEYMAP.get(key, NOOP)


class Terminal:
    """
    Interactive terminal in cbreak mode with signal keys disabled.

    The previous termios attributes are restored on exit, including when the
    session ends with an exception.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.fd = self.stdin.fileno()
        self._saved = None

    def __enter__(self):
        self._saved = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        # Ctrl-C / Ctrl-Z arrive as bytes instead of signals
        mode = termios.tcgetattr(self.fd)
        mode[3] &= ~termios.ISIG
        termios.tcsetattr(self.fd, termios.TCSADRAIN, mode)
        self.stdout.write("\x1b[?25l")  # hide cursor
        self.stdout.flush()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stdout.write("\x1b[?25h\n")
        self.stdout.flush()
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None
        return False

    def _read_byte(self):
        return os.read(self.fd, 1)

    def _pending(self, timeout=0.05):
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)

    def read_command(self):
        """Next Command; a failed read ends the session."""
        try:
            key = read_key(self._read_byte, self._pending)
        except OSError as exc:
            logger.warning("Keyboard read failed: %s", exc)
            return QUIT
        command = decode_key(key)
        logger.debug("Key %r -> %s", key, command)
        return command

    def render(self, text):
        self.stdout.write(text)
        self.stdout.flush()
