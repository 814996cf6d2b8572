import os
import queue
import select
import threading

from config import ARROW_KEYS, ESCAPE_TIMEOUT, KEY_BINDINGS
from games.snake import Direction

ESC = "\x1b"
SEQUENCE_INTRODUCERS = ("[", "O")  # CSI, SS3
MAX_SEQUENCE = 16


def parse_key(key):
    """
    Map one keystroke to a Direction.
    Accepts w/a/s/d (any case) and ANSI arrow sequences; anything else -> None.
    """
    if not key:
        return None
    name = ARROW_KEYS.get(key) or KEY_BINDINGS.get(key.lower())
    return Direction[name] if name else None


# --- 🎮 Keyboard reader thread ---
class KeyReader(threading.Thread):
    """
    Blocks on the terminal one byte at a time and forwards parsed directions.

    The game loop only ever calls poll(); this thread never touches game state.
    It runs as a daemon and is left behind when the process exits.
    """

    def __init__(self, fd, escape_timeout=ESCAPE_TIMEOUT):
        super().__init__(name="key-reader", daemon=True)
        self.fd = fd
        self.escape_timeout = escape_timeout
        self.directions = queue.Queue()
        self._after_escape = False

    def _read_char(self):
        data = os.read(self.fd, 1)
        return data.decode("latin-1") if data else ""

    def _pending(self):
        ready, _, _ = select.select([self.fd], [], [], self.escape_timeout)
        return bool(ready)

    def _read_sequence(self, key):
        # CSI/SS3 body: parameter bytes up to one final byte in '@'..'~'
        while len(key) < MAX_SEQUENCE:
            ch = self._read_char()
            if not ch:
                break
            key += ch
            if "@" <= ch <= "~":
                break
        return key

    def read_key(self):
        """
        Read one keystroke. Escape sequences are consumed whole, so Ctrl+Up
        (ESC [ 1 ; 5 A) comes back as one key and never leaks an 'A'.
        """
        key = self._read_char()
        after_escape, self._after_escape = self._after_escape, False

        if key == ESC:
            if not self._pending():
                # lone ESC for now; its tail may still be on the way
                self._after_escape = True
                return key
            ch = self._read_char()
            key += ch
            if ch in SEQUENCE_INTRODUCERS:
                key = self._read_sequence(key)
            return key

        if after_escape and key in SEQUENCE_INTRODUCERS:
            # late tail of a split sequence, returned without its ESC so it parses to nothing
            return self._read_sequence(key)
        return key

    def run(self):
        while True:
            key = self.read_key()
            if not key:  # EOF
                return
            direction = parse_key(key)
            if direction is not None:
                self.directions.put(direction)

    def poll(self):
        """
        Non-blocking. Drain everything queued since the last call and return the
        newest direction, or None if nothing arrived.
        """
        latest = None
        while True:
            try:
                latest = self.directions.get_nowait()
            except queue.Empty:
                return latest
