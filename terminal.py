import termios
import tty


class TerminalError(RuntimeError):
    """Entering or leaving cbreak mode failed; the terminal can't be trusted."""


# --- Terminal mode helpers ---
class TerminalSession:
    """
    Puts the tty into cbreak mode (no echo, one key at a time) for the duration
    of a `with` block and restores the saved attributes on every way out,
    including exceptions and Ctrl-C.
    """

    def __init__(self, fd):
        self.fd = fd
        self.old_settings = None

    def __enter__(self):
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError) as e:
            # setcbreak is a single tcsetattr, so nothing was changed yet
            self.old_settings = None
            raise TerminalError(f"could not enter cbreak mode: {e}") from e
        return self

    def _restore(self):
        if self.old_settings is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except (termios.error, OSError) as e:
            raise TerminalError(f"could not restore terminal: {e}") from e
        self.old_settings = None

        # throw away keys pressed while the game was closing
        try:
            termios.tcflush(self.fd, termios.TCIFLUSH)
        except (termios.error, OSError) as e:
            raise TerminalError(f"terminal restored, but pending input could not be flushed: {e}") from e

    def __exit__(self, exc_type, exc, tb):
        self._restore()
        return False
