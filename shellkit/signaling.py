"""Signal handling states for the prompt, command execution and here-documents."""

from __future__ import annotations

import os
import signal
from enum import IntEnum
from typing import Callable, Optional

from shellkit.output import put_str_fd

TTY_PATH = "/dev/tty"
_STDERR = 2


class SignalStatus(IntEnum):
    """The last interesting signal seen, or BASE when none was."""

    BASE = 0
    SIGINT = signal.SIGINT
    SIGQUIT = getattr(signal, "SIGQUIT", 3)


def write_to_tty(text: str) -> int:
    """Write text to the controlling terminal.

    Failures to open or write the terminal are ignored. Always returns 0.
    """
    try:
        fd = os.open(TTY_PATH, os.O_RDWR)
    except OSError:
        return 0
    try:
        put_str_fd(text, fd)
    except OSError:
        pass
    finally:
        os.close(fd)
    return 0


class SignalController:
    """Installs signal handlers for each phase of the shell and records signals.

    ``tty_writer`` receives the text echoed to the terminal when the prompt is
    interrupted; ``redisplay`` is called afterwards to redraw the prompt.
    """

    def __init__(
        self,
        tty_writer: Callable[[str], object] = write_to_tty,
        stderr_fd: int = _STDERR,
        redisplay: Optional[Callable[[], object]] = None,
    ) -> None:
        self.status = SignalStatus.BASE
        self.tty_writer = tty_writer
        self.stderr_fd = stderr_fd
        self.redisplay = redisplay

    def save_signal(self, signum: int, frame: object = None) -> None:
        """Remember the signal that arrived."""
        self.status = SignalStatus(signum)

    def reset_prompt(self, signum: int, frame: object = None) -> None:
        """On SIGINT, move to a fresh line and redraw the prompt."""
        if signum == SignalStatus.SIGINT:
            self.tty_writer("\n")
            if self.redisplay is not None:
                self.redisplay()

    def cancel_heredoc(self, signum: int, frame: object = None) -> None:
        """Mark a here-document as interrupted and end the current line."""
        if signum == SignalStatus.SIGINT:
            self.status = SignalStatus.SIGINT
        try:
            put_str_fd("\n", self.stderr_fd)
        except OSError:
            pass

    def set_prompt_signals(self) -> None:
        """Handlers for waiting at the prompt: SIGQUIT ignored, SIGINT redraws."""
        self.status = SignalStatus.BASE
        signal.signal(SignalStatus.SIGQUIT, signal.SIG_IGN)
        signal.signal(SignalStatus.SIGINT, self.reset_prompt)

    def set_execution_signals(self) -> None:
        """Handlers while commands run: both signals are only recorded."""
        self.status = SignalStatus.BASE
        signal.signal(SignalStatus.SIGQUIT, self.save_signal)
        signal.signal(SignalStatus.SIGINT, self.save_signal)

    def set_default_signals(self) -> None:
        """Restore the default dispositions of SIGINT and SIGQUIT."""
        signal.signal(SignalStatus.SIGQUIT, signal.SIG_DFL)
        signal.signal(SignalStatus.SIGINT, signal.SIG_DFL)

    def set_heredoc_signals(self) -> None:
        """Handlers while reading a here-document: SIGINT cancels it."""
        signal.signal(SignalStatus.SIGQUIT, signal.SIG_IGN)
        signal.signal(SignalStatus.SIGINT, self.cancel_heredoc)