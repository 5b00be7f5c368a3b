"""Line-oriented interactive shell over a ``BrowserSession``.

Each command maps to one user intent. Listing and preview loads run on the
session's background loader; the shell waits for them before redrawing.
"""

from __future__ import annotations

import logging
import shlex
from typing import TextIO

from ..render import render_session
from .session import BrowserSession

logger = logging.getLogger(__name__)

PROMPT = "> "
LOAD_WAIT_SECONDS = 30.0

HELP_TEXT = """\
Commands:
  <n> | open <n>   open entry number n (enter directory or preview file)
  cd <path>        enter a directory
  up               go to the parent directory
  back | b         close the viewer, or return to the previous directory
  close            close the viewer
  ls | refresh     reload the current directory
  help | ?         show this help
  quit | q         exit
"""

_QUIT_COMMANDS = {"quit", "q", "exit"}


class BrowserShell:
    """Reads commands from ``stdin`` and redraws the session to ``stdout``."""

    def __init__(
        self,
        session: BrowserSession,
        stdin: TextIO,
        stdout: TextIO,
        style: str,
        color: bool = False,
    ) -> None:
        self.session = session
        self.stdin = stdin
        self.stdout = stdout
        self.style = style
        self.color = color

    def _settle(self) -> None:
        loader = self.session.loader
        if loader is None:
            return
        if not loader.wait_idle(LOAD_WAIT_SECONDS):
            logger.warning("background load still running after %.0fs", LOAD_WAIT_SECONDS)
        self.session.poll()

    def _draw(self) -> None:
        self._settle()
        self.stdout.write(render_session(self.session, style=self.style, color=self.color))
        self.stdout.flush()

    def _say(self, message: str) -> None:
        self.stdout.write(message + "\n")

    def _open_index(self, raw_index: str) -> bool:
        try:
            index = int(raw_index)
        except ValueError:
            self._say(f"not an entry number: {raw_index}")
            return False
        entries = self.session.entries
        if not 1 <= index <= len(entries):
            self._say(f"no entry {index} (1-{len(entries)})")
            return False
        entry = entries[index - 1]
        if not self.session.open(entry):
            self._say(f"cannot open {entry.name}: not readable")
            return False
        return True

    def handle(self, line: str) -> bool:
        """Run one command line. Returns ``False`` when the shell should exit."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            self._say(f"cannot parse command: {exc}")
            return True
        if not words:
            return True

        command, args = words[0].lower(), words[1:]
        if command in _QUIT_COMMANDS:
            return False
        if command.isdigit():
            if self._open_index(command):
                self._draw()
        elif command == "open" and len(args) == 1:
            if self._open_index(args[0]):
                self._draw()
        elif command == "cd" and len(args) == 1:
            if self.session.navigate_into(args[0]):
                self._draw()
            else:
                self._say(f"not a readable directory: {args[0]}")
        elif command == "up":
            if self.session.navigate_up():
                self._draw()
            else:
                self._say("already at the top")
        elif command in {"back", "b"}:
            if not self.session.navigate_back():
                return False
            self._draw()
        elif command == "close":
            self.session.close_viewer()
            self._draw()
        elif command in {"ls", "refresh"}:
            self.session.navigation.reload()
            self._draw()
        elif command in {"help", "?"}:
            self.stdout.write(HELP_TEXT)
        else:
            self._say(f"unknown command: {line.strip()} (try 'help')")
        return True

    def run(self) -> None:
        self._draw()
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self._say("")
                return
            if not self.handle(line):
                return


__all__ = ["HELP_TEXT", "BrowserShell"]
