"""
Line-oriented text display for the configuration editor.

Each input line is one command:

    <n>          select row n
    (empty)      select the row under the cursor
    k / j        cursor up / down
    m            choose the current entry as move source
    p            choose the current row as destination
    i [name]     insert a new entry, keyed by name (or create a named collection)
    d            delete the current entry (twice to delete a whole collection)
    e key=value  change one attribute of the current entry
    c            cancel the pending move or insertion
    w            save the collection
    b / q        back (q at the top level quits)
    C, S, ...    jump to the category with that hotkey

While a value prompt is open, a non-empty line is the new value and an
empty line cancels the edit.
"""

import logging
import sys
from typing import Optional, TextIO

from .editor.controller import EditorController, Event

logger = logging.getLogger(__name__)

SIMPLE_COMMANDS = {
    "": Event.SELECT,
    "k": Event.MOVE_UP,
    "j": Event.MOVE_DOWN,
    "m": Event.CHOOSE_AS_SOURCE,
    "p": Event.CHOOSE_DESTINATION,
    "d": Event.DELETE,
    "c": Event.CANCEL_EDIT,
    "w": Event.SAVE,
    "b": Event.BACK,
    "q": Event.BACK,
}

MESSAGE_PREFIX = {
    "info": "--",
    "success": "OK",
    "warning": "!!",
    "error": "**",
}


class TextConsole:
    """Reads commands from a stream and renders the controller's screens as text."""

    def __init__(
        self,
        controller: EditorController,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.controller = controller
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.running = True

        controller.message_posted.connect(self._show_message)
        controller.exit_requested.connect(self._stop)

    def _write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _show_message(self, level: str, text: str) -> None:
        self._write(f"{MESSAGE_PREFIX.get(level, '--')} {text}")

    def _stop(self) -> None:
        self.running = False

    def render(self) -> None:
        """Write the current screen."""
        controller = self.controller
        self._write()
        self._write(f"[ {controller.breadcrumb()} ]")

        session = controller.session
        pending_at = session.staged_insertion_index if session is not None else None
        for row in controller.rows():
            if pending_at == row.index:
                self._write("   + (new entry)")
            cursor = ">" if row.index == controller.screen.cursor else " "
            mark = "*" if row.marked else " "
            line = f"{cursor}{mark}{row.index + 1:>3}. {row.label}"
            if row.value:
                line = f"{line:<40} {row.value}"
            self._write(line)
        if pending_at is not None and pending_at >= len(session):
            self._write("   + (new entry)")
        if session is not None and session.dirty:
            self._write("   (unsaved changes)")

        prompt = controller.prompt
        if prompt is not None:
            if prompt.error:
                self._write(f"** {prompt.error}")
            self._write(f"{prompt.field.label} [{prompt.text}]: ")

    def feed(self, line: str) -> bool:
        """Process one input line. Returns False once the console should exit."""
        controller = self.controller
        line = line.rstrip("\r\n")

        if controller.prompt is not None:
            if line == "":
                controller.handle(Event.CANCEL_EDIT)
            else:
                controller.handle(Event.CONFIRM_EDIT, line)
            return self.running

        command = line.strip()
        if command.isdigit():
            controller.handle(Event.SELECT, int(command) - 1)
        elif len(command) == 1 and command.isupper():
            if not controller.open_category(command):
                self._show_message("error", f"No category on hotkey {command}")
        elif command.lower() in SIMPLE_COMMANDS:
            controller.handle(SIMPLE_COMMANDS[command.lower()])
        elif command == "i" or command.startswith("i "):
            name = command[1:].strip() or None
            controller.handle(Event.INSERT, name)
        elif command.startswith("e "):
            key, sep, value = command[2:].partition("=")
            if not sep:
                self._show_message("error", "Use e key=value")
            else:
                controller.handle(Event.CONFIRM_EDIT, {key.strip(): value.strip()})
        else:
            self._show_message("error", f"Unknown command '{command}'")
        return self.running

    def run(self) -> int:
        """Read commands until end of input or quit."""
        self.render()
        for line in self.stdin:
            if not self.feed(line):
                break
            self.render()
        logger.info("Console session ended")
        return 0
