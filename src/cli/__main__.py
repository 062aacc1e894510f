"""
Console contact book: numbered menu + ContactService + flat file.
Run: python -m cli (from repo root, or the installed `contactbook` script).
Contacts are read from contacts.txt in the working directory and written back on exit.
"""
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from cli.menu import action_for, load_menu, render_menu
from contactbook.application import (
    ContactService,
    Invalid,
    NotFound,
    SaveFailed,
)
from contactbook.infrastructure import (
    DEFAULT_CONTACTS_FILE,
    FlatFileContactStorage,
    InMemoryContactRepository,
)

logger = logging.getLogger(__name__)


class EndOfInput(Exception):
    """stdin closed while the loop was waiting for a line."""


class Console:
    """Line-oriented console over a pair of text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def say(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def ask(self, prompt: str) -> str:
        """Show prompt (no newline) and return the next line without its terminator."""
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if line == "":
            raise EndOfInput()
        return line.rstrip("\r\n")


def handle_add(service: ContactService, console: Console, messages: dict) -> None:
    name = console.ask(messages["ask_name"])
    phone = console.ask(messages["ask_phone"])
    email = console.ask(messages["ask_email"])
    result = service.add(name, phone, email)
    if isinstance(result, Invalid):
        console.say(messages["required_fields"])
        return
    console.say(messages["contact_added"])


def handle_search(service: ContactService, console: Console, messages: dict) -> None:
    name = console.ask(messages["ask_search_name"])
    result = service.search(name)
    if isinstance(result, NotFound):
        console.say(messages["contact_not_found"])
        return
    console.say(str(result))


def handle_list(service: ContactService, console: Console, messages: dict) -> None:
    contacts = service.list_contacts()
    if not contacts:
        console.say(messages["no_contacts"])
        return
    console.say(messages["contacts_header"])
    for contact in contacts:
        console.say(str(contact))


def handle_save_and_exit(service: ContactService, console: Console, messages: dict) -> None:
    result = service.save()
    if isinstance(result, SaveFailed):
        console.say(messages["save_error"].replace("{reason}", result.reason))
    console.say(messages["goodbye"])


HANDLERS: dict[str, Callable[[ContactService, Console, dict], None]] = {
    "add": handle_add,
    "search": handle_search,
    "list": handle_list,
    "save_and_exit": handle_save_and_exit,
}


def run(service: ContactService, menu: dict, stdin: TextIO, stdout: TextIO) -> int:
    """Read-dispatch loop. Returns the exit code once save-and-exit has run."""
    console = Console(stdin, stdout)
    messages = menu["messages"]
    while True:
        console.say()
        console.say(render_menu(menu))
        try:
            choice = console.ask(menu["prompt"])
            action = action_for(menu, choice)
            if action is None:
                console.say(messages["invalid_option"])
                continue
            if action == "save_and_exit":
                break
            HANDLERS[action](service, console, messages)
        except EndOfInput:
            console.say()
            logger.info("End of input; saving and exiting")
            break
    handle_save_and_exit(service, console, messages)
    return 0


def main(path: str | Path = DEFAULT_CONTACTS_FILE) -> int:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    menu = load_menu()
    service = ContactService(
        repository=InMemoryContactRepository(),
        storage=FlatFileContactStorage(path),
    )
    service.load()
    return run(service, menu, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
