from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple, TypeVar

from ..combat.commands import BattleCommand
from ..commands import Command, parse_command, parse_yes_no
from ..utils.text import normalize
from .console import Console, Style

logger = logging.getLogger(__name__)

T = TypeVar("T")

ReadLine = Callable[[], str]
Hint = Tuple[str, Style]

COMMAND_HINTS: Sequence[Hint] = (
    ("Please enter a valid command.", Style.WARNING),
    ("Use help to see commands.", Style.HINT),
    ("", Style.PLAIN),
)
BATTLE_HINTS: Sequence[Hint] = (
    ("That is not a battle command.", Style.WARNING),
    ("Use options to see what you can do.", Style.HINT),
)
YES_NO_HINTS: Sequence[Hint] = (("Please enter Y or N.", Style.WARNING),)


def _read_stdin() -> str:
    return input()


class Prompter:
    """Reads and parses player input, re-prompting until it is understood.

    Invalid input never aborts: a usage hint is printed and the question is
    asked again in a plain loop. End of input propagates as EOFError.
    """

    def __init__(self, console: Console, read_line: Optional[ReadLine] = None) -> None:
        self.console = console
        self._read_line = read_line or _read_stdin

    def ask(self, text: str, style: Style = Style.PROMPT) -> str:
        """Show the prompt and return the normalized answer."""
        self.console.prompt(text, style)
        return normalize(self._read_line())

    def choose(self, text: str, parse: Callable[[str], Optional[T]], hints: Sequence[Hint]) -> T:
        while True:
            answer = self.ask(text)
            value = parse(answer)
            if value is not None:
                return value
            logger.debug("Unrecognized input %r for prompt %r", answer, text)
            for line, style in hints:
                self.console.write(line, style)

    def command(self) -> Command:
        return self.choose("Enter a command: ", parse_command, COMMAND_HINTS)

    def battle_command(self) -> BattleCommand:
        return self.choose("What will you do? ", BattleCommand.parse, BATTLE_HINTS)

    def yes_no(self, text: str) -> bool:
        return self.choose(text, parse_yes_no, YES_NO_HINTS)
