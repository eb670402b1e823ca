from __future__ import annotations

import sys
from enum import Enum, auto
from typing import List, Optional, TextIO

from colorama import Fore
from colorama import Style as Ansi


class Style(Enum):
    """Semantic text styles; the console decides how each one is rendered."""

    PLAIN = auto()
    INFO = auto()
    EMPHASIS = auto()
    PROMPT = auto()
    HINT = auto()
    WARNING = auto()
    ERROR = auto()
    SPEECH = auto()


_ANSI = {
    Style.PLAIN: "",
    Style.INFO: Fore.CYAN,
    Style.EMPHASIS: Ansi.BRIGHT,
    Style.PROMPT: Fore.LIGHTGREEN_EX,
    Style.HINT: Fore.LIGHTYELLOW_EX,
    Style.WARNING: Fore.YELLOW,
    Style.ERROR: Fore.RED,
    Style.SPEECH: Fore.BLUE,
}


class Console:
    """Line-oriented game output with optional ANSI coloring.

    The stream defaults to whatever ``sys.stdout`` is at write time.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True) -> None:
        self._stream = stream
        self.color = color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def render(self, text: str, style: Style = Style.PLAIN) -> str:
        code = _ANSI[style]
        if not self.color or not code or not text:
            return text
        return f"{code}{text}{Ansi.RESET_ALL}"

    def write(self, text: str = "", style: Style = Style.PLAIN, end: str = "\n") -> None:
        self.stream.write(self.render(text, style) + end)
        if not end:
            self.stream.flush()

    def say(self, text: str = "") -> None:
        self.write(text)

    def info(self, text: str) -> None:
        self.write(text, Style.INFO)

    def hint(self, text: str) -> None:
        self.write(text, Style.HINT)

    def warn(self, text: str) -> None:
        self.write(text, Style.WARNING)

    def error(self, text: str) -> None:
        self.write(text, Style.ERROR)

    def prompt(self, text: str, style: Style = Style.PROMPT) -> None:
        self.write(text, style, end="")


class RecordingConsole(Console):
    """Console that keeps plain (uncolored) output in memory.

    Full lines land in ``lines``; prompt text (written without a newline)
    lands in ``prompts``. Used for headless runs and tests.
    """

    def __init__(self) -> None:
        super().__init__(stream=None, color=False)
        self.lines: List[str] = []
        self.prompts: List[str] = []

    def write(self, text: str = "", style: Style = Style.PLAIN, end: str = "\n") -> None:
        if end:
            self.lines.extend(text.split("\n"))
        else:
            self.prompts.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
        self.prompts.clear()
