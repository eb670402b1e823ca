import pytest

from wayfarer.combat.commands import BattleCommand
from wayfarer.commands import Command
from wayfarer.interface.prompt import Prompter


def test_command_reprompts_until_valid(console, scripted):
    prompter = Prompter(console, scripted("dance", "", "  NORTH "))

    assert prompter.command() is Command.NORTH
    assert console.prompts == ["Enter a command: "] * 3
    assert console.lines.count("Please enter a valid command.") == 2
    assert console.lines.count("Use help to see commands.") == 2


def test_battle_command_hints(console, scripted):
    prompter = Prompter(console, scripted("fireball", "help"))

    assert prompter.battle_command() is BattleCommand.OPTIONS
    assert console.prompts == ["What will you do? ", "What will you do? "]
    assert console.lines == ["That is not a battle command.", "Use options to see what you can do."]


def test_yes_no(console, scripted):
    prompter = Prompter(console, scripted("sure", "Y"))

    assert prompter.yes_no("Continue? ") is True
    assert console.lines == ["Please enter Y or N."]


def test_ask_normalizes(console, scripted):
    prompter = Prompter(console, scripted("  Rusty Door "))
    assert prompter.ask("Which? ") == "rusty door"


def test_end_of_input_propagates(console, scripted):
    prompter = Prompter(console, scripted("dance"))
    with pytest.raises(EOFError):
        prompter.command()


def test_default_reader_uses_input(console, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda: "quit")
    assert Prompter(console).command() is Command.QUIT
