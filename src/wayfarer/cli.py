import argparse
import logging
import sys
from pathlib import Path

from colorama import just_fix_windows_console

from . import __version__
from .content import build_demo_world, intro_cutscene
from .errors import SettingsError
from .interface.console import Console, Style
from .interface.prompt import Prompter
from .player import Player, Weapon
from .session import GameSession
from .settings import Settings
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="wayfarer",
        description="Wayfarer - a small turn-based text adventure",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    parser.add_argument("--fast", action="store_true", help="Skip cutscene and battle pauses.")
    parser.add_argument("--seed", type=int, default=None, help="Seed battle randomness.")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args) -> Settings:
    if args.no_color:
        settings.display.color = False
    if args.fast:
        settings.pacing.enabled = False
    if args.seed is not None:
        settings.battle.seed = args.seed
    return settings


def new_session(settings: Settings, console: Console, prompter: Prompter) -> GameSession:
    demo = build_demo_world()
    player = Player(
        location=demo.start,
        health=settings.player.starting_health,
        max_health=settings.player.max_health,
        weapon=Weapon.from_label(settings.player.starting_weapon),
    )
    return GameSession(demo.world, player, console=console, prompter=prompter, settings=settings)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else None)
    just_fix_windows_console()

    try:
        settings = apply_overrides(Settings.load(user_path=args.settings_path), args)
    except SettingsError as exc:
        logger.error("%s", exc)
        print(f"wayfarer: {exc}", file=sys.stderr)
        return 2

    console = Console(color=settings.display.color)
    prompter = Prompter(console)
    try:
        if not prompter.yes_no("Do you want to start the game? [Y/N] "):
            console.say("Maybe next time.")
            return 0
    except EOFError:
        console.say()
        return 0

    session = new_session(settings, console, prompter)
    intro_cutscene().play(console, session.pacer, Style.INFO)
    session.run()
    return 0
