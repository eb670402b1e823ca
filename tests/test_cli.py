import pytest

from wayfarer import __version__, cli
from wayfarer.settings import Settings


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    # Keep the test run's logging handlers in place
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)


def feed(monkeypatch, *answers):
    remaining = list(answers)

    def fake_input():
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return remaining


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.settings_path is None
    assert args.debug is False
    assert args.no_color is False
    assert args.fast is False
    assert args.seed is None


def test_overrides_apply_on_top_of_settings():
    args = cli.parse_args(["--no-color", "--fast", "--seed", "7"])
    settings = cli.apply_overrides(Settings(), args)

    assert settings.display.color is False
    assert settings.pacing.enabled is False
    assert settings.battle.seed == 7


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_declining_to_start(monkeypatch, capsys):
    feed(monkeypatch, "maybe", "n")

    assert cli.main(["--no-color", "--fast"]) == 0

    out = capsys.readouterr().out
    assert "Please enter Y or N." in out
    assert "Maybe next time." in out
    assert "Welcome to the game!" not in out


def test_play_and_quit(monkeypatch, capsys):
    remaining = feed(monkeypatch, "y", "l", "quit")

    assert cli.main(["--no-color", "--fast", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert remaining == []
    assert out.index("Welcome to the game!") < out.index("You are at Clearing.")
    assert "There is a deep cave nearby." in out
    assert out.rstrip().endswith("Goodbye.")


def test_end_of_input_at_start_prompt(monkeypatch):
    feed(monkeypatch)
    assert cli.main(["--fast"]) == 0


def test_invalid_settings_file(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("battle:\n  pre_attack_pause_ms: -1\n", encoding="utf-8")

    assert cli.main(["--settings", str(path)]) == 2
    assert "Invalid settings at battle.pre_attack_pause_ms" in capsys.readouterr().err


def test_new_session_uses_player_settings():
    settings = Settings.from_dict({"player": {"starting_health": 5, "max_health": 15, "starting_weapon": "dagger"}})
    session = cli.new_session(settings, console=None, prompter=None)

    assert session.player.health == 5
    assert session.player.max_health == 15
    assert session.player.weapon.label == "dagger"
    assert session.room.name == "Clearing"
