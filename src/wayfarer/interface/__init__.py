"""
Terminal-facing collaborators of the game core: colored output, pacing and
scripted cutscenes. Prompting lives in ``wayfarer.interface.prompt``.
"""
from .console import Console, RecordingConsole, Style
from .pacing import Pacer
from .cutscene import Cutscene, CutscenePart, monologue, speaker_line

__all__ = [
    "Console",
    "RecordingConsole",
    "Style",
    "Pacer",
    "Cutscene",
    "CutscenePart",
    "monologue",
    "speaker_line",
]
