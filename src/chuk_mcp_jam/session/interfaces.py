"""
Collaborator contracts for the session.

The session only depends on these shapes. The package ships one default for
each (TemplateSong, MidoNotationEngine, MidiPlayer); tests use fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class SongGenerator(Protocol):
    """Produces a key-agnostic skeleton string."""

    def generate(
        self,
        melody_instrument: str,
        chords_instrument: str,
        percussion_instrument: int,
        key: int,
        melody_enabled: bool,
        chords_enabled: bool,
        percussion_enabled: bool,
    ) -> str: ...


class NotationEngine(Protocol):
    """Parses concrete notation and moves it to and from disk."""

    def parse(self, notation: str) -> Any: ...

    def save_to_file(self, pattern: Any, path: Path) -> Path: ...

    def load_from_file(self, path: Path) -> Any: ...


class Player(Protocol):
    """Plays a loaded sequence."""

    def start(self, sequence: Any) -> None: ...

    def pause(self) -> None: ...
