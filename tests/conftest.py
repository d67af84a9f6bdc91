"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


class FakeSong:
    """Song generator that returns a fixed skeleton and records its arguments."""

    def __init__(self, skeleton: str = "V1 I0 FIRSTw FIFTHw SIXTHw FOURTHw"):
        self.skeleton = skeleton
        self.calls: list[dict] = []

    def generate(
        self,
        melody_instrument,
        chords_instrument,
        percussion_instrument,
        key,
        melody_enabled,
        chords_enabled,
        percussion_enabled,
    ) -> str:
        self.calls.append(
            {
                "melody_instrument": melody_instrument,
                "chords_instrument": chords_instrument,
                "percussion_instrument": percussion_instrument,
                "key": key,
                "melody_enabled": melody_enabled,
                "chords_enabled": chords_enabled,
                "percussion_enabled": percussion_enabled,
            }
        )
        return self.skeleton


class FakePlayer:
    """Player that records what it was asked to do."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.started: list = []
        self.pauses = 0

    def start(self, sequence) -> None:
        if self.error is not None:
            raise self.error
        self.started.append(sequence)

    def pause(self) -> None:
        self.pauses += 1


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def fake_song() -> FakeSong:
    return FakeSong()


@pytest.fixture
def fake_player() -> FakePlayer:
    return FakePlayer()
