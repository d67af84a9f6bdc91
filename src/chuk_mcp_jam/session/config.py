"""
Session configuration - everything a generate/export/play cycle depends on.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_jam.constants import (
    DEFAULT_INSTRUMENT,
    DEFAULT_KEY,
    DEFAULT_PERCUSSION,
    ErrorMessages,
    TrackKind,
)
from chuk_mcp_jam.core.tempo import TempoMarking


def instrument_directive(instrument: int) -> str:
    """Notation directive selecting a General MIDI program, e.g. 'I0'."""
    return f"I{instrument}"


class SessionConfig(BaseModel):
    """
    Mutable session state.

    Assignments are validated, so a bad key or instrument never lands.
    An empty enabled_tracks set is allowed.
    """

    key: int = Field(DEFAULT_KEY, description="Chromatic offset from C (0-11)")
    tempo: TempoMarking = Field(TempoMarking.ANDANTINO, description="Tempo marking")
    melody_instrument: int = Field(DEFAULT_INSTRUMENT, description="GM program for melody")
    chords_instrument: int = Field(DEFAULT_INSTRUMENT, description="GM program for chords")
    percussion_instrument: int = Field(
        int(DEFAULT_PERCUSSION), ge=0, description="Percussion flavour index"
    )
    enabled_tracks: set[TrackKind] = Field(
        default_factory=lambda: set(TrackKind), description="Tracks to generate"
    )
    export_directory: str = Field(
        "", description="Directory of the last playback file, trailing separator included"
    )

    model_config = {"validate_assignment": True}

    @field_validator("key")
    @classmethod
    def key_in_range(cls, v: int) -> int:
        if not 0 <= v <= 11:
            raise ValueError(ErrorMessages.INVALID_KEY.format(key=v))
        return v

    @field_validator("melody_instrument", "chords_instrument")
    @classmethod
    def instrument_in_range(cls, v: int) -> int:
        if not 0 <= v <= 127:
            raise ValueError(ErrorMessages.INVALID_INSTRUMENT.format(instrument=v))
        return v

    @property
    def melody_directive(self) -> str:
        return instrument_directive(self.melody_instrument)

    @property
    def chords_directive(self) -> str:
        return instrument_directive(self.chords_instrument)

    def is_enabled(self, track: TrackKind) -> bool:
        return track in self.enabled_tracks

    def toggle(self, track: TrackKind) -> bool:
        """Flip a track on or off; returns the new state."""
        self.enabled_tracks = self.enabled_tracks ^ {track}
        return self.is_enabled(track)

    def to_summary(self) -> dict[str, Any]:
        """Plain-data view for tool responses."""
        return {
            "key": self.key,
            "tempo": self.tempo.value,
            "melody_instrument": self.melody_instrument,
            "chords_instrument": self.chords_instrument,
            "percussion_instrument": self.percussion_instrument,
            "enabled": {track.value: self.is_enabled(track) for track in TrackKind},
            "export_directory": self.export_directory,
        }


@dataclass(frozen=True)
class ExportedArtifact:
    """A MIDI file written during the session."""

    path: Path
    notation: str
    transient: bool = False  # playback copy rather than a permanent export

    def to_dict(self) -> dict[str, Any]:
        return {"path": str(self.path), "transient": self.transient}
