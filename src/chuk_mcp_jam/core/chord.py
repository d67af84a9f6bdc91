"""
Chord primitives - ScaleDegree, ChordQuality, Chord and the diatonic ladder.

Scale degrees are the key-independent design tokens: a skeleton says FIFTH,
a key turns that into Gmaj or Amaj.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .pitch import PitchClassWheel


class ScaleDegree(IntEnum):
    """
    Position in the major scale (1-7).

    Member names double as the placeholder tokens found in skeletons.
    """

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6
    SEVENTH = 7

    @property
    def placeholder(self) -> str:
        return self.name


class ChordQuality(str, Enum):
    """Triad qualities; the value is the notation suffix."""

    MAJOR = "maj"
    MINOR = "min"
    DIMINISHED = "dim"

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitones above the root, root included."""
        return _QUALITY_INTERVALS[self]


_QUALITY_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {
    ChordQuality.MAJOR: (0, 4, 7),
    ChordQuality.MINOR: (0, 3, 7),
    ChordQuality.DIMINISHED: (0, 3, 6),
}

# Triad quality on each degree of the major scale: I ii iii IV V vi vii°
DIATONIC_LADDER: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.MINOR,
    ChordQuality.MAJOR,
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
)

# Semitones from the tonic to each degree of the major scale (W W H W W W)
MAJOR_SCALE_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: a spelled root plus a quality.

    This is the resolved form of a scale degree in a key.
    """

    root: str
    quality: ChordQuality

    @property
    def token(self) -> str:
        """The notation token, e.g. 'Ebmin'."""
        return f"{self.root}{self.quality.value}"

    def __str__(self) -> str:
        return self.token


def get_diatonic_chords(
    key: int,
    wheel: PitchClassWheel = PitchClassWheel.REFERENCE,
) -> list[Chord]:
    """
    Get the seven diatonic triads of a major key.

    Args:
        key: Rotation of the wheel (0 = reference tonic); taken modulo 12
        wheel: Pitch-class names to draw roots from

    Returns:
        Chords for degrees FIRST..SEVENTH, in order
    """
    rotated = wheel.rotate(key)
    return [
        Chord(rotated[offset], quality)
        for offset, quality in zip(MAJOR_SCALE_OFFSETS, DIATONIC_LADDER, strict=True)
    ]
