"""
Pitch primitives - PitchClass and PitchClassWheel.

PitchClass represents the 12 chromatic pitches (octave-independent).
PitchClassWheel is the cyclic sequence of their names that keys rotate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

# Reference spelling, starting at the tonic C (module level to avoid IntEnum member issues)
_WHEEL_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "Bb",
    "B",
)
_SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
_FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

PITCH_CLASS_COUNT = 12


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % PITCH_CLASS_COUNT)

    def spell(self) -> str:
        """Get the notation name used by the reference wheel."""
        return _WHEEL_NAMES[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'Eb'."""
        name = name.strip()

        for names in (_WHEEL_NAMES, _SHARP_NAMES, _FLAT_NAMES):
            if name in names:
                return cls(names.index(name))

        raise ValueError(f"Unknown pitch class: {name}")


@dataclass(frozen=True)
class PitchClassWheel:
    """
    A cyclic sequence of exactly 12 pitch-class names.

    Rotation is circular: rotating by k and by k + 12 give the same wheel.

    Examples:
        PitchClassWheel.REFERENCE[0] = "C"
        PitchClassWheel.REFERENCE.rotate(2)[0] = "D"
        PitchClassWheel.REFERENCE.rotate(2)[11] = "C#"
    """

    names: tuple[str, ...]

    REFERENCE: ClassVar[PitchClassWheel]

    def __post_init__(self) -> None:
        if len(self.names) != PITCH_CLASS_COUNT:
            raise ValueError(
                f"Wheel must have {PITCH_CLASS_COUNT} pitch classes, got {len(self.names)}"
            )

    def rotate(self, steps: int) -> PitchClassWheel:
        """Rotate left by steps positions, wrapping around."""
        offset = steps % PITCH_CLASS_COUNT
        if offset == 0:
            return self
        return PitchClassWheel(self.names[offset:] + self.names[:offset])

    def __getitem__(self, index: int) -> str:
        return self.names[index % PITCH_CLASS_COUNT]

    def __len__(self) -> int:
        return PITCH_CLASS_COUNT

    def __iter__(self):
        return iter(self.names)

    def __str__(self) -> str:
        return " ".join(self.names)


PitchClassWheel.REFERENCE = PitchClassWheel(_WHEEL_NAMES)
