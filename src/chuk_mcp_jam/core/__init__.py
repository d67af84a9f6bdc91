"""
Core music primitives.

These are the pure, total building blocks everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- PitchClassWheel: The rotatable cycle of pitch-class names
- ScaleDegree: Position in the major scale, doubling as skeleton placeholder
- ChordQuality: major / minor / diminished triads
- Chord: Concrete root + quality
- TempoMarking / TempoTable: BPM to named tempo
- transpose: Skeleton + key -> concrete notation
- shift_notes: Concrete melody moved into a key
"""

from chuk_mcp_jam.core.chord import (
    DIATONIC_LADDER,
    MAJOR_SCALE_OFFSETS,
    Chord,
    ChordQuality,
    ScaleDegree,
    get_diatonic_chords,
)
from chuk_mcp_jam.core.pitch import PitchClass, PitchClassWheel
from chuk_mcp_jam.core.tempo import DEFAULT_TEMPO_TABLE, TEMPO_BUCKETS, TempoMarking, TempoTable
from chuk_mcp_jam.core.transpose import chord_table, contains_placeholder, shift_notes, transpose

__all__ = [
    # Pitch
    "PitchClass",
    "PitchClassWheel",
    # Chord
    "ScaleDegree",
    "ChordQuality",
    "Chord",
    "DIATONIC_LADDER",
    "MAJOR_SCALE_OFFSETS",
    "get_diatonic_chords",
    # Tempo
    "TempoMarking",
    "TempoTable",
    "TEMPO_BUCKETS",
    "DEFAULT_TEMPO_TABLE",
    # Transposition
    "chord_table",
    "contains_placeholder",
    "shift_notes",
    "transpose",
]
