"""
Key transposition - turns a key-agnostic skeleton into concrete notation.

A skeleton names chords by scale degree (FIRST..SEVENTH). Transposing
resolves every degree against the major-scale ladder of the chosen key:

    transpose(0, "FIRSTw FIFTHw")  -> "Cmajw Gmajw"
    transpose(2, "FIRSTw FIFTHw")  -> "Dmajw Amajw"

Everything here is pure and total. Unknown words pass through untouched.
"""

from __future__ import annotations

import re

from .chord import ScaleDegree, get_diatonic_chords
from .pitch import PitchClass, PitchClassWheel

# Longest first so the alternation never stops on a shorter name
_PLACEHOLDER_RE = re.compile(
    "|".join(sorted((degree.placeholder for degree in ScaleDegree), key=len, reverse=True))
)


def chord_table(
    key: int,
    wheel: PitchClassWheel = PitchClassWheel.REFERENCE,
) -> dict[str, str]:
    """
    Map each placeholder to its chord token in a key.

    Args:
        key: Chromatic offset from the reference tonic; taken modulo 12
        wheel: Pitch-class names to draw roots from

    Returns:
        {"FIRST": "Cmaj", "SECOND": "Dmin", ...} for key 0
    """
    chords = get_diatonic_chords(key, wheel)
    return {degree.placeholder: chords[degree - 1].token for degree in ScaleDegree}


def contains_placeholder(text: str) -> bool:
    """True if any FIRST..SEVENTH token remains in text."""
    return _PLACEHOLDER_RE.search(text) is not None


def transpose(
    key: int,
    skeleton: str,
    wheel: PitchClassWheel = PitchClassWheel.REFERENCE,
) -> str:
    """
    Substitute every scale-degree placeholder with its chord in a key.

    Args:
        key: Chromatic offset from the reference tonic; taken modulo 12
        skeleton: Notation containing FIRST..SEVENTH placeholders
        wheel: Pitch-class names to draw roots from

    Returns:
        The skeleton with no placeholder left
    """
    table = chord_table(key, wheel)

    def substitute(match: re.Match[str]) -> str:
        return table[match.group(0)]

    # A replacement can splice a new placeholder out of its neighbours
    # ("SECON" + "Dmin"), so run to a fixpoint. Each pass removes upper-case
    # letters, which bounds the loop.
    result, count = _PLACEHOLDER_RE.subn(substitute, skeleton)
    while count:
        result, count = _PLACEHOLDER_RE.subn(substitute, result)
    return result


# Single notes only: letter, accidental, octave, then durations and dot
_NOTE_RE = re.compile(r"(?P<name>[A-G][#b]?)(?P<octave>\d{1,2})?(?P<suffix>[whqistxo]*\.?)")
_DEFAULT_OCTAVE = 5


def shift_notes(
    semitones: int,
    line: str,
    wheel: PitchClassWheel = PitchClassWheel.REFERENCE,
) -> str:
    """
    Move every single note in a line of notation by a number of semitones.

    Octaves carry across the B-C boundary and shifted notes are respelled
    from the wheel. Rests, bar lines, chords and percussion pass through.

        shift_notes(7, "E5q G5q C6h")  -> "B5q D6q G6h"

    Args:
        semitones: Interval to move by (0 returns the line unchanged)
        line: Concrete notation
        wheel: Pitch-class names to respell with

    Returns:
        The line with its notes moved and whitespace preserved
    """
    if semitones == 0:
        return line

    def shift(token: re.Match[str]) -> str:
        match = _NOTE_RE.fullmatch(token.group(0))
        if match is None:
            return token.group(0)
        octave = int(match["octave"] or _DEFAULT_OCTAVE)
        pitch = PitchClass.parse(match["name"]) + 12 * octave + semitones
        new_octave, pitch_class = divmod(pitch, 12)
        return f"{wheel[pitch_class]}{new_octave}{match['suffix']}"

    return re.sub(r"\S+", shift, line)
