"""
Notation parser - staccato-style music strings to note events.

Supported tokens (whitespace separated):

    T[Andantino]  T120        tempo by marking or BPM
    V0 .. V15                 voice, i.e. MIDI channel (V9 = percussion)
    I0 .. I127                instrument (program change) for the current voice
    |                         bar line, ignored
    C  C#5  Ebq  G5h.         note: letter, accidental, octave, durations, dot
    Cmajw  F#minh  Bdim3q     chord: root, quality, octave, durations
    Rq  Rh.                   rest
    [BASS_DRUM]q  [42]i       percussion name or raw MIDI pitch

Durations are w h q i s t x o (whole .. 1/128), summed when repeated;
a trailing '.' adds half again. Octave 5 holds middle C (C5 = 60); notes
default to octave 5 and chords to octave 3. Each voice keeps its own clock.

Anything else, leftover FIRST..SEVENTH placeholders included, raises
MalformedNotation.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from fractions import Fraction

from mido import MidiFile

from chuk_mcp_jam.constants import GMDrumNote
from chuk_mcp_jam.core.chord import ChordQuality
from chuk_mcp_jam.core.pitch import PitchClass
from chuk_mcp_jam.core.tempo import TempoMarking
from chuk_mcp_jam.errors import MalformedNotation
from chuk_mcp_jam.notation.midi import (
    DRUM_CHANNEL,
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
)

logger = logging.getLogger(__name__)

DURATION_BEATS: dict[str, Fraction] = {
    "w": Fraction(4),
    "h": Fraction(2),
    "q": Fraction(1),
    "i": Fraction(1, 2),
    "s": Fraction(1, 4),
    "t": Fraction(1, 8),
    "x": Fraction(1, 16),
    "o": Fraction(1, 32),
}

DEFAULT_NOTE_OCTAVE = 5
DEFAULT_CHORD_OCTAVE = 3
DEFAULT_TEMPO_BPM = 120
NOTE_VELOCITY = 100
DRUM_VELOCITY = 90

_DURATION = r"(?P<duration>[whqistxo]*)(?P<dot>\.)?"
_TEMPO_NAMED_RE = re.compile(r"T\[(?P<name>\w+)\]")
_TEMPO_BPM_RE = re.compile(r"T(?P<bpm>\d+)")
_VOICE_RE = re.compile(r"V(?P<voice>\d+)")
_INSTRUMENT_RE = re.compile(r"I(?P<program>\d+)")
_REST_RE = re.compile(r"R" + _DURATION)
_PERCUSSION_RE = re.compile(r"\[(?P<name>\w+)\]" + _DURATION)
_NOTE_RE = re.compile(
    r"(?P<letter>[A-G])(?P<accidental>[#b])?(?P<octave>\d{1,2})?"
    r"(?P<quality>maj|min|dim)?(?P<chord_octave>\d{1,2})?" + _DURATION
)


@dataclass
class NotationPattern:
    """
    A parsed music string.

    Holds everything needed to write a MIDI file, plus the source string
    for logging and inspection.
    """

    source: str
    tempo_bpm: int = DEFAULT_TEMPO_BPM
    events: list[MidiEvent] = field(default_factory=list)
    programs: dict[int, int] = field(default_factory=dict)

    @property
    def total_ticks(self) -> int:
        """Tick at which the last note ends."""
        return max((e.start_ticks + e.duration_ticks for e in self.events), default=0)

    @property
    def voices(self) -> list[int]:
        """Channels that carry at least one note."""
        return sorted({e.channel for e in self.events})

    def to_midi(self) -> MidiFile:
        return events_to_midi(
            self.events,
            tempo_bpm=self.tempo_bpm,
            ticks_per_beat=TICKS_PER_BEAT,
            programs=self.programs,
        )

    def __str__(self) -> str:
        return self.source


def parse_duration(letters: str, dotted: bool) -> Fraction:
    """Length in beats of a duration suffix; empty means a quarter note."""
    beats = sum((DURATION_BEATS[letter] for letter in letters), Fraction(0)) or Fraction(1)
    if dotted:
        beats *= Fraction(3, 2)
    return beats


def _drum_pitch(name: str) -> int | None:
    if name.isdigit():
        return int(name)
    try:
        return GMDrumNote[name.upper()].value
    except KeyError:
        return None


class _Cursor:
    """Per-voice clocks and the voice currently being written."""

    def __init__(self) -> None:
        self.voice = 0
        self._beats: dict[int, Fraction] = {}

    @property
    def now(self) -> Fraction:
        return self._beats.get(self.voice, Fraction(0))

    def advance(self, beats: Fraction) -> None:
        self._beats[self.voice] = self.now + beats


def parse_notation(notation: str) -> NotationPattern:
    """
    Parse a music string into a NotationPattern.

    Args:
        notation: Fully concrete music string

    Returns:
        The parsed pattern

    Raises:
        MalformedNotation: On the first token that cannot be understood
    """
    pattern = NotationPattern(source=notation)
    cursor = _Cursor()

    for position, token in enumerate(notation.split()):
        if token == "|":
            continue

        try:
            recognised = _parse_token(token, pattern, cursor)
        except ValueError as e:
            raise MalformedNotation(token, position, str(e)) from e
        if not recognised:
            raise MalformedNotation(token, position)

    logger.debug(
        f"Parsed {len(pattern.events)} notes on voices {pattern.voices} at {pattern.tempo_bpm} BPM"
    )
    return pattern


def _parse_token(token: str, pattern: NotationPattern, cursor: _Cursor) -> bool:
    """Apply one token to the pattern; False if the token is not notation."""
    if match := _TEMPO_NAMED_RE.fullmatch(token):
        pattern.tempo_bpm = TempoMarking.parse(match["name"]).bpm
        return True

    if match := _TEMPO_BPM_RE.fullmatch(token):
        bpm = int(match["bpm"])
        if bpm <= 0:
            raise ValueError(f"Tempo must be positive, got {bpm}")
        pattern.tempo_bpm = bpm
        return True

    if match := _VOICE_RE.fullmatch(token):
        voice = int(match["voice"])
        if not 0 <= voice <= 15:
            raise ValueError(f"Voice must be 0-15, got {voice}")
        cursor.voice = voice
        return True

    if match := _INSTRUMENT_RE.fullmatch(token):
        program = int(match["program"])
        if not 0 <= program <= 127:
            raise ValueError(f"Instrument must be 0-127, got {program}")
        pattern.programs[cursor.voice] = program
        return True

    if match := _REST_RE.fullmatch(token):
        cursor.advance(parse_duration(match["duration"], bool(match["dot"])))
        return True

    if match := _PERCUSSION_RE.fullmatch(token):
        pitch = _drum_pitch(match["name"])
        if pitch is None:
            raise ValueError(f"Unknown percussion instrument: {match['name']}")
        beats = parse_duration(match["duration"], bool(match["dot"]))
        velocity = DRUM_VELOCITY if cursor.voice == DRUM_CHANNEL else NOTE_VELOCITY
        _emit(pattern, cursor, [pitch], beats, velocity)
        return True

    if match := _NOTE_RE.fullmatch(token):
        if match["octave"] and match["chord_octave"]:
            raise ValueError("Octave given twice")
        root = PitchClass.parse(match["letter"] + (match["accidental"] or ""))
        beats = parse_duration(match["duration"], bool(match["dot"]))
        if match["quality"]:
            octave = int(match["octave"] or match["chord_octave"] or DEFAULT_CHORD_OCTAVE)
            intervals = ChordQuality(match["quality"]).intervals
        else:
            octave = int(match["octave"] or DEFAULT_NOTE_OCTAVE)
            intervals = (0,)
        base = root.value + 12 * octave
        _emit(pattern, cursor, [base + i for i in intervals], beats, NOTE_VELOCITY)
        return True

    return False


def _emit(
    pattern: NotationPattern,
    cursor: _Cursor,
    pitches: list[int],
    beats: Fraction,
    velocity: int,
) -> None:
    start = beats_to_ticks(float(cursor.now))
    end = beats_to_ticks(float(cursor.now + beats))
    for pitch in pitches:
        pattern.events.append(
            MidiEvent(
                pitch=pitch,
                start_ticks=start,
                duration_ticks=end - start,
                velocity=velocity,
                channel=cursor.voice,
            )
        )
    cursor.advance(beats)
