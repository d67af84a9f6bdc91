"""
MIDI encoding - parsed note events to a single-track mido MidiFile.

Encoding is deterministic: the same events, tempo and programs always give
the same messages in the same order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack, bpm2tempo

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

TICKS_PER_BEAT = 480

# Channel 10 in 1-based numbering
DRUM_CHANNEL = 9


def _check_range(label: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{label} must be {low}-{high}, got {value}")


@dataclass(frozen=True)
class MidiEvent:
    """
    One sounding note on one channel.

    Times are absolute ticks from the start of the song.
    """

    pitch: int
    start_ticks: int
    duration_ticks: int
    velocity: int = 100
    channel: int = 0

    def __post_init__(self) -> None:
        _check_range("Pitch", self.pitch, 0, 127)
        _check_range("Velocity", self.velocity, 0, 127)
        _check_range("Channel", self.channel, 0, 15)
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")

    @property
    def end_ticks(self) -> int:
        return self.start_ticks + self.duration_ticks


def _timed_messages(events: Iterable[MidiEvent]) -> Iterator[tuple[int, int, Message]]:
    """(tick, order, message) for every note edge; releases sort first."""
    for event in events:
        yield (
            event.start_ticks,
            1,
            Message("note_on", channel=event.channel, note=event.pitch, velocity=event.velocity),
        )
        yield (
            event.end_ticks,
            0,
            Message("note_off", channel=event.channel, note=event.pitch, velocity=0),
        )


def events_to_midi(
    events: Iterable[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
    programs: Mapping[int, int] | None = None,
) -> MidiFile:
    """
    Encode note events as a type 1 MIDI file with one track.

    Args:
        events: Notes in any order
        tempo_bpm: Tempo written as the first message
        ticks_per_beat: Resolution (default 480)
        programs: Channel -> General MIDI program, sent at tick 0

    Returns:
        A mido MidiFile ready to be saved
    """
    track = MidiTrack()
    track.append(MetaMessage("set_tempo", tempo=bpm2tempo(tempo_bpm), time=0))
    for channel, program in sorted((programs or {}).items()):
        track.append(Message("program_change", channel=channel, program=program, time=0))

    # Stable sort keeps chord tones in the order they were written
    previous = 0
    for tick, _, message in sorted(_timed_messages(events), key=lambda item: item[:2]):
        track.append(message.copy(time=tick - previous))
        previous = tick

    track.append(MetaMessage("end_of_track", time=0))

    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    mid.tracks.append(track)
    return mid


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(round(beats * ticks_per_beat))
