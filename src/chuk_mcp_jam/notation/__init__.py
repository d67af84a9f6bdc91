"""
Notation pipeline - music strings to MIDI files.

The pipeline:
    concrete notation string
    → NotationPattern (note events per voice)
    → mido MidiFile
    → .mid on disk
"""

from chuk_mcp_jam.notation.engine import MidoNotationEngine
from chuk_mcp_jam.notation.midi import (
    DRUM_CHANNEL,
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
)
from chuk_mcp_jam.notation.parser import NotationPattern, parse_duration, parse_notation

__all__ = [
    # Engine
    "MidoNotationEngine",
    # Parser
    "NotationPattern",
    "parse_duration",
    "parse_notation",
    # MIDI
    "DRUM_CHANNEL",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
]
