"""
Playback - streams generated songs to a MIDI output port.
"""

from chuk_mcp_jam.playback.player import MidiPlayer

__all__ = [
    "MidiPlayer",
]
