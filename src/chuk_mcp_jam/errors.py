"""
Exception hierarchy for the jam session.

Transposition, tempo lookup and export naming are total and never raise.
Everything here comes from I/O or from the notation and playback collaborators.
"""

from __future__ import annotations


class JamError(Exception):
    """Base class for all session errors."""


class IOFailure(JamError):
    """A MIDI file could not be written or read back."""


class PlaybackUnavailable(JamError):
    """The player or its output device cannot be acquired."""


class NoSongGenerated(JamError):
    """Export or playback was requested before a song was generated."""


class MalformedNotation(JamError, ValueError):
    """
    A notation token could not be parsed.

    Leftover scale-degree placeholders are the usual cause.
    """

    def __init__(self, token: str, position: int, reason: str = "unrecognised token") -> None:
        self.token = token
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed notation at token {position} ({token!r}): {reason}")
