"""
Notation engine - parse music strings, write and read MIDI files.

This is the default collaborator the session uses to turn concrete notation
into a file on disk and back into a sequence the player can stream.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mido import MidiFile

from chuk_mcp_jam.constants import ErrorMessages
from chuk_mcp_jam.errors import IOFailure
from chuk_mcp_jam.notation.parser import NotationPattern, parse_notation

logger = logging.getLogger(__name__)


class MidoNotationEngine:
    """
    Notation engine backed by mido.

    parse -> save_to_file -> load_from_file is the whole contract.
    """

    def parse(self, notation: str) -> NotationPattern:
        """
        Parse a fully concrete music string.

        Raises:
            MalformedNotation: If any token is not notation
        """
        return parse_notation(notation)

    def save_to_file(self, pattern: NotationPattern, path: Path) -> Path:
        """
        Write a pattern as a standard MIDI file.

        Args:
            pattern: Parsed notation
            path: Destination; parent directories are created

        Returns:
            The path written

        Raises:
            IOFailure: If the file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            pattern.to_midi().save(str(path))
        except OSError as e:
            logger.error(ErrorMessages.SAVE_FAILED.format(error=e))
            raise IOFailure(ErrorMessages.SAVE_FAILED.format(error=e)) from e

        logger.debug(f"Wrote {len(pattern.events)} notes to {path}")
        return path

    def load_from_file(self, path: Path) -> MidiFile:
        """
        Read a MIDI file back for playback.

        Raises:
            IOFailure: If the file is missing or not valid MIDI
        """
        try:
            return MidiFile(str(path))
        except (OSError, EOFError, ValueError) as e:
            logger.error(ErrorMessages.LOAD_FAILED.format(error=e))
            raise IOFailure(ErrorMessages.LOAD_FAILED.format(error=e)) from e
