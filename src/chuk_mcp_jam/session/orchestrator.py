"""
Song orchestrator - one jam session.

Holds the session configuration and drives the pipeline:
    skeleton (song generator)
    → concrete notation (transpose + tempo/instrument prefix)
    → parsed pattern (notation engine)
    → jam<N>.mid / tempjam<N>.mid (export namer + notation engine)
    → playback (player)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from chuk_mcp_jam.constants import ErrorMessages, SuccessMessages, TrackKind
from chuk_mcp_jam.core.tempo import DEFAULT_TEMPO_TABLE, TempoMarking, TempoTable
from chuk_mcp_jam.core.transpose import transpose
from chuk_mcp_jam.errors import NoSongGenerated
from chuk_mcp_jam.export.naming import ExportNamer
from chuk_mcp_jam.notation.engine import MidoNotationEngine
from chuk_mcp_jam.playback.player import MidiPlayer
from chuk_mcp_jam.session.config import ExportedArtifact, SessionConfig
from chuk_mcp_jam.session.interfaces import NotationEngine, Player, SongGenerator

logger = logging.getLogger(__name__)


class SongOrchestrator:
    """
    Owns a SessionConfig and the collaborators that act on it.

    Setters change configuration only; nothing is generated, written or
    played until generate/export/play is called.
    """

    def __init__(
        self,
        song: SongGenerator,
        engine: NotationEngine | None = None,
        player: Player | None = None,
        output_dir: Path | None = None,
        config: SessionConfig | None = None,
        tempo_table: TempoTable = DEFAULT_TEMPO_TABLE,
    ):
        """
        Initialize the session.

        Args:
            song: Skeleton provider
            engine: Notation engine (default: mido-backed)
            player: Playback device (default: MidiPlayer on the default port)
            output_dir: Where MIDI files go (default: current working directory)
            config: Starting configuration (default: C, Andantino, piano, rock, all tracks)
            tempo_table: BPM to marking lookup
        """
        self.song = song
        self.engine: NotationEngine = engine or MidoNotationEngine()
        self.player: Player = player or MidiPlayer()
        self.namer = ExportNamer(output_dir)
        self.config = config or SessionConfig()
        self.tempo_table = tempo_table

        self._notation: str | None = None
        self._pattern: Any = None
        self._artifacts: list[ExportedArtifact] = []

    @property
    def notation(self) -> str | None:
        """Concrete notation of the current song, if one was generated."""
        return self._notation

    @property
    def artifacts(self) -> list[ExportedArtifact]:
        """Files written this session, oldest first."""
        return list(self._artifacts)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def generate(self) -> str:
        """
        Generate a new song in the configured key.

        Returns:
            The concrete notation string

        Raises:
            MalformedNotation: If the notation engine rejects the result
        """
        config = self.config
        skeleton = self.song.generate(
            config.melody_directive,
            config.chords_directive,
            config.percussion_instrument,
            config.key,
            config.is_enabled(TrackKind.MELODY),
            config.is_enabled(TrackKind.CHORDS),
            config.is_enabled(TrackKind.PERCUSSION),
        )
        concrete = transpose(config.key, skeleton)
        notation = f"{config.tempo.token} {config.melody_directive} {concrete}".rstrip()

        self._pattern = self.engine.parse(notation)
        self._notation = notation

        logger.info(
            SuccessMessages.SONG_GENERATED.format(key=config.key, tempo=config.tempo.value)
        )
        logger.debug(notation)
        return notation

    def export(self) -> Path:
        """
        Save the current song as the next jam<N>.mid.

        Returns:
            Absolute path of the new file

        Raises:
            NoSongGenerated: If generate() has not been called
            IOFailure: If the file cannot be written
        """
        path = self._save(self.namer.export_path())
        self._artifacts.append(ExportedArtifact(path, self._notation, transient=False))
        logger.info(SuccessMessages.SONG_EXPORTED.format(path=path))
        return path

    def play(self) -> Path:
        """
        Write the current song to the next tempjam<N>.mid and play it.

        Returns:
            Absolute path of the playback file

        Raises:
            NoSongGenerated: If generate() has not been called
            IOFailure: If the file cannot be written or read back
            PlaybackUnavailable: If the player cannot be acquired
        """
        path = self._save(self.namer.playback_path())
        sequence = self.engine.load_from_file(path)
        self.player.start(sequence)

        # Only a playback that actually started is recorded
        self._artifacts.append(ExportedArtifact(path, self._notation, transient=True))
        self.config.export_directory = f"{path.parent}{os.sep}"

        logger.info(SuccessMessages.PLAYBACK_STARTED.format(path=path))
        return path

    def stop(self) -> None:
        """Pause playback. Safe to call when nothing is playing."""
        self.player.pause()

    def _save(self, path: Path) -> Path:
        if self._notation is None:
            raise NoSongGenerated(ErrorMessages.NO_SONG)
        self.engine.save_to_file(self._pattern, path)
        return path

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_key(self, key: int) -> None:
        self.config.key = key

    def set_tempo(self, bpm: int) -> TempoMarking:
        """
        Select the tempo marking for a BPM.

        A BPM with no marking keeps the current one.

        Returns:
            The marking now in effect
        """
        marking = self.tempo_table.resolve(bpm)
        if marking is None:
            logger.info(
                SuccessMessages.TEMPO_UNCHANGED.format(bpm=bpm, tempo=self.config.tempo.value)
            )
        else:
            self.config.tempo = marking
        return self.config.tempo

    def set_melody_instrument(self, instrument: int) -> None:
        self.config.melody_instrument = instrument

    def set_chords_instrument(self, instrument: int) -> None:
        self.config.chords_instrument = instrument

    def set_percussion_instrument(self, flavor: int) -> None:
        self.config.percussion_instrument = flavor

    def toggle_melody(self) -> bool:
        return self.config.toggle(TrackKind.MELODY)

    def toggle_chords(self) -> bool:
        return self.config.toggle(TrackKind.CHORDS)

    def toggle_percussion(self) -> bool:
        return self.config.toggle(TrackKind.PERCUSSION)

    def get_export_directory(self) -> str:
        """
        Directory of the last playback file, with a trailing separator.

        Empty until a play() succeeds.
        """
        return self.config.export_directory
