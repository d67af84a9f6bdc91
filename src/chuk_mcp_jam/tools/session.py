"""
Session tools - MCP tools for the jam session.

Tools for generating, transposing, exporting and playing songs, and for
changing the session configuration.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_jam.constants import ErrorMessages
from chuk_mcp_jam.core.transpose import chord_table, transpose
from chuk_mcp_jam.errors import JamError
from chuk_mcp_jam.session import SongOrchestrator
from chuk_mcp_jam.song import SkeletonLibrary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(message: str) -> str:
    return json.dumps({"status": "error", "message": message})


def register_session_tools(
    mcp: ChukMCPServer,
    session: SongOrchestrator,
    library: SkeletonLibrary | None = None,
) -> dict[str, Any]:
    """
    Register jam session tools with the MCP server.

    Args:
        mcp: The MCP server instance
        session: The session the tools act on
        library: Skeleton library for template listing

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    library = library or SkeletonLibrary()

    @mcp.tool  # type: ignore[arg-type]
    async def jam_generate() -> str:
        """
        Generate a new song with the current session settings.

        Picks a skeleton, transposes it to the session key and prefixes the
        tempo marking and melody instrument.

        Returns:
            JSON string with the generated notation

        Example:
            jam_generate()
        """
        try:
            notation = session.generate()
            return json.dumps(
                {
                    "status": "success",
                    "notation": notation,
                    "session": session.config.to_summary(),
                }
            )
        except (JamError, ValueError) as e:
            logger.exception("Failed to generate song")
            return _error(str(e))

    tools["jam_generate"] = jam_generate

    @mcp.tool  # type: ignore[arg-type]
    async def jam_export() -> str:
        """
        Export the current song to a MIDI file.

        Never overwrites: files are named jam0.mid, jam1.mid, ... and the
        first unused name wins.

        Returns:
            JSON string with the exported file path

        Example:
            jam_export()
        """
        try:
            path = session.export()
            return json.dumps({"status": "success", "path": str(path)})
        except JamError as e:
            logger.exception("Failed to export song")
            return _error(str(e))

    tools["jam_export"] = jam_export

    @mcp.tool  # type: ignore[arg-type]
    async def jam_play() -> str:
        """
        Play the current song.

        Writes a temporary tempjam<N>.mid copy and streams it to the
        default MIDI output.

        Returns:
            JSON string with the playback file path

        Example:
            jam_play()
        """
        try:
            path = session.play()
            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "export_directory": session.get_export_directory(),
                }
            )
        except JamError as e:
            logger.exception("Failed to start playback")
            return _error(str(e))

    tools["jam_play"] = jam_play

    @mcp.tool  # type: ignore[arg-type]
    async def jam_stop() -> str:
        """
        Stop playback.

        Returns:
            JSON string with status

        Example:
            jam_stop()
        """
        session.stop()
        return json.dumps({"status": "success", "message": "Playback stopped."})

    tools["jam_stop"] = jam_stop

    @mcp.tool  # type: ignore[arg-type]
    async def jam_set_key(key: int) -> str:
        """
        Set the session key.

        Args:
            key: Semitones above C (0 = C, 2 = D, 7 = G, ... 11 = B)

        Returns:
            JSON string with the updated session

        Example:
            jam_set_key(key=7)
        """
        try:
            session.set_key(key)
        except ValueError as e:
            return _error(str(e))
        return json.dumps({"status": "success", "session": session.config.to_summary()})

    tools["jam_set_key"] = jam_set_key

    @mcp.tool  # type: ignore[arg-type]
    async def jam_set_tempo(bpm: int) -> str:
        """
        Set the tempo by BPM.

        BPM values map to named markings (90 -> Andantino, 120 -> Allegro).
        A BPM with no marking (e.g. 105) keeps the current tempo.

        Args:
            bpm: Beats per minute, in steps of 5 from 40 to 220

        Returns:
            JSON string with the marking in effect

        Example:
            jam_set_tempo(bpm=120)
        """
        previous = session.config.tempo
        marking = session.set_tempo(bpm)
        return json.dumps(
            {
                "status": "success",
                "tempo": marking.value,
                "changed": marking != previous,
            }
        )

    tools["jam_set_tempo"] = jam_set_tempo

    @mcp.tool  # type: ignore[arg-type]
    async def jam_set_melody_instrument(instrument: int) -> str:
        """
        Set the melody instrument.

        Args:
            instrument: General MIDI program (0-127, 0 = piano)

        Returns:
            JSON string with the updated session

        Example:
            jam_set_melody_instrument(instrument=73)
        """
        try:
            session.set_melody_instrument(instrument)
        except ValueError as e:
            return _error(str(e))
        return json.dumps({"status": "success", "session": session.config.to_summary()})

    tools["jam_set_melody_instrument"] = jam_set_melody_instrument

    @mcp.tool  # type: ignore[arg-type]
    async def jam_set_chords_instrument(instrument: int) -> str:
        """
        Set the chords instrument.

        Args:
            instrument: General MIDI program (0-127, 0 = piano)

        Returns:
            JSON string with the updated session

        Example:
            jam_set_chords_instrument(instrument=24)
        """
        try:
            session.set_chords_instrument(instrument)
        except ValueError as e:
            return _error(str(e))
        return json.dumps({"status": "success", "session": session.config.to_summary()})

    tools["jam_set_chords_instrument"] = jam_set_chords_instrument

    @mcp.tool  # type: ignore[arg-type]
    async def jam_set_percussion_instrument(flavor: int) -> str:
        """
        Set the percussion flavour.

        Args:
            flavor: 0 = rock, 1 = funk, 2 = shuffle

        Returns:
            JSON string with the updated session

        Example:
            jam_set_percussion_instrument(flavor=1)
        """
        try:
            session.set_percussion_instrument(flavor)
        except ValueError as e:
            return _error(str(e))
        return json.dumps({"status": "success", "session": session.config.to_summary()})

    tools["jam_set_percussion_instrument"] = jam_set_percussion_instrument

    @mcp.tool  # type: ignore[arg-type]
    async def jam_toggle_melody() -> str:
        """
        Switch the melody track on or off.

        Returns:
            JSON string with the new state

        Example:
            jam_toggle_melody()
        """
        return json.dumps({"status": "success", "melody": session.toggle_melody()})

    tools["jam_toggle_melody"] = jam_toggle_melody

    @mcp.tool  # type: ignore[arg-type]
    async def jam_toggle_chords() -> str:
        """
        Switch the chords track on or off.

        Returns:
            JSON string with the new state

        Example:
            jam_toggle_chords()
        """
        return json.dumps({"status": "success", "chords": session.toggle_chords()})

    tools["jam_toggle_chords"] = jam_toggle_chords

    @mcp.tool  # type: ignore[arg-type]
    async def jam_toggle_percussion() -> str:
        """
        Switch the percussion track on or off.

        Returns:
            JSON string with the new state

        Example:
            jam_toggle_percussion()
        """
        return json.dumps({"status": "success", "percussion": session.toggle_percussion()})

    tools["jam_toggle_percussion"] = jam_toggle_percussion

    @mcp.tool  # type: ignore[arg-type]
    async def jam_get_session() -> str:
        """
        Get the current session settings.

        Includes the export directory (set by the first jam_play) and the
        files written so far.

        Returns:
            JSON string with session details

        Example:
            jam_get_session()
        """
        return json.dumps(
            {
                "status": "success",
                "session": session.config.to_summary(),
                "export_directory": session.get_export_directory(),
                "notation": session.notation,
                "artifacts": [artifact.to_dict() for artifact in session.artifacts],
            }
        )

    tools["jam_get_session"] = jam_get_session

    @mcp.tool  # type: ignore[arg-type]
    async def jam_transpose(skeleton: str, key: int) -> str:
        """
        Transpose a skeleton without touching the session.

        Replaces FIRST..SEVENTH with the diatonic chords of the key.

        Args:
            skeleton: Notation with scale-degree placeholders
            key: Semitones above C (0-11)

        Returns:
            JSON string with the concrete notation and chord table

        Example:
            jam_transpose(skeleton="FIRSTw FIFTHw SIXTHw FOURTHw", key=2)
        """
        if not 0 <= key <= 11:
            return _error(ErrorMessages.INVALID_KEY.format(key=key))
        return json.dumps(
            {
                "status": "success",
                "notation": transpose(key, skeleton),
                "chords": chord_table(key),
            }
        )

    tools["jam_transpose"] = jam_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def jam_list_skeletons() -> str:
        """
        List the available song skeletons.

        Returns:
            JSON string with template names, descriptions and percussion flavours

        Example:
            jam_list_skeletons()
        """
        templates = library.list_templates()
        return json.dumps(
            {
                "status": "success",
                "skeletons": [
                    {
                        "name": t.name,
                        "description": t.description,
                        "percussion": [flavor.name.lower() for flavor in t.flavors],
                    }
                    for t in templates
                ],
            }
        )

    tools["jam_list_skeletons"] = jam_list_skeletons

    return tools
