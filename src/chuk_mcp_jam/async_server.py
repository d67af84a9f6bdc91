#!/usr/bin/env python3
"""
Async Jam MCP Server using chuk-mcp-server

This server exposes a single jam session as MCP tools. Songs come from
key-agnostic skeletons, are transposed to the session key and can be
exported as MIDI files or played on the default MIDI output.

The server provides tools for:
- Generating songs from the skeleton library
- Setting key, tempo, instruments and enabled tracks
- Exporting songs without overwriting earlier exports
- Starting and stopping playback
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_jam.playback import MidiPlayer
from chuk_mcp_jam.session import SongOrchestrator
from chuk_mcp_jam.song import SkeletonLibrary, TemplateSong
from chuk_mcp_jam.tools import register_session_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-jam")

# Paths - use standard project structure, overridable from the environment
BASE_PATH = Path.cwd()
OUTPUT_DIR = Path(os.environ.get("JAM_OUTPUT_DIR", BASE_PATH))
SKELETONS_DIR = Path(os.environ.get("JAM_SKELETONS_DIR", BASE_PATH / "skeletons"))
MIDI_PORT = os.environ.get("JAM_MIDI_PORT") or None
LIBRARY_PATH = Path(__file__).parent / "song" / "library"

# Create the session
skeleton_library = SkeletonLibrary(
    library_path=LIBRARY_PATH,
    project_path=SKELETONS_DIR,
)
session = SongOrchestrator(
    song=TemplateSong(skeleton_library),
    player=MidiPlayer(port_name=MIDI_PORT),
    output_dir=OUTPUT_DIR,
)

# Register all tools
session_tools = register_session_tools(mcp, session, skeleton_library)

# Export tool functions for direct access
jam_generate = session_tools["jam_generate"]
jam_export = session_tools["jam_export"]
jam_play = session_tools["jam_play"]
jam_stop = session_tools["jam_stop"]
jam_set_key = session_tools["jam_set_key"]
jam_set_tempo = session_tools["jam_set_tempo"]
jam_set_melody_instrument = session_tools["jam_set_melody_instrument"]
jam_set_chords_instrument = session_tools["jam_set_chords_instrument"]
jam_set_percussion_instrument = session_tools["jam_set_percussion_instrument"]
jam_toggle_melody = session_tools["jam_toggle_melody"]
jam_toggle_chords = session_tools["jam_toggle_chords"]
jam_toggle_percussion = session_tools["jam_toggle_percussion"]
jam_get_session = session_tools["jam_get_session"]
jam_transpose = session_tools["jam_transpose"]
jam_list_skeletons = session_tools["jam_list_skeletons"]

logger.info("CHUK Jam MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Skeletons dir: {SKELETONS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
logger.info(f"  MIDI port: {MIDI_PORT or 'default'}")
