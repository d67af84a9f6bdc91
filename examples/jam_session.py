#!/usr/bin/env python3
"""
Example: Run a jam session without the MCP server.

This demonstrates the session pipeline - skeleton, transposition, export.
Run this script to write the same song in three keys and two tempos.

Usage:
    python examples/jam_session.py
    # Creates: examples/output/jam0.mid ... jam3.mid
"""

from pathlib import Path

from chuk_mcp_jam.core import chord_table
from chuk_mcp_jam.errors import PlaybackUnavailable
from chuk_mcp_jam.session import SongOrchestrator
from chuk_mcp_jam.song import TemplateSong


def main() -> None:
    """Export a skeleton in several keys, then try to play the last one."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    session = SongOrchestrator(TemplateSong(template="pop-anthem"), output_dir=output_dir)

    # Example 1: Same skeleton, three keys
    for key in (0, 2, 7):
        session.set_key(key)
        chords = chord_table(key)
        print(f"Key {key}: I={chords['FIRST']} V={chords['FIFTH']} vi={chords['SIXTH']}")
        session.generate()
        print(f"  Created: {session.export()}")

    # Example 2: Faster, without drums
    print("\nAllegro, no percussion...")
    session.set_tempo(120)
    session.toggle_percussion()
    print(f"  Notation: {session.generate()[:60]}...")
    print(f"  Created: {session.export()}")

    # Example 3: Playback needs a MIDI output (pip install chuk-mcp-jam[playback])
    print("\nPlaying...")
    try:
        path = session.play()
        print(f"  Playing {path.name}; press Enter to stop")
        input()
        session.stop()
    except PlaybackUnavailable as e:
        print(f"  Skipped: {e}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
