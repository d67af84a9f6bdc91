"""
Export naming - never overwrite an existing MIDI file.

Names are <base><N>.mid with N counting up from 0 until an unused path is
found. The namer only checks; the caller claims the path by writing it
straight away. Two callers in different processes can still race.
"""

from __future__ import annotations

from pathlib import Path

from chuk_mcp_jam.constants import EXPORT_BASE_NAME, MIDI_SUFFIX, PLAYBACK_BASE_NAME


def next_available_name(base_name: str, directory: Path | None = None) -> Path:
    """
    Find the first unused <base_name><N>.mid in a directory.

    Args:
        base_name: File name prefix, e.g. 'jam'
        directory: Where to look (default: current working directory)

    Returns:
        Absolute path that did not exist when checked
    """
    directory = (directory or Path.cwd()).absolute()
    index = 0
    while True:
        candidate = directory / f"{base_name}{index}{MIDI_SUFFIX}"
        if not candidate.exists():
            return candidate
        index += 1


class ExportNamer:
    """
    Collision-avoiding names for one output directory.

    Permanent exports and transient playback copies use different bases,
    so their numbering sequences never collide.
    """

    def __init__(
        self,
        directory: Path | None = None,
        export_base: str = EXPORT_BASE_NAME,
        playback_base: str = PLAYBACK_BASE_NAME,
    ):
        self.directory = directory or Path.cwd()
        self.export_base = export_base
        self.playback_base = playback_base

    def next_available(self, base_name: str) -> Path:
        return next_available_name(base_name, self.directory)

    def export_path(self) -> Path:
        """Next permanent export path (jam<N>.mid)."""
        return self.next_available(self.export_base)

    def playback_path(self) -> Path:
        """Next transient playback path (tempjam<N>.mid)."""
        return self.next_available(self.playback_base)

    def __repr__(self) -> str:
        return f"ExportNamer({str(self.directory)!r})"
