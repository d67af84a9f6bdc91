"""
Export naming - deterministic, non-destructive MIDI file names.
"""

from chuk_mcp_jam.export.naming import ExportNamer, next_available_name

__all__ = [
    "ExportNamer",
    "next_available_name",
]
