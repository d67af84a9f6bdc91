"""
Jam session - configuration and the generate/export/play pipeline.

This module provides:
- SessionConfig: Key, tempo, instruments and enabled tracks
- SongOrchestrator: Drives generation, export and playback
- SongGenerator / NotationEngine / Player: Collaborator contracts
"""

from chuk_mcp_jam.session.config import ExportedArtifact, SessionConfig, instrument_directive
from chuk_mcp_jam.session.interfaces import NotationEngine, Player, SongGenerator
from chuk_mcp_jam.session.orchestrator import SongOrchestrator

__all__ = [
    "ExportedArtifact",
    "NotationEngine",
    "Player",
    "SessionConfig",
    "SongGenerator",
    "SongOrchestrator",
    "instrument_directive",
]
