"""
Song skeletons - key-agnostic songs from a template library.
"""

from chuk_mcp_jam.song.library import SkeletonLibrary
from chuk_mcp_jam.song.models import SkeletonTemplate
from chuk_mcp_jam.song.template import TemplateSong

__all__ = [
    "SkeletonLibrary",
    "SkeletonTemplate",
    "TemplateSong",
]
