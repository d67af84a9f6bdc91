"""
Template song - a skeleton provider backed by the template library.

Picks a template and lays its lines out as voices. It does not compose.
The chord line stays key-agnostic for the session to transpose; the melody
is written in C and moved into the key here.
"""

from __future__ import annotations

import logging
import random

from chuk_mcp_jam.constants import CHORDS_VOICE, MELODY_VOICE, PERCUSSION_VOICE
from chuk_mcp_jam.core.transpose import shift_notes
from chuk_mcp_jam.song.library import SkeletonLibrary
from chuk_mcp_jam.song.models import SkeletonTemplate

logger = logging.getLogger(__name__)


class TemplateSong:
    """
    Builds skeleton strings from library templates.

    Example output with every track enabled:
        V0 I0 E5q G5q C6h ... V1 I0 FIRSTw FIFTHw ... V9 [BASS_DRUM]q ...
    """

    def __init__(
        self,
        library: SkeletonLibrary | None = None,
        template: str | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the provider.

        Args:
            library: Where templates come from (default: built-in library)
            template: Always use this template instead of picking at random
            seed: Seed for template choice, for reproducible sessions
        """
        self.library = library or SkeletonLibrary()
        self.template = template
        self._rng = random.Random(seed)

    def choose_template(self) -> SkeletonTemplate:
        if self.template is not None:
            chosen = self.library.get_template(self.template)
            if chosen is None:
                raise ValueError(f"Skeleton template not found: {self.template}")
            return chosen

        templates = self.library.list_templates()
        if not templates:
            raise ValueError(f"No skeleton templates in {self.library.library_path}")
        return self._rng.choice(templates)

    def generate(
        self,
        melody_instrument: str,
        chords_instrument: str,
        percussion_instrument: int,
        key: int,
        melody_enabled: bool,
        chords_enabled: bool,
        percussion_enabled: bool,
    ) -> str:
        """
        Produce a skeleton string.

        Args:
            melody_instrument: Instrument directive for the melody voice, e.g. 'I0'
            chords_instrument: Instrument directive for the chord voice
            percussion_instrument: Percussion flavour index
            key: Target key; the melody is moved into it, chords stay as placeholders
            melody_enabled: Emit the melody voice
            chords_enabled: Emit the chord voice
            percussion_enabled: Emit the percussion voice

        Returns:
            Skeleton with FIRST..SEVENTH placeholders
        """
        template = self.choose_template()
        voices: list[str] = []

        if melody_enabled and template.melody:
            melody = shift_notes(key % 12, template.melody)
            voices.append(f"V{MELODY_VOICE} {melody_instrument} {melody}")
        if chords_enabled:
            voices.append(f"V{CHORDS_VOICE} {chords_instrument} {template.chords}")
        if percussion_enabled:
            percussion = template.percussion_for(percussion_instrument)
            if percussion:
                voices.append(f"V{PERCUSSION_VOICE} {percussion}")

        logger.info(f"Skeleton from template '{template.name}' ({len(voices)} voices, key {key})")
        return " ".join(" ".join(voice.split()) for voice in voices)
