"""
Skeleton template model.

A template is a key-agnostic song: chord voices use FIRST..SEVENTH
placeholders, melody and percussion are concrete notation (melody in C).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_jam.constants import PercussionFlavor


class SkeletonTemplate(BaseModel):
    """A reusable song skeleton loaded from the template library."""

    name: str = Field(..., description="Template name (file stem)")
    description: str = Field("", description="Human-readable description")
    melody: str = Field("", description="Melody line in C, concrete notation")
    chords: str = Field(..., description="Chord line with scale-degree placeholders")
    percussion: dict[str, str] = Field(
        default_factory=dict, description="Percussion line per flavour name"
    )

    model_config = {"frozen": True}

    @field_validator("chords")
    @classmethod
    def chords_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Chord line cannot be empty")
        return v

    @field_validator("percussion")
    @classmethod
    def known_flavors(cls, v: dict[str, str]) -> dict[str, str]:
        known = {flavor.name.lower() for flavor in PercussionFlavor}
        unknown = sorted(set(v) - known)
        if unknown:
            raise ValueError(f"Unknown percussion flavours: {unknown}")
        return v

    @property
    def flavors(self) -> list[PercussionFlavor]:
        """Percussion flavours this template defines."""
        return [flavor for flavor in PercussionFlavor if flavor.name.lower() in self.percussion]

    def percussion_for(self, flavor: int) -> str | None:
        """
        Percussion line for a flavour index.

        Unknown indices and missing flavours fall back to rock; None if the
        template has no percussion at all.
        """
        try:
            name = PercussionFlavor(flavor).name.lower()
        except ValueError:
            name = PercussionFlavor.ROCK.name.lower()
        return self.percussion.get(name) or self.percussion.get(PercussionFlavor.ROCK.name.lower())
