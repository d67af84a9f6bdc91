"""
Skeleton library - discovers and loads song skeleton templates.

Templates can come from:
1. Built-in library (shipped with package)
2. Project templates (user's project/skeletons directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_jam.song.models import SkeletonTemplate

logger = logging.getLogger(__name__)


class SkeletonLibrary:
    """
    Discovers and loads skeleton templates.

    Templates are loaded from YAML files in the library and project directories.
    Project templates override library templates with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the library.

        Args:
            library_path: Path to built-in template library
            project_path: Path to project templates directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, SkeletonTemplate] = {}

    def list_templates(self) -> list[SkeletonTemplate]:
        """
        List all available templates, sorted by name.

        Project templates take precedence over library templates.
        """
        templates: dict[str, SkeletonTemplate] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                template = self._load_template_file(path)
                if template:
                    templates[template.name] = template

        return [templates[name] for name in sorted(templates)]

    def get_template(self, name: str) -> SkeletonTemplate | None:
        """
        Get a template by name.

        Args:
            name: Template name

        Returns:
            SkeletonTemplate if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                template = self._load_template_file(path)
                if template:
                    self._cache[name] = template
                    return template

        return None

    def _load_template_file(self, path: Path) -> SkeletonTemplate | None:
        """Load a template from a YAML file; broken files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            data.setdefault("name", path.stem)
            return SkeletonTemplate.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError, AttributeError) as e:
            logger.warning(f"Skipping skeleton template {path}: {e}")
            return None

    def clear_cache(self) -> None:
        """Clear the template cache."""
        self._cache.clear()
