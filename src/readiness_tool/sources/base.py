"""Clases base para fuentes de exportaciones de bienestar."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from readiness_tool.model import RawWellnessRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourcePaths:
    """Folder holding the exported wellness files."""

    root: Path


class WellnessSource(ABC):
    """Wellness export reader; subclasses set ``export_glob`` and the parser."""

    export_glob: str = "*.json"

    def __init__(self, paths: SourcePaths) -> None:
        self._paths = paths

    @abstractmethod
    def validate(self) -> None:
        """Check that the export folder exists.

        Raises:
            FileNotFoundError: If required files are missing.
        """

    def newest_json(self) -> Path:
        """Return the most recently modified export matching ``export_glob``."""
        files = sorted(
            self._paths.root.glob(self.export_glob),
            key=lambda p: p.stat().st_mtime,
            reverse=True,
        )
        if not files:
            raise FileNotFoundError(f"No {self.export_glob} in {self._paths.root}")
        logger.info("Using wellness export %s", files[0])
        return files[0]

    @abstractmethod
    def load_records(self, path: Path) -> list[RawWellnessRecord]:
        """Parse one export file into raw daily records, sorted by date."""
