"""Data models for the page optimization pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass
class Route:
    """One artifact emitted by the site build.

    ``dist_path`` is ``None`` for routes that did not write a file.
    """

    dist_path: Optional[Path] = None


@dataclass
class ExtractedText:
    """Unique body characters of a page and their URI-component encoding."""

    characters: str
    encoded: str

    def __len__(self) -> int:
        return len(self.characters)


class PageStatus(str, Enum):
    SKIPPED_NOT_HTML = "skipped-not-html"
    SKIPPED_TOO_LONG = "skipped-too-long"
    PROCESSED = "processed"
    FAILED = "failed"


@dataclass
class PageResult:
    """Outcome of running the driver against a single route."""

    path: Optional[Path]
    status: PageStatus
    char_count: int = 0
    link_rewritten: bool = False
    error: Optional[str] = None
