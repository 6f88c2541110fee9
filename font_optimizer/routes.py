"""Build-output discovery: turns a site's output directory into routes."""

from __future__ import annotations

from pathlib import Path
from typing import List

from font_optimizer.pages.models import Route


def discover_routes(dist_dir: Path | str) -> List[Route]:
    """Return one :class:`Route` per regular file under *dist_dir*, sorted by path.

    Raises:
        FileNotFoundError: If *dist_dir* does not exist or is not a directory.
    """
    root = Path(dist_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Build output directory not found: {root}")
    return [Route(dist_path=p) for p in sorted(root.rglob("*")) if p.is_file()]
