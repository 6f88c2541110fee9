"""Centralised settings for the font optimizer.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

GOOGLE_FONTS_CSS2_PREFIX = "https://fonts.googleapis.com/css2?family="


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    char_limit: int = field(
        default_factory=lambda: int(os.environ.get("FONT_OPTIMIZER_CHAR_LIMIT", "1000"))
    )
    html_parser: str = field(
        default_factory=lambda: os.environ.get("FONT_OPTIMIZER_HTML_PARSER", "html5lib")
    )

    # ------------------------------------------------------------------
    # Link rewriting
    # ------------------------------------------------------------------
    font_link_pattern: str = field(
        default_factory=lambda: os.environ.get(
            "FONT_OPTIMIZER_LINK_PATTERN", GOOGLE_FONTS_CSS2_PREFIX
        )
    )

    # ------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------
    html_suffix: str = field(
        default_factory=lambda: os.environ.get("FONT_OPTIMIZER_HTML_SUFFIX", ".html")
    )

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("FONT_OPTIMIZER_LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton; import this everywhere:
#   from font_optimizer.config import settings
settings = Settings()
