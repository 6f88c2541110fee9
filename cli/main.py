"""Font optimizer CLI: entry-point for post-build page processing.

Usage:
    python cli/main.py --help

Commands:
    optimize  → rewrite the font links of every page in a build output dir
    inspect   → show the characters a single page would request
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from font_optimizer.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from dataclasses import replace
from typing import Optional

import typer

from font_optimizer.config import settings
from font_optimizer.pages.extractor import ExtractionError, extract_from_file
from font_optimizer.pages.models import PageStatus
from font_optimizer.routes import discover_routes
from font_optimizer.runner import on_build_done, summarize

app = typer.Typer(
    name="font-optimizer",
    help="Subset Google Fonts requests to the characters each page uses.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure console logging before any command runs."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@app.command("optimize")
def optimize(
    dist_dir: Path = typer.Argument(..., help="Build output directory to process."),
    char_limit: Optional[int] = typer.Option(
        None, "--char-limit", help="Skip pages with more unique characters than this."
    ),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", help="Substring identifying the font stylesheet href."
    ),
) -> None:
    """Rewrite the font stylesheet link of every HTML page under DIST_DIR."""
    overrides = {}
    if char_limit is not None:
        overrides["char_limit"] = char_limit
    if pattern:
        overrides["font_link_pattern"] = pattern
    run_settings = replace(settings, **overrides)

    try:
        routes = discover_routes(dist_dir)
    except FileNotFoundError as e:
        typer.echo(f"[optimize] {e}")
        raise typer.Exit(1)

    typer.echo(f"[optimize] Processing {len(routes)} files under {dist_dir} …")
    counts = summarize(on_build_done(routes, run_settings))
    for status in PageStatus:
        typer.echo(f"  {status.value:<17} {counts[status]}")


@app.command("inspect")
def inspect(
    path: Path = typer.Argument(..., help="HTML file to analyse."),
) -> None:
    """Print the unique body characters of an HTML file and their encoding."""
    try:
        extracted = extract_from_file(path)
    except ExtractionError as e:
        typer.echo(f"[inspect] {e}")
        raise typer.Exit(1)

    typer.echo(f"[inspect] Characters : {len(extracted)}")
    if len(extracted) > settings.char_limit:
        typer.echo(f"[inspect] Over limit : {settings.char_limit} (page would be skipped)")
    typer.echo(f"[inspect] Unique     : {extracted.characters}")
    typer.echo(f"[inspect] Encoded    : {extracted.encoded}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
