"""Post-build driver for the font optimizer.

``on_build_done`` is the hook a site build calls once every page has been
written.  It walks the emitted routes one by one:

    filter .html → parse → extract characters → check limit → rewrite link → save

Each route is isolated: a failure is logged with the file path and the next
route is processed as usual.
"""

from __future__ import annotations

import logging
import os
from collections import Counter
from pathlib import Path
from typing import Iterable, List

from bs4 import BeautifulSoup

from font_optimizer.config import Settings, settings as default_settings
from font_optimizer.pages.extractor import extract_from_file
from font_optimizer.pages.models import PageResult, PageStatus, Route
from font_optimizer.pages.rewriter import rewrite_font_link

logger = logging.getLogger(__name__)


def _is_html(route: Route, settings: Settings) -> bool:
    return route.dist_path is not None and os.fspath(route.dist_path).endswith(
        settings.html_suffix
    )


def process_route(route: Route, settings: Settings | None = None) -> PageResult:
    """Optimize the font link of the page written for *route*.

    Returns:
        A :class:`PageResult` whose status is one of the four terminal
        states.  This function does not raise for per-page failures.
    """
    settings = settings or default_settings

    path = route.dist_path
    try:
        if not _is_html(route, settings):
            return PageResult(path=path, status=PageStatus.SKIPPED_NOT_HTML)
        path = Path(path)

        # ------------------------------------------------------------------
        # Output document, parsed separately from the extraction tree
        # ------------------------------------------------------------------
        html_content = path.read_text(encoding="utf-8")
        soup = BeautifulSoup(html_content, settings.html_parser)

        extracted = extract_from_file(path, settings)

        if len(extracted) > settings.char_limit:
            logger.warning(
                f"Skipped processing {path} because text length exceeds characters limit "
                f"({len(extracted)} > {settings.char_limit})."
            )
            return PageResult(
                path=path,
                status=PageStatus.SKIPPED_TOO_LONG,
                char_count=len(extracted),
            )

        rewritten = rewrite_font_link(
            soup, extracted.encoded, pattern=settings.font_link_pattern, path=path
        )

        path.write_text(str(soup), encoding="utf-8")
        logger.info(f"Processed and saved: {path}")
        return PageResult(
            path=path,
            status=PageStatus.PROCESSED,
            char_count=len(extracted),
            link_rewritten=rewritten,
        )
    except Exception as exc:
        logger.error(f"Error processing route {path}: {exc}")
        return PageResult(path=path, status=PageStatus.FAILED, error=str(exc))


def optimize_routes(
    routes: Iterable[Route], settings: Settings | None = None
) -> List[PageResult]:
    """Process *routes* sequentially and return one result per route."""
    settings = settings or default_settings
    return [process_route(route, settings) for route in routes]


def summarize(results: Iterable[PageResult]) -> Counter:
    """Count *results* by :class:`PageStatus`."""
    return Counter(result.status for result in results)


def on_build_done(
    routes: Iterable[Route], settings: Settings | None = None
) -> List[PageResult]:
    """Build-completion hook.  Never raises; a broken run yields what it got."""
    results: List[PageResult] = []
    try:
        for route in routes:
            results.append(process_route(route, settings))
    except Exception as exc:
        logger.error(f"Font optimization aborted: {exc}")

    counts = summarize(results)
    logger.info(
        "Font optimization finished: "
        + ", ".join(f"{status.value}={counts[status]}" for status in PageStatus)
    )
    return results
