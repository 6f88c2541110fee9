"""Font stylesheet link rewriting."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup

from font_optimizer.config import settings as default_settings

logger = logging.getLogger(__name__)

# An existing character filter runs from its delimiter to the end of the href
_TEXT_PARAM = re.compile(r"([?&])text=.*$", re.DOTALL)


def with_text_param(href: str, encoded_text: str) -> str:
    """Return *href* with its ``text=`` parameter set to *encoded_text*.

    An existing ``text=`` parameter is replaced together with everything that
    follows it.  Otherwise the parameter is appended with ``&``, or with ``?``
    when *href* has no query string yet.
    """
    fragment = f"text={encoded_text}"
    if _TEXT_PARAM.search(href):
        return _TEXT_PARAM.sub(lambda m: m.group(1) + fragment, href, count=1)

    if "?" not in href:
        delimiter = "?"
    elif href.endswith(("?", "&")):
        delimiter = ""
    else:
        delimiter = "&"
    return f"{href}{delimiter}{fragment}"


def rewrite_font_link(
    soup: BeautifulSoup,
    encoded_text: str,
    pattern: Optional[str] = None,
    path: Optional[Path] = None,
) -> bool:
    """Point the page's font stylesheet link at a glyph subset.

    Only the first ``<link>`` whose ``href`` contains *pattern* is touched.
    A missing link is not an error: a warning is logged (with *path* when
    given) and the document is left as it was.

    Returns:
        ``True`` if the ``href`` was rewritten, ``False`` otherwise.
    """
    pattern = pattern or default_settings.font_link_pattern
    link = soup.find("link", href=lambda value: value is not None and pattern in value)

    if link is None:
        if path is not None:
            logger.warning(f"The <link> tag for Google Fonts was not found: {path}")
        else:
            logger.warning("The <link> tag for Google Fonts was not found")
        return False

    link["href"] = with_text_param(link.get("href") or "", encoded_text)
    return True
