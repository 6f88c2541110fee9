"""Body text extraction: turns an HTML document into an :class:`ExtractedText`."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import quote

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    NavigableString,
    RubyParenthesisString,
    RubyTextString,
    Stylesheet,
)

from font_optimizer.config import Settings, settings as default_settings
from font_optimizer.pages.models import ExtractedText

# JavaScript's \s set: WhiteSpace and LineTerminator code points, including
# the full-width (ideographic) space and BOM.  Python's \s also matches
# U+001C..U+001F and U+0085, which are kept as text.
_WHITESPACE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

# Characters left unescaped by JavaScript's encodeURIComponent, on top of the
# letters, digits and "_.-~" that quote() never escapes.
_URI_COMPONENT_SAFE = "!~*'()"

# String types that make up the body's text content.  Comments are left out;
# <style> text and ruby annotations count like any other text.
_TEXT_CONTENT_TYPES = (
    NavigableString,
    CData,
    Stylesheet,
    RubyTextString,
    RubyParenthesisString,
)

# Removed from the extraction tree.  <template> content is an inert fragment,
# not part of the text content.
_EXCLUDED_TAGS = ["script", "template"]


class ExtractionError(ValueError):
    """Raised when a page's body text cannot be extracted."""


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _unique_characters(text: str) -> str:
    """Return *text* without whitespace, each character kept once in order."""
    cleaned = _WHITESPACE.sub("", text)
    return "".join(dict.fromkeys(cleaned))


def encode_uri_component(text: str) -> str:
    """Percent-encode *text* the way ``encodeURIComponent`` does."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_body_text(html_text: str, parser: str | None = None) -> ExtractedText:
    """Extract the unique visible characters of the ``<body>`` of *html_text*.

    The document is parsed into a private tree, so removing ``<script>``
    elements here never affects a tree that gets serialized later.

    The default ``html5lib`` parser follows the HTML5 tree-building rules: an
    omitted ``<body>`` tag is implied and content after ``</body>`` is moved
    back into the body.  Only documents such as framesets end up without one.

    Raises:
        ExtractionError: If the document has no ``<body>`` element.
    """
    soup = BeautifulSoup(html_text, parser or default_settings.html_parser)
    body = soup.body
    if body is None:
        raise ExtractionError("No <body> tag found in the HTML file.")

    for element in body.find_all(_EXCLUDED_TAGS):
        # A <script> nested in a <template> is already gone with its parent
        if not element.decomposed:
            element.decompose()

    characters = _unique_characters(body.get_text(types=_TEXT_CONTENT_TYPES))
    return ExtractedText(characters=characters, encoded=encode_uri_component(characters))


def extract_from_file(path: Path, settings: Settings | None = None) -> ExtractedText:
    """Read the HTML file at *path* (UTF-8) and extract its body characters.

    Raises:
        ExtractionError: Wrapping any read, decode or extraction failure,
            with *path* in the message.
    """
    settings = settings or default_settings
    try:
        html_text = Path(path).read_text(encoding="utf-8")
        return extract_body_text(html_text, parser=settings.html_parser)
    except Exception as exc:
        raise ExtractionError(f"Error processing file {path}: {exc}") from exc
