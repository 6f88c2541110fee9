"""Pages package: per-page text extraction & font link rewriting."""

from font_optimizer.pages.extractor import ExtractionError, extract_body_text, extract_from_file
from font_optimizer.pages.models import ExtractedText, PageResult, PageStatus, Route
from font_optimizer.pages.rewriter import rewrite_font_link, with_text_param

__all__ = [
    "extract_body_text",
    "extract_from_file",
    "rewrite_font_link",
    "with_text_param",
    "ExtractionError",
    "ExtractedText",
    "PageResult",
    "PageStatus",
    "Route",
]
