# callouts/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "header",  # callout header
            "mark",
            "ins",
            "del",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            # media
            "img",
            "figure",
            "figcaption",
            # svg inline icons
            "svg",
            "path",
            "circle",
            "rect",
            "line",
            "polyline",
            "g",
            # links
            "a",
            # forms (for task lists)
            "input",
            "label",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "role", "aria-label", "aria-hidden"],
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "input": ["type", "checked", "disabled"],
        "blockquote": ["class", "cite"],
        "ol": ["start", "type", "class"],
        # SVG attributes for callout icons
        "svg": [
            "xmlns",
            "width",
            "height",
            "viewBox",
            "viewbox",
            "fill",
            "stroke",
            "stroke-width",
            "stroke-linecap",
            "stroke-linejoin",
            "class",
            "aria-hidden",
            "focusable",
        ],
        "path": ["d", "fill", "stroke", "stroke-width"],
        "circle": ["cx", "cy", "r", "fill", "stroke"],
        "rect": ["x", "y", "width", "height", "rx", "ry"],
        "line": ["x1", "y1", "x2", "y2"],
        "polyline": ["points"],
        "g": ["fill", "stroke", "stroke-width"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and should run before any other HTML modifications.
    Callout wrappers, headers and their inline SVG icons are allowed through.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of dropping them
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        # On failure, return original HTML
        return html
