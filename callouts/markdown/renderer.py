# callouts/markdown/renderer.py

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors


def convert_markdown(text):
    """Convert markdown to HTML5 with Pandoc, without pre/post processing."""
    pandoc_config = get_pandoc_config()

    return pypandoc.convert_text(
        text,
        to="html5",
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )


def render_callout_body(text):
    """
    Body renderer handed to the callout transformer.

    Raises whatever pypandoc raises (e.g. OSError when pandoc is missing);
    the transformer falls back to plain paragraphs in that case.
    """
    return convert_markdown(text).strip()


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data.
            ``context["callouts"]`` overrides ``settings.CALLOUTS``.
    """
    context = context or {}

    # Pre-processing: callouts become raw HTML blocks
    text = apply_preprocessors(text, context)

    html = convert_markdown(text)

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html
