# callouts/markdown/postprocessors/__init__.py

from .callout_enhancer import callout_enhancer_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    callout_enhancer_default,  # Mark the first body paragraph of each callout
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
