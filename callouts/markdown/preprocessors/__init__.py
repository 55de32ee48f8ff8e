# callouts/markdown/preprocessors/__init__.py

from .callout_transformer import callout_transformer_default

PREPROCESSORS = [
    callout_transformer_default,  # Rewrite > [!TYPE] blockquotes into callout HTML
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
