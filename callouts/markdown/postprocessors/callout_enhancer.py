# callouts/markdown/postprocessors/callout_enhancer.py
"""
Postprocessor that finishes callout markup after Pandoc conversion.

The callout preprocessor emits:
    <div class="callout callout--note">
        <header class="callout__header" aria-label="NOTE">...</header>
        <p>First paragraph.</p>
        <p>Second paragraph.</p>
    </div>

This postprocessor transforms it to:
    <div class="callout callout--note">
        <header class="callout__header" aria-label="NOTE">...</header>
        <p class="first-graf">First paragraph.</p>
        <p>Second paragraph.</p>
    </div>

Wrappers are recognised by carrying both the base class and a
``{prefix}--{modifier}`` class, so ``div`` and ``blockquote`` wrappers both work.
"""

from bs4 import BeautifulSoup

from ..config import CalloutConfig, get_callout_options


def _is_callout(tag, class_prefix: str) -> bool:
    classes = tag.get("class") or []
    if class_prefix not in classes:
        return False
    return any(cls.startswith(f"{class_prefix}--") for cls in classes)


def callout_enhancer(html: str, context: dict, class_prefix: str = "callout") -> str:
    """
    Mark the first body paragraph of every callout with ``first-graf``.

    Args:
        html: HTML string to process
        context: Context dictionary (unused but required for postprocessor signature)
        class_prefix: Base CSS class the callout wrappers carry

    Returns:
        Processed HTML with enhanced callouts
    """
    soup = BeautifulSoup(html, "html.parser")

    callouts = soup.find_all(
        lambda tag: tag.name in ("div", "blockquote") and _is_callout(tag, class_prefix)
    )

    for callout in callouts:
        first_paragraph = callout.find("p", recursive=False)
        if first_paragraph is None:
            continue

        classes = first_paragraph.get("class") or []
        if "first-graf" not in classes:
            classes.insert(0, "first-graf")
        first_paragraph["class"] = classes

    return str(soup)


def callout_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for callout_enhancer.

    Uses the same class prefix as the callout preprocessor.
    This is the function that should be registered in POSTPROCESSORS.
    """
    options = get_callout_options(context.get("callouts"))
    class_prefix = CalloutConfig.from_overrides(options).class_prefix
    return callout_enhancer(html, context, class_prefix=class_prefix)
