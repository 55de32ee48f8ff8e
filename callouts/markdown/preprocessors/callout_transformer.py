# callouts/markdown/preprocessors/callout_transformer.py
"""
Preprocessor that turns GitHub-style callouts into HTML callout markup.

Converts:
    > [!TIP] Quick tip
    > Keep the body short.

Into:
    <div class="callout callout--tip">
        <header class="callout__header" aria-label="TIP">...</header>
        <p>Quick tip
        Keep the body short.</p>
    </div>

Blockquotes without a ``[!TYPE]`` marker on their first line, and every line
outside a blockquote, are left exactly as they were.
"""

import logging
import re

from django.utils.html import escape

from ..callout_meta import build_callout_meta, render_header
from ..config import CalloutConfig, get_callout_options

logger = logging.getLogger(__name__)

CALLOUT_HEADING_RE = re.compile(
    r"^\s{0,3}>\s*\[!([^\]]+)\]\s*(.*)$", re.IGNORECASE | re.ASCII
)
BLOCKQUOTE_LINE_RE = re.compile(r"^\s{0,3}>", re.ASCII)
BLOCKQUOTE_PREFIX_RE = re.compile(r"^\s{0,3}>\s?", re.ASCII)
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")

INDENT = "    "
TRAILING_WHITESPACE = " \t\x0b\x00"


def split_lines(text: str) -> list[str]:
    """Normalize line endings to ``\\n`` and split. Empty text gives ``[""]``."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def is_blockquote_line(line) -> bool:
    if line is None:
        return False
    return BLOCKQUOTE_LINE_RE.match(line) is not None


def collect_blockquote(lines: list[str], start: int) -> tuple[list[str], int]:
    """
    Collect contiguous blockquote lines starting at ``start``.

    Returns the block and the index of the first line after it.
    """
    block = []
    while start < len(lines) and is_blockquote_line(lines[start]):
        block.append(lines[start])
        start += 1
    return block, start


def scan_blocks(lines: list[str]):
    """Yield plain lines (``str``) and blockquote blocks (``list[str]``) in order."""
    index = 0
    while index < len(lines):
        if is_blockquote_line(lines[index]):
            block, index = collect_blockquote(lines, index)
            yield block
            continue

        yield lines[index]
        index += 1


def strip_blockquote_prefix(line: str) -> str:
    return BLOCKQUOTE_PREFIX_RE.sub("", line, count=1)


def render_fallback_body(content: str) -> str:
    """Escape each blank-line separated paragraph and wrap it in ``<p>``."""
    paragraphs = [part.strip() for part in PARAGRAPH_SPLIT_RE.split(content)]
    return "\n".join(f"<p>{escape(part)}</p>" for part in paragraphs if part)


def render_content(content: str, render_body=None) -> str:
    """
    Render callout body content to HTML.

    ``render_body`` is any callable taking markdown and returning HTML. When it
    is missing, raises or returns a non-string, the paragraph fallback is used
    instead so a callout is always produced.
    """
    if not content:
        return ""

    if render_body is None:
        return render_fallback_body(content)

    try:
        html = render_body(content)
    except Exception as e:
        logger.warning(
            "Callout body rendering failed, using plain fallback: %s", e, exc_info=True
        )
        return render_fallback_body(content)

    if not isinstance(html, str):
        logger.warning(
            "Callout body renderer returned %s, using plain fallback", type(html).__name__
        )
        return render_fallback_body(content)

    return html.strip()


def indent(html: str, level: int = 1) -> str:
    """Indent every line of ``html`` for readability."""
    prefix = INDENT * level
    lines = LINE_BREAK_RE.split(html)
    return "\n".join(prefix + line.rstrip(TRAILING_WHITESPACE) for line in lines)


def wrap_content(content: str, classes: str, wrapper: str) -> str:
    classes = escape(classes)
    if not content:
        return f'<{wrapper} class="{classes}"></{wrapper}>'
    return f'<{wrapper} class="{classes}">\n{content}\n</{wrapper}>'


def render_block(block: list[str], config: CalloutConfig, render_body=None) -> str:
    """
    Render one blockquote block.

    Returns callout markup when the first line carries a ``[!TYPE]`` heading,
    otherwise the block lines joined back together.
    """
    if not block:
        return ""

    match = CALLOUT_HEADING_RE.match(block[0].lstrip())
    if match is None:
        return "\n".join(block)

    raw_type = match.group(1).strip()
    title_remainder = match.group(2).strip()

    content_lines = []
    if title_remainder:
        content_lines.append(title_remainder)
    content_lines.extend(strip_blockquote_prefix(line) for line in block[1:])

    content = "\n".join(content_lines).strip()
    html = render_content(content, render_body)

    meta = build_callout_meta(config.class_prefix, raw_type, config.icons)
    logger.debug("Rendering callout %s (%d lines)", meta.modifier, len(block))

    segments = []
    if config.render_header:
        segments.append(render_header(meta))
    if html:
        segments.append(indent(html))

    inner = "\n".join(segment for segment in segments if segment)
    return wrap_content(inner, meta.classes, config.wrapper)


def transform(text: str, config=None, render_body=None) -> str:
    """
    Transform GitHub-style callouts found inside blockquotes into HTML.

    Args:
        text: Raw markdown content
        config: Mapping of option overrides, or a ready CalloutConfig
        render_body: Optional callable rendering callout body markdown to HTML

    Returns:
        Text with every callout blockquote replaced by its markup
    """
    config = CalloutConfig.from_overrides(config)

    result = []
    for item in scan_blocks(split_lines(text)):
        if isinstance(item, list):
            result.append(render_block(item, config, render_body))
        else:
            result.append(item)

    return "\n".join(result)


def callout_transformer_default(text: str, context: dict) -> str:
    """
    Default configuration for the callout transformer.

    Options come from ``settings.CALLOUTS`` overlaid with ``context["callouts"]``.
    Callout bodies are rendered with Pandoc. Register this in PREPROCESSORS.
    """
    if not text:
        return text

    # Lazy import to avoid circular import
    from ..renderer import render_callout_body

    options = get_callout_options(context.get("callouts"))
    return transform(text, options, render_body=render_callout_body)
