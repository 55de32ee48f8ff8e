# callouts/markdown/callout_meta.py
"""
Presentation metadata for callouts: CSS modifier, display label and icon.

    > [!Read_me first]

resolves to modifier ``read-me-first``, label ``READ ME FIRST``, classes
``callout callout--read-me-first`` and the ``default`` icon.
"""

import re
from dataclasses import dataclass

from django.utils.html import format_html
from django.utils.safestring import mark_safe

from .icons import DEFAULT_ICONS

FALLBACK_MODIFIER = "callout"
FALLBACK_LABEL = "CALLOUT"

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_LABEL_SEPARATOR_RE = re.compile(r"[\s_]+")


@dataclass(frozen=True)
class CalloutMeta:
    modifier: str
    label: str
    prefix: str
    classes: str
    icon: str


def type_modifier(callout_type: str) -> str:
    """Slug a callout type for use in CSS classes and icon lookups."""
    slug = callout_type.upper().lower()
    slug = _NON_SLUG_RE.sub("-", slug).strip("-")
    return slug or FALLBACK_MODIFIER


def type_label(raw_type: str) -> str:
    """Normalize the raw callout type into the header label."""
    normalized = raw_type.strip()
    if not normalized:
        return FALLBACK_LABEL
    return _LABEL_SEPARATOR_RE.sub(" ", normalized).upper()


def icon_for_modifier(modifier: str, icons) -> str:
    """
    Return the icon markup for ``modifier``.

    Falls back to the ``default`` entry of ``icons`` and then to the built-in
    default icon. Values are returned verbatim.
    """
    icon = icons.get(modifier.lower())
    if isinstance(icon, str):
        return icon

    icon = icons.get("default")
    if isinstance(icon, str):
        return icon

    return DEFAULT_ICONS["default"]


def build_callout_meta(class_prefix: str, raw_type: str, icons) -> CalloutMeta:
    modifier = type_modifier(raw_type)
    return CalloutMeta(
        modifier=modifier,
        label=type_label(raw_type),
        prefix=class_prefix,
        classes=f"{class_prefix} {class_prefix}--{modifier}".strip(),
        icon=icon_for_modifier(modifier, icons),
    )


def render_header(meta: CalloutMeta) -> str:
    """
    Render the callout header with icon and label.

    The label and prefix are escaped; the icon is trusted markup and goes in
    as-is.
    """
    return format_html(
        '    <header class="{0}__header" aria-label="{1}">'
        '<span class="{0}__icon" aria-hidden="true">{2}</span>'
        '<span class="{0}__label">{1}</span></header>',
        meta.prefix,
        meta.label,
        mark_safe(meta.icon),
    )
