import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from django.conf import settings

from .icons import DEFAULT_ICONS

logger = logging.getLogger(__name__)

DEFAULT_CLASS_PREFIX = "callout"
DEFAULT_RENDER_HEADER = True
DEFAULT_WRAPPER = "div"
SUPPORTED_WRAPPERS = ("div", "blockquote")


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Callouts are rewritten into raw HTML blocks before Pandoc sees the
    document, so the reader must pass HTML blocks through untouched.
    ``markdown_in_html_blocks`` and ``native_divs`` are disabled for that
    reason; otherwise the indented callout body would be read as a code block.
    """
    return {
        "format": (
            "markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists"
            "+smart+pipe_tables+grid_tables+definition_lists+footnotes+abbreviations"
            "+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes"
            "+implicit_header_references+fancy_lists+tex_math_dollars+hard_line_breaks"
            "-markdown_in_html_blocks-native_divs"
        ),
        "extra_args": [
            # Math rendering with MathJax
            "--mathjax",
        ],
        "filters": [],
    }


def _pick(overrides, *keys):
    """Return (found, value) for the first of ``keys`` present in ``overrides``."""
    for key in keys:
        if key in overrides:
            return True, overrides[key]
    return False, None


@dataclass(frozen=True)
class CalloutConfig:
    """Resolved callout options. Build with :meth:`from_overrides`."""

    class_prefix: str = DEFAULT_CLASS_PREFIX
    render_header: bool = DEFAULT_RENDER_HEADER
    wrapper: str = DEFAULT_WRAPPER
    icons: Mapping = field(default_factory=lambda: dict(DEFAULT_ICONS))

    @classmethod
    def from_overrides(cls, overrides=None) -> "CalloutConfig":
        """
        Merge caller-supplied overrides onto the defaults.

        Accepts camelCase (``classPrefix``) or snake_case (``class_prefix``)
        keys. Invalid values fall back to the default for that option and
        unknown keys are ignored.
        """
        if isinstance(overrides, CalloutConfig):
            return overrides
        if not isinstance(overrides, Mapping):
            overrides = {}

        _, class_prefix = _pick(overrides, "classPrefix", "class_prefix")
        if not isinstance(class_prefix, str) or not class_prefix.strip():
            class_prefix = DEFAULT_CLASS_PREFIX
        class_prefix = class_prefix.strip()

        found, render_header = _pick(overrides, "renderHeader", "render_header")
        render_header = bool(render_header) if found else DEFAULT_RENDER_HEADER

        _, wrapper = _pick(overrides, "wrapper")
        if wrapper not in SUPPORTED_WRAPPERS:
            wrapper = DEFAULT_WRAPPER

        _, icons = _pick(overrides, "icons")
        if isinstance(icons, Mapping):
            # Keys are matched against lowercase modifiers
            icons = {
                str(key).lower(): value
                for key, value in icons.items()
                if isinstance(value, str)
            }
        else:
            icons = dict(DEFAULT_ICONS)

        return cls(
            class_prefix=class_prefix,
            render_header=render_header,
            wrapper=wrapper,
            icons=icons,
        )


def get_callout_options(overrides=None):
    """
    Collect callout options from ``settings.CALLOUTS`` and per-call overrides.

    Per-call overrides win. The result is a plain dict; validation happens in
    :meth:`CalloutConfig.from_overrides`.
    """
    options = {}

    configured = getattr(settings, "CALLOUTS", None)
    if isinstance(configured, Mapping):
        options.update(configured)
    elif configured is not None:
        logger.warning(
            "settings.CALLOUTS must be a dict, got %s; using defaults",
            type(configured).__name__,
        )

    if isinstance(overrides, Mapping):
        options.update(overrides)

    return options
