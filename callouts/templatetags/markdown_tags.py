# callouts/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from callouts.markdown.config import get_callout_options
from callouts.markdown.preprocessors.callout_transformer import transform
from callouts.markdown.renderer import render_callout_body, render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="callouts")
def callouts_filter(value):
    """Rewrite callouts only, leaving the rest of the markdown untouched"""
    return mark_safe(transform(value or "", get_callout_options(), render_body=render_callout_body))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes callout overrides from the template context"""
    processor_context = {
        "callouts": context.get("callouts"),
    }
    return mark_safe(render_markdown(value, context=processor_context))
