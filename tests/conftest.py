"""Shared fixtures for the callouts test suite."""

import re

import django
import pypandoc
import pytest
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["callouts"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()


@pytest.fixture
def fake_pandoc(monkeypatch):
    """
    Replace pypandoc.convert_text so tests never shell out to pandoc.

    Sources with a line starting with an HTML tag are returned unchanged, like
    Pandoc does for raw HTML blocks; anything else comes back as a paragraph.
    """
    calls = []

    def convert_text(source, to, format=None, extra_args=(), filters=None):
        calls.append({"source": source, "to": to, "format": format})
        if re.search(r"^<", source, re.MULTILINE):
            return source
        return f"<p>{source}</p>\n"

    monkeypatch.setattr(pypandoc, "convert_text", convert_text)
    return calls


@pytest.fixture
def broken_pandoc(monkeypatch):
    def convert_text(*args, **kwargs):
        raise OSError("No pandoc was found")

    monkeypatch.setattr(pypandoc, "convert_text", convert_text)
