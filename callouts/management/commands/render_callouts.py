"""
Management command that prints a markdown file with its callouts rendered.

Usage:
    python manage.py render_callouts docs/guide.md
    python manage.py render_callouts --no-header --wrapper blockquote
    python manage.py render_callouts --plain   # skip Pandoc for callout bodies
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from callouts.markdown.config import get_callout_options
from callouts.markdown.preprocessors.callout_transformer import transform
from callouts.markdown.renderer import render_callout_body

DEFAULT_SOURCE = 'tests/sample.md'


class Command(BaseCommand):
    help = 'Print a markdown file with GitHub-style callouts transformed to HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            nargs='?',
            default=DEFAULT_SOURCE,
            help=f'Markdown file to transform (default: {DEFAULT_SOURCE})',
        )
        parser.add_argument(
            '--no-header',
            action='store_true',
            help='Do not render the callout header',
        )
        parser.add_argument(
            '--wrapper',
            type=str,
            choices=['div', 'blockquote'],
            help='Wrapper element for callouts (default: settings or div)',
        )
        parser.add_argument(
            '--class-prefix',
            type=str,
            help='Base CSS class for callouts (default: settings or callout)',
        )
        parser.add_argument(
            '--plain',
            action='store_true',
            help='Render callout bodies as escaped paragraphs instead of using Pandoc',
        )

    def handle(self, *args, **options):
        source = Path(options['path'])

        if not source.is_file():
            raise CommandError(f'File not found: {source}')

        try:
            contents = source.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandError(f'Unable to read: {source}') from exc

        overrides = {}
        if options.get('no_header'):
            overrides['renderHeader'] = False
        if options.get('wrapper'):
            overrides['wrapper'] = options['wrapper']
        if options.get('class_prefix'):
            overrides['classPrefix'] = options['class_prefix']

        render_body = None if options.get('plain') else render_callout_body

        self.stdout.write(
            transform(contents, get_callout_options(overrides), render_body=render_body)
        )
