"""Command-line interface for editor-markdown.

This package provides the `editor-markdown` CLI tool that runs the
markdown, HTML and document tree conversions on files or stdin, with YAML
configuration and Rich terminal output.
"""

from .config import ConfigLoader
from .main import app, main
from .models import ConverterConfig, ExitCode
from .output import OutputHandler

__all__ = [
    'app',
    'main',
    'ConfigLoader',
    'ConverterConfig',
    'ExitCode',
    'OutputHandler',
]
