"""Data models for CLI operations.

All models use dataclasses, following the document tree models in
editor_markdown/editor/models.py.
"""

from dataclasses import dataclass
from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Conversion completed successfully
    - GENERAL_ERROR (1): Unreadable input or unexpected failure
    - CONFIG_ERROR (2): Invalid configuration file
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2


@dataclass
class ConverterConfig:
    """Conversion settings loaded from .editor-markdown.yaml.

    Attributes:
        markdown: Treat editor content as markdown source (escape literal
            markdown characters when converting HTML and plain text)
        sanitize: Run the HTML allowlist sanitizer before conversion
        json_indent: Indentation of document tree JSON output

    Example:
        >>> config = ConverterConfig(markdown=False)
        >>> config = ConverterConfig()  # Defaults
    """
    markdown: bool = True
    sanitize: bool = True
    json_indent: int = 2
