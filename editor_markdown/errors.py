"""Typed exception hierarchy for editor-markdown.

The conversion functions themselves are total and never raise. These
exceptions cover the layers around them (configuration loading and CLI
input handling) and include descriptive messages with context to help
with debugging.
"""

from typing import Optional


class EditorMarkdownError(Exception):
    """Base exception for all editor-markdown errors.

    Use this to catch any application-level error from the package.
    """
    pass


class ConfigError(EditorMarkdownError):
    """Raised when the configuration file is invalid or malformed."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Config error in field '{config_field}': {message}"
        else:
            full_message = f"Config error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FilesystemError(EditorMarkdownError):
    """Raised when reading an input or configuration file fails."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"File operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
