"""Main CLI entry point for the editor-markdown command.

This module provides the Typer application that drives the conversion
functions from files or stdin:

  editor-markdown render message.md     # markdown source → HTML
  editor-markdown tree message.html     # HTML → editor document tree (JSON)
  editor-markdown plain message.txt     # plain text → editor document tree (JSON)
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from ..editor import document_to_dict, html_to_editor_input, plain_to_editor_input
from ..errors import ConfigError, FilesystemError
from ..markdown import markdown_to_html
from .config import ConfigLoader
from .models import ConverterConfig, ExitCode
from .output import OutputHandler

app = typer.Typer(
    name="editor-markdown",
    help="""Convert between message markdown, HTML and the editor document tree.

Reads FILE, or stdin when FILE is omitted or '-'.""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

# Module logger
logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "editor_markdown"


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the package logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger(PACKAGE_LOGGER)
    app_logger.setLevel(level)
    # Repeated invocations in one process must not stack handlers
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"editor-markdown_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _read_input(file: Optional[str]) -> str:
    """Read the input text from a file, or stdin for None / '-'.

    Raises:
        FilesystemError: If the file cannot be read
    """
    if file is None or file == "-":
        return sys.stdin.read()
    try:
        with open(file, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise FilesystemError(file, "read", "File not found")
    except PermissionError:
        raise FilesystemError(file, "read", "Permission denied")
    except (OSError, UnicodeDecodeError) as e:
        raise FilesystemError(file, "read", str(e))


def _strip_final_newline(text: str) -> str:
    """Drop the newline that ends a text file; it is not an empty last line."""
    return text[:-1] if text.endswith("\n") else text


def _load_config(config_path: Optional[str], markdown: Optional[bool]) -> ConverterConfig:
    """Load the config file and apply command line overrides."""
    config = ConfigLoader.load(config_path or ConfigLoader.DEFAULT_CONFIG_FILE)
    if markdown is not None:
        config.markdown = markdown
    return config


def _run(file: Optional[str], config_path: Optional[str], markdown: Optional[bool],
         verbosity: int, logdir: Optional[str], no_color: bool, convert) -> None:
    """Shared command flow: set up, convert, report errors as exit codes.

    Args:
        convert: Called with (text, config, output) to produce the output
    """
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        config = _load_config(config_path, markdown)
        text = _read_input(file)
        output.debug(f"Read {len(text)} chars from {file or 'stdin'}")
        convert(text, config, output)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.CONFIG_ERROR)
    except FilesystemError as e:
        logger.error(f"Cannot read input: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except Exception as e:
        logger.exception("Unexpected error during conversion")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


FILE_ARGUMENT = typer.Argument(None, help="Input file ('-' or omitted for stdin)")
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to YAML config file")
MARKDOWN_OPTION = typer.Option(
    None, "--markdown/--no-markdown", help="Override markdown mode from the config file"
)
VERBOSE_OPTION = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)")
LOGDIR_OPTION = typer.Option(None, "--logdir", help="Directory for log files")
NO_COLOR_OPTION = typer.Option(False, "--no-color", help="Disable colored output")


@app.command()
def render(
    file: Optional[str] = FILE_ARGUMENT,
    config: Optional[str] = CONFIG_OPTION,
    verbose: int = VERBOSE_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Convert markdown source to HTML."""
    def convert(text: str, converter_config: ConverterConfig, output: OutputHandler) -> None:
        output.print_text(markdown_to_html(_strip_final_newline(text)))

    _run(file, config, None, verbose, logdir, no_color, convert)


@app.command()
def tree(
    file: Optional[str] = FILE_ARGUMENT,
    config: Optional[str] = CONFIG_OPTION,
    markdown: Optional[bool] = MARKDOWN_OPTION,
    verbose: int = VERBOSE_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Convert HTML to the editor document tree (JSON)."""
    def convert(text: str, converter_config: ConverterConfig, output: OutputHandler) -> None:
        nodes = html_to_editor_input(
            text,
            markdown=converter_config.markdown,
            sanitize=converter_config.sanitize,
        )
        output.info(f"Converted to {len(nodes)} blocks")
        output.print_json(document_to_dict(nodes), indent=converter_config.json_indent)

    _run(file, config, markdown, verbose, logdir, no_color, convert)


@app.command()
def plain(
    file: Optional[str] = FILE_ARGUMENT,
    config: Optional[str] = CONFIG_OPTION,
    markdown: Optional[bool] = MARKDOWN_OPTION,
    verbose: int = VERBOSE_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
    no_color: bool = NO_COLOR_OPTION,
) -> None:
    """Convert plain text to the editor document tree (JSON)."""
    def convert(text: str, converter_config: ConverterConfig, output: OutputHandler) -> None:
        nodes = plain_to_editor_input(
            _strip_final_newline(text), markdown=converter_config.markdown
        )
        output.print_json(document_to_dict(nodes), indent=converter_config.json_indent)

    _run(file, config, markdown, verbose, logdir, no_color, convert)


def main() -> None:
    """Entry point for the editor-markdown console script."""
    app()


if __name__ == "__main__":
    main()
