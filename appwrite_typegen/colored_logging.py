"""
Colored console logging for the types generator CLI.

Log levels get their own colors; INFO and DEBUG messages that read like a
success, a progress step or a noteworthy finding are highlighted as well.
"""

import logging
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """
    Logging formatter that adds ANSI color codes to log messages.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }

    SPECIAL_COLORS = {
        'success': '\033[92m',    # Bright Green
        'progress': '\033[94m',   # Bright Blue
        'highlight': '\033[96m',  # Bright Cyan
    }

    RESET = '\033[0m'
    BOLD = '\033[1m'

    SUCCESS_INDICATORS = ('✓', 'successfully', 'written to', 'generated types')
    PROGRESS_INDICATORS = ('→', 'loading', 'reading', 'generating', 'applying', 'writing')
    HIGHLIGHT_INDICATORS = ('found', 'skipping', 'disabled', 'ignoring', 'replaces')

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True, stream=None):
        """
        Args:
            fmt: Log format string (uses default if None)
            use_colors: Whether to use colors; ignored when the stream is not a TTY
            stream: Stream the handler writes to (defaults to stderr)
        """
        if fmt is None:
            fmt = "%(levelname)s: %(message)s"
        super().__init__(fmt)

        stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        if not self.use_colors:
            return formatted_message

        color = self.color_for(record)
        if not color:
            return formatted_message
        return f"{color}{formatted_message}{self.RESET}"

    def color_for(self, record: logging.LogRecord) -> str:
        """Pick the color sequence for a record, or '' to leave it plain."""
        # Errors and warnings always keep their level color
        if record.levelname in ('ERROR', 'CRITICAL', 'WARNING'):
            return self.COLORS[record.levelname]

        message = record.getMessage().lower()
        if self._matches(message, self.SUCCESS_INDICATORS):
            return self.SPECIAL_COLORS['success'] + self.BOLD
        if self._matches(message, self.PROGRESS_INDICATORS):
            return self.SPECIAL_COLORS['progress']
        if self._matches(message, self.HIGHLIGHT_INDICATORS):
            return self.SPECIAL_COLORS['highlight']
        if self._is_section_message(message):
            return self.BOLD + self.SPECIAL_COLORS['highlight']
        if record.levelname == 'DEBUG':
            return self.COLORS['DEBUG']
        return ''

    @staticmethod
    def _matches(message: str, indicators) -> bool:
        return any(indicator in message for indicator in indicators)

    @staticmethod
    def _is_section_message(message: str) -> bool:
        return '=' in message and len(message.strip()) > 20


def setup_colored_logging(level: int = logging.INFO, use_colors: bool = True) -> None:
    """
    Route all logging to stderr through ``ColoredFormatter``.

    Replaces any handlers already installed on the root logger.
    """
    formatter = ColoredFormatter(use_colors=use_colors)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)


def log_success(logger: logging.Logger, message: str) -> None:
    logger.info(f"✓ {message}")


def log_progress(logger: logging.Logger, message: str) -> None:
    logger.info(f"→ {message}")


def log_section(logger: logging.Logger, section_name: str) -> None:
    """Log a section header framed by separator lines."""
    separator = "=" * 60
    logger.info(separator)
    logger.info(f"  {section_name.upper()}")
    logger.info(separator)
