"""
Logging configuration for the application.
Logs go to stderr so the MCP stdio transport keeps stdout to itself.
"""
import logging
import os
import sys


REDACTED = "***"

# shorter values would mask ordinary words
MIN_SECRET_LENGTH = 8

_secrets: set[str] = set()


def register_secret(value: str | None) -> None:
    """Register a credential that must never appear in log output."""
    if value and len(value) >= MIN_SECRET_LENGTH:
        _secrets.add(value)


def redact(text: str) -> str:
    """Replace every registered secret in text with a placeholder."""
    for secret in _secrets:
        text = text.replace(secret, REDACTED)
    return text


class SecretRedactingFilter(logging.Filter):
    """Masks registered secrets in the rendered log message."""

    def filter(self, record: logging.LogRecord) -> bool:
        if _secrets:
            record.msg = redact(record.getMessage())
            record.args = None
        return True


class ColoredFormatter(logging.Formatter):
    """Custom formatter with log levels."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors."""
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def resolve_level(level: int | str) -> int | None:
    """Numeric level for an int or level name, or None if the name is unknown."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else None


def setup_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    """
    Set up a logger writing to stderr.

    Args:
        name: Logger name
        level: Logging level (int or level name); unknown names mean INFO

    Returns:
        Configured logger instance
    """
    level = resolve_level(level) or logging.INFO
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    logger.addFilter(SecretRedactingFilter())

    formatter = ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger


def set_log_level(logger: logging.Logger, level: int | str) -> None:
    """Change the level of a logger and all of its handlers, falling back to INFO for unknown names."""
    resolved = resolve_level(level)
    if resolved is None:
        resolved = logging.INFO
        logger.warning(f"Unknown log level {level!r}, using INFO")
    logger.setLevel(resolved)
    for handler in logger.handlers:
        handler.setLevel(resolved)


app_logger = setup_logger("websearch_bridge", os.getenv("LOG_LEVEL", "INFO"))
