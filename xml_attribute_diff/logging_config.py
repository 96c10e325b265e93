import logging
import sys

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level="WARNING", stream=None):
    """
    Configures the root logger with a single console handler.
    The handler writes to the provided stream, or sys.stderr if stream is None,
    so log records never mix with the report printed on stdout.
    Calling it again replaces the previous handler instead of adding another.
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    output_stream = stream if stream is not None else sys.stderr
    console_handler = logging.StreamHandler(output_stream)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Retrieves a logger instance with the specified name."""
    return logging.getLogger(name)
