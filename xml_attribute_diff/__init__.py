"""Compare the attribute values of two XML documents."""

from .differ import DiffReport, compare
from .exceptions import (
    AttributeDiffError,
    ConfigError,
    ParseError,
    ReadError,
    UsageError,
)
from .extractor import extract_attributes
from .report import print_report, render_report

__version__ = "0.1.0"

__all__ = [
    "AttributeDiffError",
    "ConfigError",
    "DiffReport",
    "ParseError",
    "ReadError",
    "UsageError",
    "compare",
    "extract_attributes",
    "print_report",
    "render_report",
]
