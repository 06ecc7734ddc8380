"""Utility helpers: value parsing, log setup and secret redaction."""

from .logging_setup import JSONFormatter, setup_logging
from .parsing import parse_bool, parse_duration, parse_hex_color, parse_number
from .redaction import RedactionFilter, redact_text

__all__ = [
    "JSONFormatter",
    "RedactionFilter",
    "parse_bool",
    "parse_duration",
    "parse_hex_color",
    "parse_number",
    "redact_text",
    "setup_logging",
]
