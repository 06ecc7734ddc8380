"""Command line interface for vtscli."""

from .main import main
from .parser import create_parser

__all__ = ["create_parser", "main"]
