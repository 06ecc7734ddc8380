"""
Main entry point for vtscli.

This module allows the CLI to be run as:
    python -m vtscli
"""

from .cli.main import main

if __name__ == "__main__":
    main()
