#!/usr/bin/env python3
"""``vts`` entrypoint: parse arguments, run one session, exit with its code."""

from __future__ import annotations

import asyncio
import sys
from typing import Final

from rich.console import Console

from . import runner
from .parser import create_parser

__all__: Final = ["main"]


def main() -> None:
    """CLI entrypoint."""
    parser = create_parser()
    args = parser.parse_args()
    console = Console(stderr=True)

    try:
        rc = asyncio.run(runner.run(console, args))
    except KeyboardInterrupt:
        # Interrupt landed outside the session (e.g. during loop shutdown)
        rc = runner.EXIT_INTERRUPTED
    sys.exit(int(rc))


if __name__ == "__main__":
    main()
