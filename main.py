"""Main entry point for the zoo intake application."""
from __future__ import annotations

import sys

from dotenv import load_dotenv

from app.startup import run_application


def main() -> int:
    """Application entry point."""
    # .env is read before configuration so ZOO_* variables can live there
    load_dotenv()
    return run_application(sys.argv[1:])


__all__ = ["main"]

if __name__ == "__main__":
    sys.exit(main())
