"""Module entrypoint for the helper CLI.

Run:
  python -m helperkit --help
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
