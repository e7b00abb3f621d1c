"""Module entrypoint for `python -m enum_designer`."""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
