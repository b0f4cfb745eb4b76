"""Module entrypoint for running webtext as ``python -m webtext``."""

from __future__ import annotations

from webtext.cli import main


if __name__ == "__main__":
    main()
