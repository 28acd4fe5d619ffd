"""Allow ``python -m cursorgen``."""

from cursorgen.cli import main

main()
