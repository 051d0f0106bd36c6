"""Allow ``python -m xcalc``."""

from xcalc.cli import main

main()
