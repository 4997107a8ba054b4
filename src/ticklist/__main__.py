"""Allow ``python -m ticklist``."""

from ticklist.cli import main

main()
