"""Allow ``python -m music_agent``."""

import sys

from music_agent.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
