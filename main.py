"""Main entry point for the aquarium simulation.

See ``python main.py --help`` for options.
"""

import sys

from aquarium.cli import main

if __name__ == "__main__":
    sys.exit(main())
