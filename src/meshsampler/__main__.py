"""Command-line interface."""
import sys

from meshsampler.main import main

if __name__ == "__main__":
    sys.exit(main())
