"""
Run the award simulator.

Usage:
    python -m provider_quality
    python -m provider_quality --days 10 --json
"""

import sys

from .interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
