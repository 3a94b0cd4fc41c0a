"""
Allow running the codec CLI as a module.

Usage:
    python -m edmwire encode Edm.Int64 5 --query
"""

from .cli import main
import sys

if __name__ == "__main__":
    sys.exit(main())
