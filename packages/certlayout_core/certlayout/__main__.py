"""
Entry point for running CertLayout as a module.

Usage:
    python -m certlayout plan record.json
    python -m certlayout render record.json -o certificate.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
