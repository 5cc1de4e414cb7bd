"""
Entry point for running gogocyclo as a module.

Usage:
    gocyclo -over 20 ./... | python -m gogocyclo -config .gogocyclo
"""

import sys
from gogocyclo.cli import main

if __name__ == "__main__":
    sys.exit(main())
