"""
ptero CLI entry point.

Usage:
    python -m ptero servers list
    python -m ptero backups create <server> --wait
"""

from ptero.cli import main

if __name__ == "__main__":
    main()
