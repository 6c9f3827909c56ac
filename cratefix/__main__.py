"""CLI entry point: python -m cratefix"""

from cratefix.cli import main

main()
