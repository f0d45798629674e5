"""April Fools - Entry Point.

This module provides the main entry point for the prank generator CLI.

Usage:
    python main.py prank demo
    python main.py prank generate Alice --role employee
    python main.py prank random --count 10
    python main.py prank roles
"""

from src.cli import create_app

app = create_app()


if __name__ == "__main__":
    app()
