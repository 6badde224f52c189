"""
CLI Layer

Command line entry point.
"""

from marklint.cli.app import app, check, init, version

__all__ = [
    "app",
    "check",
    "init",
    "version",
]
