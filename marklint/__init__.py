"""
marklint - Markdown structure linter with external link verification.
"""

__version__ = "0.3.0"
