"""SQLite fixture generation for users, tags and their associations.

Usage:
    tagseed generate
    # or
    python -m tagseed generate
"""

__version__ = "0.1.0"
