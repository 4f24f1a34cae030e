"""A tile-based puzzle game: collect every item, then reach the exit.

Also holds small character, byte-buffer, string, output and linked-list helpers.
"""

__version__ = "0.1.0"