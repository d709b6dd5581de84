"""tally - a line-oriented task tracking assistant."""

__version__ = "0.1.0"
