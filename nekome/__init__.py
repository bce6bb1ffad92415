"""Building blocks for a terminal Twitter client."""

__version__ = "1.0.0"