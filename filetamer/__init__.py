"""Select files with glob rules, then delete, archive, move or copy them."""

__version__ = "0.1.0"