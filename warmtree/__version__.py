"""Version information for warmtree."""

__version__ = "0.1.0"
