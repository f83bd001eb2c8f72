"""Client-resident account and activity store for the otaku catalog."""

__version__ = "0.1.0"
