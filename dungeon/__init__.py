"""Turn-based dungeon crawl engine driven by chat commands."""

__version__ = "0.1.0"
