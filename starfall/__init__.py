"""A small vertical arcade shooter with pattern-firing enemies, built on pygame."""

__version__ = "0.1.0"