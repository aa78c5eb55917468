"""A small text adventure: a fixed world, a handful of items, one treasure."""

__version__ = "1.0.0"
