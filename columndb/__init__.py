"""A small column-oriented database engine with a binary file format and cached joins."""

__version__ = "0.1.0"