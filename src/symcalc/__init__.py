"""Symbolic arithmetic over a mutable environment of named expressions."""

__version__ = "0.1.0"
