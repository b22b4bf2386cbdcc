"""Hiring pipeline command interpreter."""

__version__ = "0.1.0"
