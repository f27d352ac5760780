"""
Design pattern worked examples.

This package contains one module per design pattern. Each module holds the
pattern's participants, prose describing the pattern in its docstring, and
a PatternDemo subclass registered with the catalogue.
"""

from catalogue.patterns.base import PatternDemo

__all__ = ["PatternDemo"]
