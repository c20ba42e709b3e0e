"""
Coordinate-free maze explorer.

Explores with local sensing only and backtracks through a stack of
junction arrival headings instead of a map.
"""

__version__ = "0.1.0"
