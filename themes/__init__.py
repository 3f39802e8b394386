"""
Design Token Themes

This package contains theme maps and the token lookups style-sheet code
reads them with.

Available Modules:
- tokens: Default theme plus color, spacing, breakpoint and font lookups
"""

__all__ = ['tokens']
