"""
lexstack - layered lexer and style configuration for text editors

lexstack reads language definitions from layered data directories and
resolves, for one language, the lexer, keyword sets, comment tokens and
the final lexical-class to visual-style mapping of an editing component.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
