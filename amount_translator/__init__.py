"""
Money Amount Translator — English words for arbitrary-precision amounts.

Architecture: Normalize → Split into 3-digit groups → Render groups → Assemble
Philosophy:  One pure function in, one exact string out.
"""

from .translator import convert, to_english

__version__ = "1.0.0"

__all__ = ["convert", "to_english", "__version__"]
