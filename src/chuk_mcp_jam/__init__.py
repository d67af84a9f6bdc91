"""
CHUK Jam - key-agnostic song skeletons, transposed, exported and played.
"""

__version__ = "0.1.0"
