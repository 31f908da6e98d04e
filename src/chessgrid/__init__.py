"""Chessgrid — click-to-move chess on an 8×8 grid with destination highlighting."""

__version__ = "0.1.0"
