"""
snek - a single-player grid snake engine.
"""

__version__ = "0.1.0"
