"""
GameLens - video game engagement analysis.
"""

__version__ = "1.0.0"
