"""
Time by Zones — the current local time for a fixed set of world locations.
"""

__version__ = "v2.0"
