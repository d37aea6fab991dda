"""
Configuration for height map analysis.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
