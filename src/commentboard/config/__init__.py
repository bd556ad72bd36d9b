"""
Configuration package for the comment board.
"""

from .settings import Settings

__all__ = ['Settings']
