"""
CLI module for pkg-infra.

Provides the ``pkg-infra`` console script entry point.
"""

from .commands import main

__all__ = ["main"]
