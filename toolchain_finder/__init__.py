"""
Toolchain Finder

A tool for finding the most recent release channel build whose packages are
available on every target of interest.
"""

__version__ = "0.1.0"

from .cli import main

__all__ = ["main"]
