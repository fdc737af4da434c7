"""Screengen command line interface."""

from screengen import __version__

__all__ = ["__version__"]
