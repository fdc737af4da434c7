"""Screengen: layout resolution and code generation for wearable status screens."""

__version__ = "0.3.0"
