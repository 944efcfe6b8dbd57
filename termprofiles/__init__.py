"""Termprofiles - terminal shell profile detection."""

__version__ = "0.3.0"
