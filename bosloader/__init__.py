"""Serve local BOS component files as a gateway redirect map."""

__version__ = "0.12.0"
