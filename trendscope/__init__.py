"""Trend research and content-strategy synthesis for video topics."""

__version__ = "0.1.0"
