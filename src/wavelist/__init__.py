"""Wavelist - playlist resolution and charts backend for a music-discovery site."""

__version__ = "1.0.0"
