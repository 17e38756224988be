"""Tile-based collect-and-escape puzzle game played on .ber map files, with map checks and small string, buffer and list helpers."""

__version__ = "0.1.0"