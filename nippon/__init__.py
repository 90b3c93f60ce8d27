"""Decryption, unpacking and integrity checking of game data archives, and scene loading from them."""

__version__ = "0.1.0"