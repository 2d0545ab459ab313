"""Embed xterm assets into the dmsgpty terminal HTML shell."""

from .version import __version__

__all__ = ['__version__']
