"""Showreel - pick an episode from your TV collection and stream it with webtorrent."""

from showreel.__version__ import __version__

__all__ = ["__version__"]
