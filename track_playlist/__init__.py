"""Fixed-capacity playlist of tracks: insert, remove, search, sort by duration."""

from track_playlist.playlist import BoundedTrackList
from track_playlist.track import Track
from track_playlist.version import __version__

__all__ = [
    'BoundedTrackList',
    'Track',
    '__version__',
]
