"""Playlist state: fixed-capacity ordered list of tracks (no UI, no I/O).

Slots [0, size) hold tracks in playlist order; slots [size, capacity) are None.
The backing list is sized once at construction and never grows.
"""

from __future__ import annotations

import logging

from track_playlist.track import Track

log = logging.getLogger(__name__)


class BoundedTrackList:
    """Playlist with a maximum capacity. Mutators report failure by returning False."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._slots: list[Track | None] = [None] * capacity
        self._size = 0

    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def get_track(self, index: int) -> Track | None:
        if 0 <= index < self._size:
            return self._slots[index]
        return None

    def tracks(self) -> list[Track]:
        return self._slots[:self._size]

    def append(self, track: Track) -> bool:
        """Add track at the end. Returns False (list unchanged) if full."""
        if self.is_full():
            log.debug("append rejected: playlist full (%d)", self._capacity)
            return False
        self._slots[self._size] = track
        self._size += 1
        return True

    def insert(self, index: int, track: Track) -> bool:
        """Insert track at index, shifting later tracks right.

        E.g. (t5, t3, t1) -> insert(1, t4) -> (t5, t4, t3, t1).
        Valid index is 0..size inclusive; returns False if full or index out of range.
        """
        if self.is_full():
            log.debug("insert rejected: playlist full (%d)", self._capacity)
            return False
        if index < 0 or index > self._size:
            log.debug("insert rejected: index %d outside 0..%d", index, self._size)
            return False
        for j in range(self._size, index, -1):
            self._slots[j] = self._slots[j - 1]
        self._slots[index] = track
        self._size += 1
        return True

    def remove_at(self, index: int) -> None:
        """Remove the track at index and close the gap. Does nothing if index is not occupied."""
        if not 0 <= index < self._size:
            return
        self._size -= 1
        for j in range(index, self._size):
            self._slots[j] = self._slots[j + 1]
        self._slots[self._size] = None

    def remove_by_title(self, title: str) -> None:
        self.remove_at(self.index_of(title))

    def remove_first(self) -> None:
        self.remove_at(0)

    def remove_last(self) -> None:
        if self._size == 0:
            return
        self._size -= 1
        self._slots[self._size] = None

    def index_of(self, title: str) -> int:
        """Index of the first track whose title matches (case-insensitive), or -1."""
        title = title.lower()
        for i in range(self._size):
            if self._slots[i].title.lower() == title:
                return i
        return -1

    def total_duration(self) -> int:
        return sum(self._slots[i].duration for i in range(self._size))

    def min_index_from(self, start: int) -> int:
        """Index of the shortest track at or after start; first one wins on ties.

        Durations 7, 1, 6, 7, 5, 8, 7 -> min_index_from(2) == 4.
        Returns -1 if start is negative or past the last track.
        """
        if start < 0 or start > self._size - 1:
            return -1
        min_index = start
        min_duration = self._slots[start].duration
        for i in range(start + 1, self._size):
            if self._slots[i].duration < min_duration:
                min_index = i
                min_duration = self._slots[i].duration
        return min_index

    def title_of_shortest_track(self) -> str | None:
        if self._size == 0:
            return None
        return self._slots[self.min_index_from(0)].title

    def sort_by_duration(self) -> None:
        """Selection sort in place, shortest first."""
        for i in range(self._size):
            m = self.min_index_from(i)
            if m != i:
                self._slots[i], self._slots[m] = self._slots[m], self._slots[i]

    def merge_from(self, other: BoundedTrackList) -> bool:
        """Append all of other's tracks in order. Returns False (nothing changed) if they don't fit."""
        count = other.size()
        if self._size + count > self._capacity:
            log.debug(
                "merge rejected: %d + %d exceeds capacity %d",
                self._size, count, self._capacity,
            )
            return False
        for i in range(count):
            self.append(other.get_track(i))
        return True

    def lines(self) -> list[str]:
        return [str(self._slots[i]) for i in range(self._size)]

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def __len__(self) -> int:
        return self._size
