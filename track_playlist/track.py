"""Track record held by a playlist (title, artist, duration in seconds)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Track:
    title: str
    duration: int  # seconds
    artist: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise TypeError(f"title must be a str, got {type(self.title).__name__}")
        if self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")

    def __str__(self) -> str:
        if self.artist:
            return f"{self.artist}, {self.title}, {self.duration}"
        return f"{self.title}, {self.duration}"
