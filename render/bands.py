from __future__ import annotations

from dataclasses import dataclass

from hartnoise.core import ConfigurationError


@dataclass(frozen=True)
class Band:
    index: int
    start: int
    end: int

    @property
    def height(self) -> int:
        return self.end - self.start


def band_count(*, height: int, band_height: int) -> int:
    height = int(height)
    band_height = int(band_height)
    if band_height < 1:
        raise ConfigurationError("band_height must be >= 1")
    if height < 0:
        raise ConfigurationError("height must be >= 0")
    return -(-height // band_height)


def partition_rows(*, height: int, band_height: int) -> list[Band]:
    """Split ``[0, height)`` into consecutive bands; the last may be shorter."""

    n = band_count(height=height, band_height=band_height)
    bands: list[Band] = []
    for i in range(n):
        start = i * int(band_height)
        end = min(start + int(band_height), int(height))
        bands.append(Band(index=i, start=start, end=end))
    return bands
