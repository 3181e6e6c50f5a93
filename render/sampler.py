from __future__ import annotations

import concurrent.futures
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from hartnoise.core import ConfigurationError, NoiseField, Position, clamp01
from render.bands import Band, partition_rows

logger = logging.getLogger(__name__)

EXECUTORS = {
    "thread": concurrent.futures.ThreadPoolExecutor,
    "process": concurrent.futures.ProcessPoolExecutor,
}


@dataclass(frozen=True)
class ChannelMap:
    """One output channel: a noise field plus its [0, 1] -> byte mapping."""

    field: NoiseField
    multiplier: float = 255.0
    bias: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.multiplier) and math.isfinite(self.bias)):
            raise ConfigurationError("multiplier and bias must be finite")

    def to_byte(self, value: float) -> int:
        v = float(self.bias) + float(self.multiplier) * clamp01(value)
        return int(min(max(v, 0.0), 255.0))

    def sample_byte(self, p: Position) -> int:
        return self.to_byte(self.field.sample(p))


@dataclass(frozen=True)
class SamplerConfig:
    width: int
    height: int
    pixel_scale: float = 1.0
    stretch: Position = field(default_factory=lambda: Position(1.0, 1.0))
    center: Position = field(default_factory=Position.zero)
    band_height: int = 8
    workers: int | None = None
    interleaved: bool = True
    executor: str = "thread"

    def __post_init__(self) -> None:
        if int(self.width) < 0 or int(self.height) < 0:
            raise ConfigurationError("width and height must be >= 0")
        if not float(self.pixel_scale) > 0.0:
            raise ConfigurationError("pixel_scale must be > 0")
        if not (float(self.stretch.x) > 0.0 and float(self.stretch.y) > 0.0):
            raise ConfigurationError("stretch components must be > 0")
        if int(self.band_height) < 1:
            raise ConfigurationError("band_height must be >= 1")
        if self.workers is not None and int(self.workers) < 1:
            raise ConfigurationError("workers must be >= 1")
        if self.executor not in EXECUTORS:
            raise ConfigurationError(f"unknown executor: {self.executor!r}")

    def position(self, px: int, py: int) -> Position:
        """Map pixel coordinates into noise sampling space."""
        return Position(float(px), float(py)) / float(self.pixel_scale) / self.stretch + self.center


def _as_channel(ch: ChannelMap | NoiseField) -> ChannelMap:
    if isinstance(ch, ChannelMap):
        return ch
    return ChannelMap(field=ch)


class TiledSampler:
    """Evaluate one noise field per channel over a raster, band by band.

    Each band renders into its own buffer on a pool worker: threads by default,
    or processes with ``executor="process"`` (the fields must pickle). Once
    every band has finished, the band buffers are copied into the output at
    offsets given only by the band index, so the result does not depend on
    band height, worker count or completion order.
    """

    def __init__(self, config: SamplerConfig, channels: Sequence[ChannelMap | NoiseField]):
        chans = [_as_channel(c) for c in channels]
        if not chans:
            raise ConfigurationError("at least one channel is required")
        self.config = config
        self.channels: tuple[ChannelMap, ...] = tuple(chans)

    @property
    def channel_count(self) -> int:
        return len(self.channels)

    def bands(self) -> list[Band]:
        return partition_rows(height=self.config.height, band_height=self.config.band_height)

    def render_band(self, band: Band) -> np.ndarray:
        """Render rows ``[band.start, band.end)`` as ``(rows, width, channels)`` bytes."""

        cfg = self.config
        width = int(cfg.width)
        out = np.zeros((band.height, width, self.channel_count), dtype=np.uint8)
        for row in range(band.height):
            y = band.start + row
            for x in range(width):
                pos = cfg.position(x, y)
                for c, ch in enumerate(self.channels):
                    out[row, x, c] = ch.sample_byte(pos)
        return out

    def _evaluate(self, bands: list[Band]) -> dict[int, np.ndarray]:
        workers = self.config.workers
        if workers is not None and int(workers) == 1:
            return {b.index: self.render_band(b) for b in bands}

        results: dict[int, np.ndarray] = {}
        pool = EXECUTORS[self.config.executor]
        with pool(max_workers=workers) as executor:
            future_to_band = {executor.submit(self.render_band, b): b for b in bands}
            try:
                for future in concurrent.futures.as_completed(future_to_band):
                    band = future_to_band[future]
                    results[band.index] = future.result()
            except BaseException:
                for f in future_to_band:
                    f.cancel()
                raise
        return results

    def _stitch(self, bands: list[Band], results: dict[int, np.ndarray]) -> np.ndarray:
        cfg = self.config
        width = int(cfg.width)
        height = int(cfg.height)
        nch = self.channel_count
        band_height = int(cfg.band_height)

        flat = np.zeros(width * height * nch, dtype=np.uint8)
        written = 0
        if cfg.interleaved:
            band_capacity = band_height * width * nch
            for band in bands:
                local = results[band.index].reshape(-1)
                start = band.index * band_capacity
                flat[start : start + local.size] = local
                written += local.size
        else:
            plane = width * height
            band_capacity = band_height * width
            for band in bands:
                local = np.transpose(results[band.index], (2, 0, 1))
                for c in range(nch):
                    data = local[c].reshape(-1)
                    start = c * plane + band.index * band_capacity
                    flat[start : start + data.size] = data
                    written += data.size

        if written != flat.size:
            raise RuntimeError(f"stitched {written} bytes into a {flat.size}-byte buffer")

        if cfg.interleaved:
            return flat.reshape(height, width, nch)
        return flat.reshape(nch, height, width)

    def render(self) -> np.ndarray:
        """Render the full raster.

        Returns ``(height, width, channels)`` uint8 when interleaved, else
        ``(channels, height, width)``.
        """

        bands = self.bands()
        logger.debug(
            "rendering %dx%d with %d channel(s) in %d band(s) of %d row(s)",
            self.config.width,
            self.config.height,
            self.channel_count,
            len(bands),
            self.config.band_height,
        )
        t0 = time.perf_counter()
        results = self._evaluate(bands)
        ms = (time.perf_counter() - t0) * 1000.0
        logger.info("took %.0f ms to generate", ms)
        return self._stitch(bands, results)

    def render_bytes(self) -> bytes:
        return self.render().tobytes()


def render_raster(
    *,
    width: int,
    height: int,
    channels: Sequence[ChannelMap | NoiseField],
    pixel_scale: float = 1.0,
    stretch: Position | None = None,
    center: Position | None = None,
    band_height: int = 8,
    workers: int | None = None,
    interleaved: bool = True,
    executor: str = "thread",
) -> np.ndarray:
    cfg = SamplerConfig(
        width=int(width),
        height=int(height),
        pixel_scale=float(pixel_scale),
        stretch=Position(1.0, 1.0) if stretch is None else stretch,
        center=Position.zero() if center is None else center,
        band_height=int(band_height),
        workers=workers,
        interleaved=bool(interleaved),
        executor=str(executor),
    )
    return TiledSampler(cfg, channels).render()
