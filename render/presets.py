from __future__ import annotations

import numpy as np

from hartnoise.cell_noise import CellNoise
from hartnoise.compose import Invert
from hartnoise.core import NoiseField, Position
from hartnoise.lattice import LatticeNoise
from hartnoise.stream import DeterministicStream
from render.sampler import ChannelMap, SamplerConfig, TiledSampler

WORLEY_ZOOM = 2.0
WORLEY_FALLOFF = 0.5
WORLEY_OFFSET = Position(10.0, -4.83)

LATTICE_PIXELS = 32.0
LATTICE_ZOOM = 2.0
LATTICE_FALLOFF = 0.75


def _seed_bytes(seed: bytes | str) -> bytes:
    return seed.encode("utf-8") if isinstance(seed, str) else bytes(seed)


def worley_pipeline(seed: bytes | str, *, octaves: int = 1) -> Invert:
    return (
        CellNoise(seed)
        .octaves(
            count=int(octaves),
            zoom=WORLEY_ZOOM,
            amplitude_falloff=WORLEY_FALLOFF,
            offset=WORLEY_OFFSET,
        )
        .invert()
    )


def render_worley(
    seed: bytes | str,
    *,
    width: int,
    height: int,
    pixels: float = 25.0,
    octaves: int = 1,
    band_height: int = 8,
    workers: int | None = None,
) -> np.ndarray:
    """Single-channel inverted Worley raster, ``pixels`` pixels per noise unit."""

    cfg = SamplerConfig(
        width=int(width),
        height=int(height),
        pixel_scale=float(pixels),
        band_height=int(band_height),
        workers=workers,
    )
    return TiledSampler(cfg, [worley_pipeline(seed, octaves=octaves)]).render()


def lattice_rgb_pipeline(seed: bytes | str, *, octaves: int = 1) -> list[NoiseField]:
    """Three independently seeded checkerboards, one per RGB channel."""

    seed = _seed_bytes(seed)
    fields: list[NoiseField] = []
    for i in range(3):
        base = LatticeNoise(bytes([i]) + seed)
        if int(octaves) > 1:
            fields.append(
                base.octaves(count=int(octaves), zoom=LATTICE_ZOOM, amplitude_falloff=LATTICE_FALLOFF)
            )
        else:
            fields.append(base)
    return fields


def render_lattice_rgb(
    seed: bytes | str,
    *,
    width: int,
    height: int,
    octaves: int = 1,
    band_height: int = 8,
    workers: int | None = None,
) -> np.ndarray:
    cfg = SamplerConfig(
        width=int(width),
        height=int(height),
        pixel_scale=LATTICE_PIXELS,
        band_height=int(band_height),
        workers=workers,
    )
    channels = [ChannelMap(field=f) for f in lattice_rgb_pipeline(seed, octaves=octaves)]
    return TiledSampler(cfg, channels).render()


def fork_report(seed: bytes | str, *, n: int = 32) -> str:
    """Hex dump of a root stream and three forks of it.

    Children 1-1 and 1-2 fork on the same bytes and must print identically;
    the parent's line is unaffected by the forks taken before it is read.
    """

    seed = _seed_bytes(seed)
    root = DeterministicStream.with_seed(seed)
    c1 = root.fork(b"Hello")
    c2 = root.fork(b"World")
    c3 = root.fork(b"Hello")

    lines = [f"Seeded with {list(seed)!r}"]
    for name, stream in [("Parent", root), ("Child 1-1", c1), ("Child 2", c2), ("Child 1-2", c3)]:
        lines.append(f"Some random data from {name}")
        lines.append("".join(f" {b:02x}" for b in stream.fill(int(n))))
    return "\n".join(lines) + "\n"
