from __future__ import annotations

import time

from hartnoise.cell_noise import CellNoise
from hartnoise.core import Position
from render.log import setup_logging
from render.presets import render_lattice_rgb, render_worley, worley_pipeline
from render.sampler import SamplerConfig, TiledSampler


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    print(f"{label}: {ms:.2f} ms")
    return ms


def main() -> None:
    """Quick CPU benchmark.

    CellNoise costs nine stream forks per sample, so the Worley renders are
    kept small; the lattice render measures pipeline overhead on its own.
    """

    setup_logging()
    seed = b"benchmark"

    noise = CellNoise(seed)
    _timeit(
        "CellNoise.sample x10000",
        lambda: [noise.sample(Position(i * 0.037, i * 0.011)) for i in range(10_000)],
    )

    for band_height in (1, 8, 32):
        _timeit(
            f"render_worley 128x128 octaves=3 band_height={band_height}",
            lambda bh=band_height: render_worley(
                seed, width=128, height=128, pixels=25.0, octaves=3, band_height=bh
            ),
        )

    _timeit(
        "render_worley 128x128 octaves=3 executor=process",
        lambda: TiledSampler(
            SamplerConfig(width=128, height=128, pixel_scale=25.0, band_height=8, executor="process"),
            [worley_pipeline(seed, octaves=3)],
        ).render(),
    )

    _timeit(
        "render_lattice_rgb 256x256 octaves=4",
        lambda: render_lattice_rgb(seed, width=256, height=256, octaves=4),
    )


if __name__ == "__main__":
    main()
