from __future__ import annotations

from render.bands import Band, band_count, partition_rows
from render.log import setup_logging
from render.presets import (
    fork_report,
    lattice_rgb_pipeline,
    render_lattice_rgb,
    render_worley,
    worley_pipeline,
)
from render.sampler import ChannelMap, SamplerConfig, TiledSampler, render_raster

__all__ = [
    "Band",
    "ChannelMap",
    "SamplerConfig",
    "TiledSampler",
    "band_count",
    "fork_report",
    "lattice_rgb_pipeline",
    "partition_rows",
    "render_lattice_rgb",
    "render_raster",
    "render_worley",
    "setup_logging",
    "worley_pipeline",
]
