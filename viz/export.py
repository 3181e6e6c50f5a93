from __future__ import annotations

import io

import numpy as np
from PIL import Image

from hartnoise.core import ConfigurationError

_CHANNEL_COUNTS = (1, 2, 3, 4)


def buffer_to_png_bytes(
    buffer: bytes | np.ndarray,
    *,
    width: int,
    height: int,
    channels: int,
    interleaved: bool = True,
) -> bytes:
    """Encode a finished uint8 raster as PNG.

    ``buffer`` holds ``width * height * channels`` bytes, interleaved per pixel
    or planar per channel.
    """

    width = int(width)
    height = int(height)
    channels = int(channels)
    if channels not in _CHANNEL_COUNTS:
        raise ConfigurationError(f"unsupported channel count: {channels}")
    if width <= 0 or height <= 0:
        raise ConfigurationError("width and height must be > 0")

    if isinstance(buffer, (bytes, bytearray)):
        data = np.frombuffer(bytes(buffer), dtype=np.uint8)
    else:
        data = np.asarray(buffer, dtype=np.uint8).reshape(-1)
    if data.size != width * height * channels:
        raise ValueError(
            f"expected {width * height * channels} bytes, got {data.size}"
        )

    if interleaved:
        img = data.reshape(height, width, channels)
    else:
        img = np.transpose(data.reshape(channels, height, width), (1, 2, 0))
    if channels == 1:
        img = img[:, :, 0]

    out = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(img)).save(out, format="PNG")
    return out.getvalue()
