from __future__ import annotations

import math
import numbers
import sys
from dataclasses import dataclass, field

from .core import ConfigurationError, NoiseField, Position

_MAX_LOG = math.log(sys.float_info.max)


@dataclass(frozen=True)
class OctaveOptions:
    count: int
    zoom: float
    amplitude_falloff: float
    offset: Position = field(default_factory=Position.zero)

    def __post_init__(self) -> None:
        if not isinstance(self.count, numbers.Integral) or self.count < 1:
            raise ConfigurationError(f"octave count must be an integer >= 1, got {self.count!r}")
        if not (math.isfinite(self.zoom) and self.zoom > 1.0):
            raise ConfigurationError(f"octave zoom must be finite and > 1, got {self.zoom!r}")
        # The deepest octave samples at zoom**(count - 1); it must stay a finite float.
        if (int(self.count) - 1) * math.log(self.zoom) >= _MAX_LOG:
            raise ConfigurationError(
                f"zoom {self.zoom!r} overflows over {self.count} octaves"
            )
        if not 0.0 < float(self.amplitude_falloff) < 1.0:
            raise ConfigurationError(
                f"amplitude_falloff must be in (0, 1), got {self.amplitude_falloff!r}"
            )
        if not isinstance(self.offset, Position):
            raise ConfigurationError("offset must be a Position")
        if not (math.isfinite(self.offset.x) and math.isfinite(self.offset.y)):
            raise ConfigurationError(f"offset must be finite, got {self.offset!r}")


class FieldOps:
    """Chaining helpers shared by every noise field class."""

    def octaves(
        self,
        *,
        count: int,
        zoom: float,
        amplitude_falloff: float,
        offset: Position | None = None,
    ) -> OctaveLayer:
        return octaves(
            self,  # type: ignore[arg-type]
            count=count,
            zoom=zoom,
            amplitude_falloff=amplitude_falloff,
            offset=offset,
        )

    def invert(self) -> Invert:
        return Invert(self)  # type: ignore[arg-type]


class OctaveLayer(FieldOps):
    """Weighted average of progressively zoomed samples of ``base``.

    Octave ``k`` samples ``base`` at ``(p + k * offset) * zoom**k`` with weight
    ``amplitude_falloff**k``. The first octave is always the plain base sample,
    so ``count == 1`` reproduces ``base`` exactly.
    """


    def __init__(self, base: NoiseField, options: OctaveOptions):
        if not isinstance(options, OctaveOptions):
            raise ConfigurationError("options must be an OctaveOptions instance")
        self.base = base
        self.options = options

    def sample(self, p: Position) -> float:
        opts = self.options
        if opts.count == 1:
            return self.base.sample(p)

        total = 0.0
        weight_sum = 0.0
        zoom = 1.0
        weight = 1.0
        offset = Position.zero()
        for _ in range(int(opts.count)):
            total += self.base.sample((p + offset) * zoom) * weight
            weight_sum += weight
            zoom *= float(opts.zoom)
            weight *= float(opts.amplitude_falloff)
            offset = offset + opts.offset
        return total / weight_sum

    def __repr__(self) -> str:
        return f"OctaveLayer({self.base!r}, {self.options!r})"


class Invert(FieldOps):

    def __init__(self, base: NoiseField):
        self.base = base

    def sample(self, p: Position) -> float:
        return 1.0 - self.base.sample(p)

    def __repr__(self) -> str:
        return f"Invert({self.base!r})"


def octaves(
    base: NoiseField,
    *,
    count: int,
    zoom: float,
    amplitude_falloff: float,
    offset: Position | None = None,
) -> OctaveLayer:
    opts = OctaveOptions(
        count=count,
        zoom=zoom,
        amplitude_falloff=amplitude_falloff,
        offset=Position.zero() if offset is None else offset,
    )
    return OctaveLayer(base, opts)


def invert(base: NoiseField) -> Invert:
    return Invert(base)
