"""RGB color value used by the photometric tables and snapshots."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..utils import clamp


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color with channels in [0, 1].

    Channels are stored as given by the preset tables (sRGB-encoded);
    interpolation is a plain per-channel lerp in that space.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float

    @classmethod
    def from_hex(cls, value: int | str) -> Color:
        """
        Build a color from ``0xRRGGBB`` or ``"#rrggbb"``.

        Example:
            >>> Color.from_hex("#ff8c5c") == Color.from_hex(0xFF8C5C)
            True
        """
        if isinstance(value, str):
            value = int(value.lstrip("#"), 16)
        return cls(
            ((value >> 16) & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            (value & 0xFF) / 255.0,
        )

    def to_hex(self) -> str:
        """Return ``"#rrggbb"`` with channels rounded to 8 bits; NaN channels encode as 00."""
        channels = (0 if math.isnan(c) else round(clamp(c, 0.0, 1.0) * 255) for c in (self.r, self.g, self.b))
        return "#" + "".join(f"{c:02x}" for c in channels)

    def lerp(self, other: Color, t: float) -> Color:
        """Linear interpolation: t=0 returns self, t=1 returns other."""
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)
