"""Conversion between RGB colours and hue/luminosity/saturation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            channel = getattr(self, name)
            if not 0 <= channel <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {channel}")


def _to_byte(value: float) -> int:
    return min(255, max(0, int(value * 255)))


def _transform(t1: float, t2: float, t3: float) -> float:
    if t3 < 0:
        t3 += 1.0
    if t3 > 1:
        t3 -= 1.0
    if 6.0 * t3 < 1:
        return t2 + (t1 - t2) * 6.0 * t3
    if 2.0 * t3 < 1:
        return t1
    if 3.0 * t3 < 2:
        return t2 + (t1 - t2) * ((2.0 / 3.0) - t3) * 6.0
    return t2


@dataclass
class HlsColor:
    """A colour as hue (degrees), luminosity, saturation and alpha (0..1)."""

    hue: float = 0.0
    luminosity: float = 0.0
    saturation: float = 0.0
    alpha: float = 0.0

    @classmethod
    def from_rgb(cls, color: Color) -> HlsColor:
        result = cls()
        result.rgb = color
        return result

    @property
    def rgb(self) -> Color:
        lum, sat = self.luminosity, self.saturation
        alpha = _to_byte(self.alpha)
        if sat == 0:
            grey = _to_byte(lum)
            return Color(grey, grey, grey, alpha)

        t1 = lum * (1.0 + sat) if lum < 0.5 else lum + sat - lum * sat
        t2 = 2.0 * lum - t1
        h = self.hue / 360
        return Color(
            _to_byte(_transform(t1, t2, h + 1.0 / 3.0)),
            _to_byte(_transform(t1, t2, h)),
            _to_byte(_transform(t1, t2, h - 1.0 / 3.0)),
            alpha,
        )

    @rgb.setter
    def rgb(self, color: Color) -> None:
        red, green, blue = color.r / 255.0, color.g / 255.0, color.b / 255.0
        self.alpha = color.a / 255.0

        smallest = min(red, green, blue)
        largest = max(red, green, blue)
        delta = largest - smallest

        if largest == smallest:
            self.hue = 0.0
            self.saturation = 0.0
            self.luminosity = largest
            return

        self.luminosity = (smallest + largest) / 2.0
        if self.luminosity < 0.5:
            self.saturation = delta / (largest + smallest)
        else:
            self.saturation = delta / (2.0 - largest - smallest)

        if red == largest:
            hue = (green - blue) / delta
        elif green == largest:
            hue = 2.0 + (blue - red) / delta
        else:
            hue = 4.0 + (red - green) / delta
        hue *= 60
        if hue < 0:
            hue += 360
        self.hue = hue