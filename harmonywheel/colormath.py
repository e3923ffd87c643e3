# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
from enum import Enum
from typing import List, Tuple, Union
from PySide6.QtGui import QColor

__all__ = ["ColorEncoding", "ColorMath", "InvalidColorError"]


class InvalidColorError(ValueError):
    """Raised when a color string cannot be parsed."""


class ColorEncoding(Enum):
    """String encodings available for read-back."""
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"

    @classmethod
    def parse(cls, value: Union["ColorEncoding", str]) -> "ColorEncoding":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(e.value for e in cls)
            raise ValueError(f"Invalid color encoding: {value!r} (expected one of {valid})") from None


class ColorMath:
    """Vectorized color conversion and string formatting helpers.

    Hues are in degrees [0, 360), saturation and value in [0, 1].
    """

    @staticmethod
    def parse_color(color: Union[str, QColor]) -> Tuple[float, float, float]:
        """Parses a color name or hex code into HSV components.

        Args:
            color: Anything QColor understands ("red", "#3daee9", ...) or a QColor.

        Returns:
            Tuple of (hue, saturation, value). Achromatic colors get hue 0.

        Raises:
            InvalidColorError: If the color cannot be parsed.
        """
        c = color if isinstance(color, QColor) else QColor(color)
        if not c.isValid():
            raise InvalidColorError(f"Invalid color: {color!r}")
        hue = c.hueF()
        # Grayscale colors report hue -1
        if hue < 0: hue = 0.0
        # Qt keeps hue in 1/100 degree and s, v in 16 bits but hands them
        # out as float32; snap back to the stored steps
        hue = round(hue * 36000) / 100.0
        sat = round(c.saturationF() * 65535) / 65535
        val = round(c.valueF() * 65535) / 65535
        return hue % 360.0, sat, val

    @staticmethod
    def hsv_to_rgb_vectorized(h, s, v):
        """Converts HSV to RGB using NumPy vectorization.

        Args:
            h: Hue (0.0 - 1.0), scalar or numpy array.
            s: Saturation (0.0 - 1.0), scalar or numpy array.
            v: Value (0.0 - 1.0), scalar or numpy array.

        Returns:
            Tuple of (r, g, b) where values are 0-255.
        """
        h = np.asarray(h, dtype=np.float64)
        s = np.asarray(s, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)
        h6 = h * 6.0
        r_base = np.clip(np.abs(h6 - 3) - 1, 0, 1)
        g_base = np.clip(2 - np.abs(h6 - 2), 0, 1)
        b_base = np.clip(2 - np.abs(h6 - 4), 0, 1)
        s_inv = 1.0 - s
        red   = v * (s_inv + s * r_base) * 255
        green = v * (s_inv + s * g_base) * 255
        blue  = v * (s_inv + s * b_base) * 255
        return red, green, blue

    @staticmethod
    def hsv_to_hsl_vectorized(s, v):
        """Returns (saturation, lightness) of the HSL model for HSV input."""
        s = np.asarray(s, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)
        lightness = v * (1.0 - s / 2.0)
        denom = np.minimum(lightness, 1.0 - lightness)
        with np.errstate(divide="ignore", invalid="ignore"):
            sat = np.where(denom > 0, (v - lightness) / np.where(denom > 0, denom, 1.0), 0.0)
        return sat, lightness

    @staticmethod
    def encode(hues, sats, vals, encoding: Union[ColorEncoding, str] = ColorEncoding.HEX) -> List[str]:
        """Formats HSV triples as strings.

        Args:
            hues: Hues in degrees, sequence or numpy array.
            sats: Saturations (0.0 - 1.0).
            vals: Values (0.0 - 1.0).
            encoding: Target encoding, a ColorEncoding or its name.

        Returns:
            List[str]: One string per color, e.g. ``#ff0000``,
            ``rgb(255, 0, 0)``, ``hsl(0, 100%, 50%)`` or ``hsv(0, 100%, 100%)``.
        """
        encoding = ColorEncoding.parse(encoding)
        hues = np.atleast_1d(np.asarray(hues, dtype=np.float64))
        sats = np.atleast_1d(np.clip(np.asarray(sats, dtype=np.float64), 0.0, 1.0))
        vals = np.atleast_1d(np.clip(np.asarray(vals, dtype=np.float64), 0.0, 1.0))
        if hues.size == 0:
            return []

        degrees = np.rint(hues).astype(np.int64) % 360

        if encoding is ColorEncoding.HSV:
            pct_s = np.rint(sats * 100).astype(np.int64)
            pct_v = np.rint(vals * 100).astype(np.int64)
            return [f"hsv({h}, {s}%, {v}%)" for h, s, v in zip(degrees, pct_s, pct_v)]

        if encoding is ColorEncoding.HSL:
            hsl_s, hsl_l = ColorMath.hsv_to_hsl_vectorized(sats, vals)
            pct_s = np.rint(hsl_s * 100).astype(np.int64)
            pct_l = np.rint(hsl_l * 100).astype(np.int64)
            return [f"hsl({h}, {s}%, {l}%)" for h, s, l in zip(degrees, pct_s, pct_l)]

        r, g, b = ColorMath.hsv_to_rgb_vectorized((hues % 360.0) / 360.0, sats, vals)
        rgb = np.column_stack((r, g, b))
        rgb = np.clip(np.rint(rgb), 0, 255).astype(np.int64)
        if encoding is ColorEncoding.RGB:
            return [f"rgb({r}, {g}, {b})" for r, g, b in rgb]
        return [f"#{r:02x}{g:02x}{b:02x}" for r, g, b in rgb]

    @staticmethod
    def to_hex(hue: float, saturation: float, value: float) -> str:
        return ColorMath.encode(hue, saturation, value, ColorEncoding.HEX)[0]
