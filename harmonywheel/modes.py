# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

from enum import Enum
from typing import Dict, Union

__all__ = ["Mode", "InvalidModeError", "PERIODIC_MODES", "DEFAULT_SATURATION_FALLOFF"]


class InvalidModeError(ValueError):
    """Raised for a mode that is not one of :class:`Mode`."""


class Mode(Enum):
    """Relationships the wheel can keep between its markers."""
    ANALOGOUS = "Analogous"
    COMPLEMENTARY = "Complementary"
    TRIAD = "Triad"
    TETRAD = "Tetrad"
    MONOCHROMATIC = "Monochromatic"
    SHADES = "Shades"
    CUSTOM = "Custom"

    @classmethod
    def parse(cls, value: Union["Mode", str]) -> "Mode":
        """Resolves a Mode from an enum member, its value or its name.

        Raises:
            InvalidModeError: If ``value`` names no mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for mode in cls:
                if value == mode.value or value.upper() == mode.name:
                    return mode
        raise InvalidModeError(f"Invalid mode specified: {value!r}")


# Hue step (degrees) and period for the modes that cycle around the wheel.
PERIODIC_MODES: Dict[Mode, float] = {
    Mode.COMPLEMENTARY: 180.0,
    Mode.TRIAD: 120.0,
    Mode.TETRAD: 90.0,
}

# Saturation drop per completed cycle. Older wheels used a shared 0.08.
DEFAULT_SATURATION_FALLOFF: Dict[Mode, float] = {
    Mode.COMPLEMENTARY: 0.2,
    Mode.TRIAD: 0.3,
    Mode.TETRAD: 0.4,
}
