# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

from .modes import Mode, InvalidModeError
from .huespace import (scientific_to_artistic, artistic_to_scientific, wrap_hue,
                       marker_distance, shortest_rotation)
from .geometry import WheelGeometry
from .colormath import ColorEncoding, ColorMath, InvalidColorError
from .config import HarmonyConfig
from .engine import HarmonyEngine, Marker, MarkerLookupError
from .logging_config import setup_logging

__all__ = [
    "Mode", "InvalidModeError",
    "scientific_to_artistic", "artistic_to_scientific", "wrap_hue",
    "marker_distance", "shortest_rotation",
    "WheelGeometry",
    "ColorEncoding", "ColorMath", "InvalidColorError",
    "HarmonyConfig",
    "HarmonyEngine", "Marker", "MarkerLookupError",
    "setup_logging",
]

__version__ = "0.1.0"
