# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Read-only helpers for palette views that listen to a HarmonyEngine.
"""

from typing import List

from .engine import HarmonyEngine
from .huespace import marker_distance
from .modes import Mode

__all__ = ["swatch_order", "gradient_stops", "gradient_css"]


def swatch_order(engine: HarmonyEngine) -> List[int]:
    """Sort keys for laying out one swatch per visible marker.

    Triads group by their three hue families; every other mode lays the
    swatches out left-to-right as the markers fan around the root.
    """
    count = len(engine.visible_markers)
    if engine.mode is Mode.TRIAD:
        return [i % 3 for i in range(count)]
    return [marker_distance(i) for i in range(count)]


def gradient_stops(engine: HarmonyEngine) -> List[str]:
    """Hex stops of a hue-sorted background gradient, inset 10% at both ends."""
    stops = engine.colors_as("hex")
    if not stops:
        return stops
    stops[0] += " 10%"
    stops[-1] += " 90%"
    return stops


def gradient_css(engine: HarmonyEngine) -> str:
    """CSS ``linear-gradient`` built from :func:`gradient_stops`."""
    stops = gradient_stops(engine)
    if not stops:
        return "none"
    return f"linear-gradient(to right, {', '.join(stops)})"
