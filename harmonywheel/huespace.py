# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import math
import numpy as np
from typing import Union

__all__ = ["SCIENTIFIC_BREAKPOINTS", "ARTISTIC_BREAKPOINTS",
           "scientific_to_artistic", "artistic_to_scientific",
           "wrap_hue", "marker_distance", "shortest_rotation"]

# Segment boundaries of the painter's wheel. Index k of one table maps to
# index k of the other; between two boundaries the mapping is linear.
SCIENTIFIC_BREAKPOINTS = np.array([0.0, 35.0, 60.0, 120.0, 180.0, 240.0, 300.0, 360.0])
ARTISTIC_BREAKPOINTS   = np.array([0.0, 60.0, 122.0, 165.0, 218.0, 275.0, 330.0, 360.0])

HueLike = Union[float, np.ndarray]


def _interp(hue: HueLike, xp: np.ndarray, fp: np.ndarray) -> HueLike:
    """Piecewise-linear lookup that keeps scalars as plain floats."""
    out = np.interp(hue, xp, fp)
    if np.ndim(out) == 0:
        return float(out)
    return out


def scientific_to_artistic(hue: HueLike) -> HueLike:
    """Converts a uniform (scientific) hue into the wheel's artistic hue.

    Args:
        hue: Hue in degrees [0, 360], scalar or numpy array.

    Returns:
        The artistic hue in degrees, same shape as the input.
    """
    return _interp(hue, SCIENTIFIC_BREAKPOINTS, ARTISTIC_BREAKPOINTS)


def artistic_to_scientific(hue: HueLike) -> HueLike:
    """Inverse of :func:`scientific_to_artistic`.

    Args:
        hue: Artistic hue in degrees [0, 360], scalar or numpy array.

    Returns:
        The scientific hue in degrees, same shape as the input.
    """
    return _interp(hue, ARTISTIC_BREAKPOINTS, SCIENTIFIC_BREAKPOINTS)


def wrap_hue(hue: HueLike) -> HueLike:
    """Wraps an angle into [0, 360)."""
    # The second modulo catches operands below -720 and the 360.0 that
    # float rounding can produce for tiny negative inputs.
    wrapped = ((hue + 720.0) % 360.0) % 360.0
    if np.ndim(wrapped) == 0:
        wrapped = float(wrapped)
        return 0.0 if wrapped >= 360.0 else wrapped
    return np.where(wrapped >= 360.0, 0.0, wrapped)


def marker_distance(i: int) -> int:
    """Signed ring index of the marker at visible position ``i``.

    Domain: [0, 1,  2, 3,  4, ...]
    Range:  [0, 1, -1, 2, -2, ...]

    New markers alternate right and left of the root, so five analogous
    markers read (-2, -1, 0, +1, +2) around the wheel.
    """
    if i < 0:
        raise ValueError(f"Marker position must be non-negative, got {i}")
    step = math.ceil(i / 2)
    return step if i % 2 else -step


def shortest_rotation(start: float, end: float) -> float:
    """Signed angle from ``start`` to ``end`` along the shorter arc.

    Args:
        start: Starting angle in degrees.
        end: Target angle in degrees.

    Returns:
        float: Rotation in degrees within [-180, 180]. Negative values
        rotate clockwise.
    """
    theta1 = (360.0 + start - end) % 360.0
    theta2 = (360.0 + end - start) % 360.0
    return -theta1 if theta1 < theta2 else theta2
