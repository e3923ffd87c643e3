# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
from typing import Tuple

from .huespace import scientific_to_artistic, artistic_to_scientific, wrap_hue

__all__ = ["WheelGeometry"]


class WheelGeometry:
    """Maps points on the wheel disk to (hue, saturation) pairs and back.

    All positional methods work in a Cartesian frame centered on the wheel,
    with y pointing up and angles measured counter-clockwise from +x. The
    angle is an artistic hue (it matches the wheel image); hues passed in or
    returned are scientific.

    ``screen_to_cartesian`` and ``cartesian_to_screen`` translate from and to
    the usual widget frame: origin top-left, y pointing down, size 2r x 2r.
    """

    def __init__(self, radius: float = 175.0):
        """Initializes the geometry.

        Args:
            radius (float): Wheel radius in host units. Must be positive.

        Raises:
            ValueError: If the radius is not positive.
        """
        if radius <= 0:
            raise ValueError(f"Wheel radius must be positive, got {radius}")
        self.radius = float(radius)

    def screen_to_cartesian(self, x: float, y: float) -> Tuple[float, float]:
        return x - self.radius, self.radius - y

    def cartesian_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return x + self.radius, self.radius - y

    def point_on_circle(self, x: float, y: float) -> Tuple[float, float]:
        """Returns the closest point to (x, y) that still lies on the disk."""
        if np.hypot(x, y) <= self.radius:
            return x, y
        theta = np.arctan2(y, x)
        return float(self.radius * np.cos(theta)), float(self.radius * np.sin(theta))

    @staticmethod
    def angle_of(x: float, y: float) -> float:
        """Artistic hue (degrees) pointed at by (x, y)."""
        return wrap_hue(float(np.degrees(np.arctan2(y, x))))

    def hs_from_position(self, x: float, y: float) -> Tuple[float, float]:
        """Converts a position into a scientific hue and a saturation.

        Points outside the disk are clamped to its rim first.

        Args:
            x (float): Horizontal offset from the wheel center.
            y (float): Vertical offset from the wheel center (up is positive).

        Returns:
            Tuple[float, float]: (hue in [0, 360), saturation in [0, 1]).
        """
        x, y = self.point_on_circle(x, y)
        hue = wrap_hue(artistic_to_scientific(self.angle_of(x, y)))
        saturation = min(float(np.hypot(x, y)) / self.radius, 1.0)
        return hue, saturation

    def position_from_hs(self, hue: float, saturation: float) -> Tuple[float, float]:
        """Inverse of :meth:`hs_from_position`."""
        theta = np.radians(scientific_to_artistic(hue))
        r = self.radius * saturation
        return float(np.cos(theta) * r), float(np.sin(theta) * r)
