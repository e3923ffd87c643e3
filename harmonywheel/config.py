# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .colormath import ColorMath
from .modes import Mode, DEFAULT_SATURATION_FALLOFF

__all__ = ["HarmonyConfig", "hex_color_string"]


def hex_color_string(hue: float, saturation: float, value: float) -> str:
    """Default swatch formatter."""
    return ColorMath.to_hex(hue, saturation, value)


@dataclass
class HarmonyConfig:
    """Options recognized by :class:`~harmonywheel.engine.HarmonyEngine`.

    Attributes:
        initial_root_color: Color used for every marker of a generated set.
        initial_mode: Mode applied to generated sets. Accepts a Mode or its name.
        default_slice: Initial analogous spacing in artistic degrees.
        marker_count: Number of markers generated when no data is bound.
        wheel_radius: Radius of the wheel disk in the host's units.
        saturation_falloff: Saturation drop per cycle for periodic modes.
        color_string: Formatter ``(h, s, v) -> str`` used for swatch labels.
    """
    initial_root_color: str = "red"
    initial_mode: Union[Mode, str] = Mode.ANALOGOUS
    default_slice: float = 15.0
    marker_count: int = 5
    wheel_radius: float = 175.0
    saturation_falloff: Dict[Mode, float] = field(
        default_factory=lambda: dict(DEFAULT_SATURATION_FALLOFF))
    color_string: Callable[[float, float, float], str] = hex_color_string

    def __post_init__(self):
        self.initial_mode = Mode.parse(self.initial_mode)
        self.default_slice = float(self.default_slice)
        if int(self.marker_count) != self.marker_count or self.marker_count < 0:
            raise ValueError(f"marker_count must be a non-negative integer, got {self.marker_count}")
        self.marker_count = int(self.marker_count)
        if self.wheel_radius <= 0:
            raise ValueError(f"wheel_radius must be positive, got {self.wheel_radius}")
        if not callable(self.color_string):
            raise TypeError("color_string must be callable")

        falloff = dict(DEFAULT_SATURATION_FALLOFF)
        for key, k in self.saturation_falloff.items():
            falloff[Mode.parse(key)] = float(k)
        self.saturation_falloff = falloff

        # Fail here rather than on the first bind
        ColorMath.parse_color(self.initial_root_color)

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]] = None) -> "HarmonyConfig":
        """Builds a config from a mapping of option names.

        Raises:
            KeyError: If the mapping holds an unknown option.
        """
        options = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise KeyError(f"Unknown harmony options: {', '.join(unknown)}")
        return cls(**options)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "HarmonyConfig":
        """Loads options from a JSON object stored at ``path``."""
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Returns the JSON-serializable options (the formatter is skipped)."""
        return {
            "initial_root_color": self.initial_root_color,
            "initial_mode": self.initial_mode.value,
            "default_slice": self.default_slice,
            "marker_count": self.marker_count,
            "wheel_radius": self.wheel_radius,
            "saturation_falloff": {m.value: k for m, k in self.saturation_falloff.items()},
        }
