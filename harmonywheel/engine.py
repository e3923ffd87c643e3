# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor

from harmonywheel.colormath import ColorEncoding, ColorMath
from harmonywheel.config import HarmonyConfig
from harmonywheel.geometry import WheelGeometry
from harmonywheel.huespace import (scientific_to_artistic, artistic_to_scientific, wrap_hue,
                                   marker_distance, shortest_rotation)
from harmonywheel.modes import Mode, PERIODIC_MODES

__all__ = ["Marker", "HarmonyEngine", "MarkerLookupError"]

logger = logging.getLogger(__name__)

MarkerRef = Union["Marker", int]
ColorDatum = Union[str, QColor, Mapping[str, Any], "Marker"]


class MarkerLookupError(LookupError):
    """Raised when a marker reference does not belong to the engine."""


def _clamp01(x: float) -> float:
    return min(1.0, max(0.0, float(x)))


@dataclass(eq=False)
class Marker:
    """One colored point on the wheel.

    ``hue`` is scientific, in [0, 360). ``index`` is the marker's position in
    the bound sequence and never changes while the set is bound, even when
    other markers are hidden.
    """
    hue: float
    saturation: float
    value: float
    index: int
    label: Optional[str] = None
    visible: bool = True
    is_root: bool = False

    def __post_init__(self):
        self.set_hsv(self.hue, self.saturation, self.value)

    def set_hsv(self, hue: float, saturation: float, value: float):
        """Stores a color, wrapping the hue and clamping the other channels."""
        self.hue = wrap_hue(float(hue))
        self.saturation = _clamp01(saturation)
        self.value = _clamp01(value)

    @property
    def artistic_hue(self) -> float:
        return scientific_to_artistic(self.hue)


class HarmonyEngine(QObject):
    """Keeps a set of color markers in a harmonic relationship.

    The first visible marker is the root. Non-root markers are derived from
    it according to the current :class:`Mode`, and follow along while any
    marker is dragged around the wheel.

    Signals:
        markersChanged: Emitted after every change of hue, saturation or value.
        committed: Emitted once an interaction settles (drag released, mode
            switched, slider released).

    Example:
        >>> engine = HarmonyEngine(5, config=HarmonyConfig(initial_mode="Triad"))
        >>> engine.markersChanged.connect(view.update)
        >>> engine.colors_as("hex")
    """
    markersChanged = Signal()
    committed = Signal()

    def __init__(self,
                 data: Union[None, int, Sequence[ColorDatum]] = None,
                 config: Union[HarmonyConfig, Mapping[str, Any], None] = None,
                 rng: Union[np.random.Generator, int, None] = None,
                 parent: Optional[QObject] = None):
        """Initializes the engine and binds the initial data.

        Args:
            data: Colors to bind, a marker count, or None for
                ``config.marker_count`` generated markers.
            config: A HarmonyConfig or a mapping of its options.
            rng: Random generator (or seed) for the Monochromatic and Shades modes.
            parent: Optional Qt parent object.
        """
        super().__init__(parent)
        if config is None:
            config = HarmonyConfig()
        elif not isinstance(config, HarmonyConfig):
            config = HarmonyConfig.from_dict(config)
        self.config = config
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
        self.geometry = WheelGeometry(config.wheel_radius)

        self._markers: List[Marker] = []
        self._mode = config.initial_mode
        self._slice = config.default_slice
        # Artistic hue of each visible marker at drag start, keyed by index
        self._starting_hues: Optional[Dict[int, float]] = None

        self.bind(data)

    # --- State access ---

    @property
    def markers(self) -> Tuple[Marker, ...]:
        return tuple(self._markers)

    @property
    def visible_markers(self) -> List[Marker]:
        return [m for m in self._markers if m.visible]

    @property
    def root(self) -> Optional[Marker]:
        for m in self._markers:
            if m.visible:
                return m
        return None

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def slice(self) -> float:
        """Analogous step in artistic degrees."""
        return self._slice

    @property
    def is_dragging(self) -> bool:
        return self._starting_hues is not None

    def marker(self, ref: MarkerRef) -> Marker:
        """Resolves a Marker or its index to the engine's marker.

        Raises:
            MarkerLookupError: If the reference is not part of this set.
        """
        if isinstance(ref, Marker):
            if any(m is ref for m in self._markers):
                return ref
            raise MarkerLookupError("Marker is not part of this harmony set")
        if isinstance(ref, (int, np.integer)) and not isinstance(ref, bool):
            if 0 <= ref < len(self._markers):
                return self._markers[ref]
        raise MarkerLookupError(f"No marker for reference {ref!r}")

    def visible_position(self, ref: MarkerRef) -> int:
        """Position of a visible marker among the visible markers (root is 0)."""
        target = self.marker(ref)
        for i, m in enumerate(self.visible_markers):
            if m is target:
                return i
        raise MarkerLookupError(f"Marker {target.index} is hidden")

    # --- Binding ---

    def bind(self, data: Union[None, int, Sequence[ColorDatum]] = None):
        """Replaces the marker set.

        Args:
            data: None or an int generate that many copies of
                ``initial_root_color`` in ``initial_mode``. A sequence of
                colors (strings, QColors or dicts with ``color``, ``label``
                and ``visible`` keys) is bound verbatim in Custom mode.

        Raises:
            InvalidModeError: If the configured initial mode is invalid.
            InvalidColorError: If a color cannot be parsed.
        """
        initial_mode = Mode.parse(self.config.initial_mode)

        if data is None or (isinstance(data, (int, np.integer)) and not isinstance(data, bool)):
            count = self.config.marker_count if data is None else int(data)
            if count < 0:
                raise ValueError(f"Marker count must be non-negative, got {count}")
            h, s, v = ColorMath.parse_color(self.config.initial_root_color)
            markers = [Marker(h, s, v, index=i) for i in range(count)]
            mode = initial_mode
        elif isinstance(data, (str, bytes, QColor)):
            raise TypeError("bind() expects a sequence of colors or a marker count")
        else:
            markers = [self._marker_from_datum(datum, i) for i, datum in enumerate(data)]
            mode = Mode.CUSTOM

        self._markers = markers
        self._mode = mode
        self._slice = self.config.default_slice
        self._starting_hues = None
        self._assign_root()
        logger.info("Bound %d markers in %s mode", len(markers), mode.value)

        if mode is Mode.CUSTOM:
            self._notify(commit=True)
        else:
            self.regenerate()

    @staticmethod
    def _marker_from_datum(datum: ColorDatum, index: int) -> Marker:
        if isinstance(datum, Marker):
            return Marker(datum.hue, datum.saturation, datum.value, index=index,
                          label=datum.label, visible=datum.visible)
        if isinstance(datum, (str, QColor)):
            return Marker(*ColorMath.parse_color(datum), index=index)
        if isinstance(datum, Mapping):
            if "color" not in datum:
                raise ValueError(f"Color entry {index} has no 'color' key")
            h, s, v = ColorMath.parse_color(datum["color"])
            label = datum.get("label", datum.get("name"))
            return Marker(h, s, v, index=index, label=label,
                          visible=bool(datum.get("visible", True)))
        raise TypeError(f"Unsupported color entry at {index}: {type(datum).__name__}")

    def _assign_root(self):
        root = self.root
        for m in self._markers:
            m.is_root = m is root

    def _notify(self, commit: bool = False):
        self.markersChanged.emit()
        if commit:
            self.committed.emit()

    # --- Mode generation ---

    def set_mode(self, mode: Union[Mode, str]):
        """Switches the harmony mode and regenerates the markers.

        Raises:
            InvalidModeError: If ``mode`` is unknown. State is left untouched.
        """
        mode = Mode.parse(mode)
        logger.debug("Mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode
        self.regenerate()

    def regenerate(self):
        """Re-derives every visible non-root marker from the root.

        Skipped when there is no visible root. Custom mode leaves colors
        untouched but still notifies.
        """
        root = self.root
        if root is None:
            logger.debug("No root marker, skipping regeneration")
            return

        for m, hsv in self._generate(root, self.visible_markers[1:]):
            m.set_hsv(*hsv)
        self._notify(commit=True)

    def _generate(self, root: Marker, others: List[Marker]) -> List[Tuple[Marker, Tuple[float, float, float]]]:
        mode = self._mode
        if mode is Mode.CUSTOM:
            return []

        root_art = scientific_to_artistic(root.hue)

        def rotated(offset: float) -> float:
            return artistic_to_scientific(wrap_hue(root_art + offset))

        updates = []
        for i, m in enumerate(others, start=1):
            if mode is Mode.ANALOGOUS:
                hsv = (rotated(marker_distance(i) * self._slice), 1.0, 1.0)
            elif mode is Mode.MONOCHROMATIC:
                sat = 1.0 - (0.15 * i + self.rng.random() * 0.1)
                val = 0.75 + self.rng.random() * 0.25
                hsv = (root.hue, sat, val)
            elif mode is Mode.SHADES:
                hsv = (root.hue, 1.0, 0.25 + self.rng.random() * 0.75)
            else:
                step = PERIODIC_MODES[mode]
                period = int(round(360.0 / step))
                falloff = self.config.saturation_falloff[mode]
                hsv = (rotated((i % period) * step), 1.0 - falloff * (i // period), 1.0)
            updates.append((m, hsv))
        return updates

    # --- Drag re-harmonization ---

    def drag_start(self):
        """Snapshots the artistic hue of every visible marker.

        Calling it again, e.g. after a lost pointer, discards the old snapshot.
        """
        self._starting_hues = {m.index: m.artistic_hue for m in self.visible_markers}

    def drag_move(self, ref: MarkerRef, x: float, y: float):
        """Moves a marker to a pointer position and re-harmonizes the rest.

        Args:
            ref: The dragged marker or its index.
            x (float): Pointer offset from the wheel center.
            y (float): Pointer offset from the wheel center, up is positive.
        """
        target = self.marker(ref)
        if self.root is None or not target.visible:
            logger.debug("Ignoring drag of marker %d (hidden or no root)", target.index)
            return

        visible = self.visible_markers
        if self._starting_hues is None or any(m.index not in self._starting_hues for m in visible):
            self.drag_start()
        start = self._starting_hues

        hue, sat = self.geometry.hs_from_position(x, y)
        drag_angle = self.geometry.angle_of(x, y)
        theta = shortest_rotation(start[target.index], drag_angle)

        updates = {target: (hue, sat, target.value)}
        if self._mode is Mode.ANALOGOUS:
            target_distance = marker_distance(visible.index(target))
            for i, m in enumerate(visible):
                if m is target:
                    continue
                ratio = marker_distance(i) / target_distance if target_distance != 0 else 1.0
                new_hue = artistic_to_scientific(wrap_hue(start[m.index] + theta * ratio))
                updates[m] = (new_hue, m.saturation, m.value)
        elif self._mode is not Mode.CUSTOM:
            for m in visible:
                if m is target:
                    continue
                new_hue = artistic_to_scientific(wrap_hue(start[m.index] + theta))
                updates[m] = (new_hue, m.saturation, m.value)
            if self._mode is Mode.SHADES:
                updates = {m: (h, 1.0, v) for m, (h, _, v) in updates.items()}

        for m, hsv in updates.items():
            m.set_hsv(*hsv)
        self.markersChanged.emit()

    def drag_end(self):
        """Finishes a drag gesture and emits ``committed``."""
        was_dragging = self._starting_hues is not None
        self._starting_hues = None
        if was_dragging and self._mode is Mode.ANALOGOUS:
            self._recalibrate_slice()
        self.committed.emit()

    def _recalibrate_slice(self):
        visible = self.visible_markers
        if len(visible) < 2:
            return
        # Position 1 sits at ring index +1, one slice from the root
        gap = shortest_rotation(visible[0].artistic_hue, visible[1].artistic_hue)
        logger.debug("Analogous slice %.3f -> %.3f", self._slice, gap)
        self._slice = gap

    # --- Direct edits ---

    def set_marker_value(self, ref: MarkerRef, value: float):
        """Sets a marker's value (brightness) directly, as a slider would."""
        m = self.marker(ref)
        m.value = _clamp01(value)
        self.markersChanged.emit()

    def set_marker_visible(self, ref: MarkerRef, visible: bool):
        """Shows or hides a marker, moving the root if needed.

        Hidden markers keep their index and are skipped by all harmony math.
        """
        m = self.marker(ref)
        visible = bool(visible)
        if m.visible == visible:
            return
        m.visible = visible
        self._assign_root()
        if self.root is None:
            self._notify(commit=True)
        else:
            self.regenerate()

    def commit(self):
        """Signals that a host-driven edit (e.g. a slider release) has settled."""
        self.committed.emit()

    # --- Read-back ---

    def colors_as(self, encoding: Union[ColorEncoding, str] = ColorEncoding.HEX) -> List[str]:
        """Returns the visible colors sorted by ascending hue.

        Args:
            encoding: "hex", "rgb", "hsl", "hsv" or a ColorEncoding.

        Returns:
            List[str]: One encoded color per visible marker. Equal hues keep
            their sequence order.
        """
        ordered = sorted(self.visible_markers, key=lambda m: m.hue)
        return ColorMath.encode([m.hue for m in ordered],
                                [m.saturation for m in ordered],
                                [m.value for m in ordered],
                                encoding)

    def color_strings(self) -> List[str]:
        """Visible colors in sequence order, formatted by ``config.color_string``."""
        return [self.config.color_string(m.hue, m.saturation, m.value)
                for m in self.visible_markers]


if __name__ == "__main__":
    from harmonywheel.logging_config import setup_logging

    setup_logging(logging.DEBUG)
    engine = HarmonyEngine(5, config=HarmonyConfig(initial_root_color="#3daee9"), rng=0)
    for mode in Mode:
        engine.set_mode(mode)
        print(f"{mode.value:>14}: {', '.join(engine.colors_as('hex'))}")
