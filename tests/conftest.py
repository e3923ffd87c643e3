# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""
import pytest
from PySide6.QtCore import QCoreApplication

from harmonywheel import HarmonyConfig, HarmonyEngine


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class SignalRecorder:
    """Counts emissions of an engine's two signals."""

    def __init__(self, engine: HarmonyEngine):
        self.changed = 0
        self.commits = 0
        engine.markersChanged.connect(self._on_changed)
        engine.committed.connect(self._on_commit)

    def _on_changed(self):
        self.changed += 1

    def _on_commit(self):
        self.commits += 1


@pytest.fixture
def make_engine():
    def _make(data=None, seed=0, **options):
        return HarmonyEngine(data, config=HarmonyConfig(**options), rng=seed)
    return _make


@pytest.fixture
def recorder():
    return SignalRecorder
