"""Shared fixtures for the loading planner tests."""

from __future__ import annotations

import os
import tempfile

import pytest

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="beamload-logs-"))

from beamload.model import BeamCatalog, BeamSpec, LoadConfig  # noqa: E402


@pytest.fixture
def catalog() -> BeamCatalog:
    """Small catalog with round numbers: widths/heights in cm, 12 m weights in kg."""
    return BeamCatalog(
        [
            BeamSpec("b10", "B 10", 10.0, 20.0, 120.0),
            BeamSpec("b12", "B 12", 12.0, 25.0, 150.0),
            BeamSpec("tall", "T 10", 10.0, 40.0, 300.0),
            BeamSpec("wide", "W 30", 30.0, 20.0, 400.0),
        ]
    )


@pytest.fixture
def config() -> LoadConfig:
    return LoadConfig(max_width=25.0, fixed_gap=0.0, wood_height=5.0)
