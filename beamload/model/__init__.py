"""
Model package - the beam loading planner.

Re-exports the pieces used by the service layer:
- entities: BeamSpec, OrderLine, Slot, Layer, LoadConfig, CalculationResult
- catalog: BeamCatalog and the built-in W-beam table
- flattener / layer_builder / pyramid: the individual planning steps
- engine: LoadingEngine, which runs the two stacking strategies
"""

from __future__ import annotations

from .entities import (
    BASE_LENGTH,
    HALF_LENGTH,
    MAX_SHIM_HEIGHT,
    BeamSegment,
    BeamSpec,
    CalculationResult,
    Layer,
    LoadConfig,
    OrderLine,
    Slot,
)
from .catalog import BEAM_CATALOG, BeamCatalog, load_catalog
from .flattener import flatten_items_to_slots
from .layer_builder import build_layers
from .pyramid import apply_technical_clearance, is_pyramid, settle_width_ordered
from .engine import (
    STRATEGY_PRIORITY,
    STRATEGY_WIDTH,
    LoadingEngine,
    calculate,
)

__all__ = [
    "BASE_LENGTH",
    "HALF_LENGTH",
    "MAX_SHIM_HEIGHT",
    "BeamSegment",
    "BeamSpec",
    "CalculationResult",
    "Layer",
    "LoadConfig",
    "OrderLine",
    "Slot",
    "BEAM_CATALOG",
    "BeamCatalog",
    "load_catalog",
    "flatten_items_to_slots",
    "build_layers",
    "apply_technical_clearance",
    "settle_width_ordered",
    "is_pyramid",
    "STRATEGY_PRIORITY",
    "STRATEGY_WIDTH",
    "LoadingEngine",
    "calculate",
]
