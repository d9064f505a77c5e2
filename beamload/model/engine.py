from __future__ import annotations

from typing import List, Optional

from ..errors import StabilityViolation
from ..logger import logger
from .catalog import BEAM_CATALOG, BeamCatalog
from .entities import CalculationResult, Layer, LoadConfig, OrderLine, Slot
from .flattener import flatten_items_to_slots
from .layer_builder import build_layers, oversized_layers
from .pyramid import apply_technical_clearance, settle_width_ordered

STRATEGY_PRIORITY = "priority"
STRATEGY_WIDTH = "width"

PRIORITY_VIOLATED_WARNING = (
    "PRIORITY OVERRIDDEN: the delivery order (LIFO) was changed automatically "
    "to keep the load STABLE and SAFE. Wider beams were moved to the base."
)


def priority_order(slots: List[Slot]) -> List[Slot]:
    # Highest priority value at the base, so priority 1 is unloaded first.
    return sorted(slots, key=lambda s: -s.priority)


def width_order(slots: List[Slot]) -> List[Slot]:
    return sorted(slots, key=lambda s: (-s.width, -s.priority))


class LoadingEngine:
    """Plans how beams stack on a truck bed, layer by layer.

    First tries to honour the delivery priority. When that stack cannot be
    made into a pyramid, the pool is re-stacked by descending width.
    """

    def __init__(self, catalog: Optional[BeamCatalog] = None) -> None:
        self.catalog = catalog if catalog is not None else BeamCatalog(BEAM_CATALOG)

    def calculate(self, items: List[OrderLine], config: LoadConfig) -> CalculationResult:
        config.validate()
        if not items:
            return CalculationResult()

        for item in items:
            item.validate()

        logger.info(f"Starting load calculation with {len(items)} order lines")

        engineering_notes: List[str] = ["Starting load physics processing."]
        warnings: List[str] = []
        errors: List[str] = []

        pool = priority_order(flatten_items_to_slots(items, self.catalog))
        layers = build_layers(pool, config)
        strategy = STRATEGY_PRIORITY

        try:
            apply_technical_clearance(layers, config.max_width, engineering_notes)
        except StabilityViolation as e:
            logger.warning(f"Priority stacking rejected: {e}")
            warnings.append(PRIORITY_VIOLATED_WARNING)
            engineering_notes.append(
                "Safety decision: the pyramid could not hold the LIFO order. "
                "Reordered by descending width."
            )
            pool = width_order(pool)
            layers = build_layers(pool, config)
            settle_width_ordered(layers, config.max_width, engineering_notes, warnings)
            strategy = STRATEGY_WIDTH

        for layer in oversized_layers(layers, config):
            slot = layer.slots[0]
            warnings.append(
                f"Level {layer.index + 1}: {slot.gauge} is {slot.width:.1f}cm wide, "
                f"above the {config.max_width:.1f}cm limit, and was loaded alone."
            )

        result = self._consolidate(
            layers, config, errors, warnings, engineering_notes, strategy
        )
        logger.info(
            f"Load calculated: {result.layer_count} layers, "
            f"{result.total_weight:.1f}kg, {result.total_height:.1f}cm high, "
            f"{result.max_width_used:.1f}cm wide ({strategy} order)"
        )
        return result

    def _consolidate(
        self,
        layers: List[Layer],
        config: LoadConfig,
        errors: List[str],
        warnings: List[str],
        engineering_notes: List[str],
        strategy: str,
    ) -> CalculationResult:
        total_weight = 0.0
        total_height = 0.0
        max_width_used = 0.0

        for layer in layers:
            total_weight += layer.weight
            total_height += layer.max_height + config.wood_height
            if layer.total_width > max_width_used:
                max_width_used = layer.total_width

        return CalculationResult(
            layers=layers,
            total_weight=total_weight,
            total_height=total_height,
            max_width_used=max_width_used,
            errors=errors,
            warnings=warnings,
            engineering_notes=engineering_notes,
            strategy=strategy,
        )


def calculate(
    items: List[OrderLine],
    config: LoadConfig,
    catalog: Optional[BeamCatalog] = None,
) -> CalculationResult:
    return LoadingEngine(catalog).calculate(items, config)
