from __future__ import annotations

from typing import Dict, List, Tuple

from .catalog import BeamCatalog
from .entities import (
    BASE_LENGTH,
    HALF_LENGTH,
    BeamSegment,
    BeamSpec,
    OrderLine,
    Slot,
)


def _full_slot(beam: BeamSpec, priority: int) -> Slot:
    return Slot(
        beam_id=beam.id,
        gauge=beam.gauge,
        width=beam.width,
        height=beam.height,
        weight=beam.weight_12m,
        priority=priority,
        is_paired=False,
        beams=(BeamSegment(beam.gauge, BASE_LENGTH, beam.weight_12m),),
    )


def _half_slots(beam: BeamSpec, priority: int, quantity: int) -> List[Slot]:
    half_weight = beam.weight_12m / 2
    half = BeamSegment(beam.gauge, HALF_LENGTH, half_weight)
    slots: List[Slot] = []

    # two 6 m bars laid end to end take the footprint of one 12 m bar
    while quantity >= 2:
        slots.append(
            Slot(
                beam_id=beam.id,
                gauge=beam.gauge,
                width=beam.width,
                height=beam.height,
                weight=beam.weight_12m,
                priority=priority,
                is_paired=True,
                beams=(half, half),
            )
        )
        quantity -= 2

    if quantity == 1:
        slots.append(
            Slot(
                beam_id=beam.id,
                gauge=beam.gauge,
                width=beam.width,
                height=beam.height,
                weight=half_weight,
                priority=priority,
                is_paired=False,
                beams=(half,),
            )
        )
    return slots


def flatten_items_to_slots(items: List[OrderLine], catalog: BeamCatalog) -> List[Slot]:
    """Expand order lines into packable slots.

    12 m lines give one slot per bar. 6 m lines are pooled per
    (priority, beam) and paired; an odd bar out becomes a half-weight slot.
    Raises BeamNotFoundError for a beam missing from the catalog.
    """
    slots: List[Slot] = []

    for item in items:
        if item.length != BASE_LENGTH:
            continue
        beam = catalog.get(item.beam_id)
        for _ in range(item.quantity):
            slots.append(_full_slot(beam, item.priority))

    grouped: Dict[Tuple[int, str], int] = {}
    for item in items:
        if item.length != HALF_LENGTH:
            continue
        key = (item.priority, item.beam_id)
        grouped[key] = grouped.get(key, 0) + item.quantity

    for (priority, beam_id), quantity in grouped.items():
        beam = catalog.get(beam_id)
        slots.extend(_half_slots(beam, priority, quantity))

    return slots
