from __future__ import annotations

from typing import List

from .entities import EPS, Layer, LoadConfig, Slot


def _fits_height(layer_slots: List[Slot], slot: Slot, tolerance: float) -> bool:
    if not layer_slots:
        return True
    heights = [s.height for s in layer_slots]
    heights.append(slot.height)
    return max(heights) - min(heights) <= tolerance + EPS


def build_layers(pool: List[Slot], config: LoadConfig) -> List[Layer]:
    """Greedily fill layers from ``pool`` in scan order.

    The first slot of a layer counts its raw width, every later one adds
    ``config.fixed_gap``. A slot wider than the bed on its own is placed
    alone so the pool always shrinks.
    """
    layers: List[Layer] = []
    remaining = list(pool)
    gap = config.fixed_gap or 0

    while remaining:
        layer_slots: List[Slot] = []
        current_width = 0.0
        i = 0

        while i < len(remaining):
            slot = remaining[i]
            width_with_gap = slot.width if not layer_slots else slot.width + gap

            fits_width = current_width + width_with_gap <= config.max_width + EPS
            fits_height = _fits_height(layer_slots, slot, config.height_tolerance)

            if fits_width and fits_height:
                layer_slots.append(slot)
                current_width += width_with_gap
                remaining.pop(i)
            else:
                i += 1

        if not layer_slots:
            layer_slots.append(remaining.pop(0))

        layers.append(Layer.from_slots(len(layers), layer_slots))

    return layers


def oversized_layers(layers: List[Layer], config: LoadConfig) -> List[Layer]:
    """Layers holding a single slot that is wider than the bed."""
    return [
        layer
        for layer in layers
        if len(layer.slots) == 1 and layer.slots[0].width > config.max_width
    ]
