"""Stacking stability: no layer may be wider than the layer beneath it.

A wider upper layer is tolerated by widening the recorded footprint of the
lower layer (technical clearance between its bars). This only changes
``Layer.clearance``; slots are never moved, added or removed.
"""

from __future__ import annotations

from typing import List

from ..errors import StabilityViolation
from .entities import EPS, Layer


def apply_technical_clearance(
    layers: List[Layer], max_width: float, notes: List[str]
) -> None:
    """First pass, used on the priority-ordered stack.

    Raises StabilityViolation at the first layer whose support cannot be
    widened within ``max_width``. Layers above it are not checked.
    """
    for i in range(1, len(layers)):
        current = layers[i]
        base = layers[i - 1]

        if current.total_width > base.total_width:
            diff = current.total_width - base.total_width

            if base.total_width + diff <= max_width + EPS:
                base.clearance += diff
                notes.append(
                    f"Level {base.index + 1}: technical clearance of {diff:.1f}cm "
                    "applied to support the layer above."
                )
            else:
                raise StabilityViolation(current.index, diff)


def settle_width_ordered(
    layers: List[Layer], max_width: float, notes: List[str], warnings: List[str]
) -> None:
    """Second pass, used after re-stacking by descending width.

    Always widens the lower layer. Clearance pushing a layer past
    ``max_width`` is reported as a warning.
    """
    for i in range(1, len(layers)):
        current = layers[i]
        base = layers[i - 1]

        if current.total_width > base.total_width:
            diff = current.total_width - base.total_width
            base.clearance += diff
            notes.append(
                f"Level {base.index + 1}: adjusted clearance of {diff:.1f}cm "
                "after width reordering."
            )
            if base.total_width > max_width + EPS:
                warnings.append(
                    f"Level {base.index + 1}: clearance raises the footprint to "
                    f"{base.total_width:.1f}cm, above the {max_width:.1f}cm limit."
                )


def is_pyramid(layers: List[Layer]) -> bool:
    return all(
        layers[i].total_width <= layers[i - 1].total_width + EPS
        for i in range(1, len(layers))
    )
