from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..errors import InvalidConfiguration, InvalidOrderLine

# Catalog weights refer to the 12 m bar; 6 m bars are paired end to end.
BASE_LENGTH = 12
HALF_LENGTH = 6
SUPPORTED_LENGTHS = (BASE_LENGTH, HALF_LENGTH)

EPS = 1e-6

# Maximum height difference (cm) that can be shimmed inside one layer.
MAX_SHIM_HEIGHT = 10.0


@dataclass(frozen=True)
class BeamSpec:
    id: str
    gauge: str
    width: float
    height: float
    weight_12m: float


@dataclass(frozen=True)
class BeamSegment:
    gauge: str
    length: int
    weight: float


@dataclass(frozen=True)
class OrderLine:
    beam_id: str
    length: int
    quantity: int
    priority: int = 1
    from_order_list: bool = True

    def validate(self) -> None:
        if not self.beam_id:
            raise InvalidOrderLine("order line is missing a beam id")
        if self.length not in SUPPORTED_LENGTHS:
            raise InvalidOrderLine(
                f"{self.beam_id}: length {self.length}m is not supported, "
                f"expected one of {SUPPORTED_LENGTHS}"
            )
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidOrderLine(f"{self.beam_id}: quantity must be an integer")
        if self.quantity < 1:
            raise InvalidOrderLine(f"{self.beam_id}: quantity must be at least 1")
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise InvalidOrderLine(f"{self.beam_id}: priority must be an integer")


@dataclass(frozen=True)
class Slot:
    """One packable unit: a 12 m bar, a pair of 6 m bars, or a lone 6 m bar."""

    beam_id: str
    gauge: str
    width: float
    height: float
    weight: float
    priority: int
    is_paired: bool
    beams: Tuple[BeamSegment, ...]


@dataclass
class Layer:
    index: int
    slots: List[Slot]
    slots_width: float
    max_height: float
    min_height: float
    height_diff: float
    priority: int
    # Technical clearance added to hold a wider layer above; not a physical slot.
    clearance: float = 0.0

    @classmethod
    def from_slots(cls, index: int, slots: List[Slot]) -> "Layer":
        heights = [s.height for s in slots]
        max_height = max(heights)
        min_height = min(heights)
        return cls(
            index=index,
            slots=list(slots),
            slots_width=sum(s.width for s in slots),
            max_height=max_height,
            min_height=min_height,
            height_diff=max_height - min_height,
            priority=min(s.priority for s in slots),
        )

    @property
    def total_width(self) -> float:
        return self.slots_width + self.clearance

    @property
    def weight(self) -> float:
        return sum(s.weight for s in self.slots)

    @property
    def beam_count(self) -> int:
        return sum(len(s.beams) for s in self.slots)


@dataclass(frozen=True)
class LoadConfig:
    max_width: float
    fixed_gap: float = 0.0
    wood_height: float = 0.0
    height_tolerance: float = MAX_SHIM_HEIGHT

    def validate(self) -> None:
        if self.max_width is None or self.max_width <= 0:
            raise InvalidConfiguration("max_width must be a positive number")
        if self.fixed_gap is None or self.fixed_gap < 0:
            raise InvalidConfiguration("fixed_gap must not be negative")
        if self.wood_height is None or self.wood_height < 0:
            raise InvalidConfiguration("wood_height must not be negative")
        if self.height_tolerance is None or self.height_tolerance < 0:
            raise InvalidConfiguration("height_tolerance must not be negative")


@dataclass(frozen=True)
class CalculationResult:
    layers: List[Layer] = field(default_factory=list)
    total_weight: float = 0.0
    total_height: float = 0.0
    max_width_used: float = 0.0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    engineering_notes: List[str] = field(default_factory=list)
    strategy: Optional[str] = None

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    @property
    def slot_count(self) -> int:
        return sum(len(layer.slots) for layer in self.layers)

    @property
    def beam_count(self) -> int:
        return sum(layer.beam_count for layer in self.layers)
