from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from . import settings


# ----Catalog-----
class BeamBase(BaseModel):
    id: str = Field(validation_alias=AliasChoices("id", "beam_id", "beamId"))
    gauge: str = Field(validation_alias=AliasChoices("gauge", "bitola"))
    width: float
    height: float
    weight_12m: float = Field(validation_alias=AliasChoices("weight_12m", "weight12m"))

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class CatalogResponse(BaseModel):
    items: list[BeamBase]
    total_count: int


# ----Calculation request-----
class LoadItemRequest(BaseModel):
    beam_id: str = Field(validation_alias=AliasChoices("beam_id", "beamId"))
    length: Literal[12, 6]
    quantity: int = Field(gt=0)
    priority: int = 1
    from_order_list: bool = Field(
        default=True, validation_alias=AliasChoices("from_order_list", "fromOrderList")
    )

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class LoadConfigRequest(BaseModel):
    max_width: float = Field(
        default_factory=lambda: settings.DEFAULT_MAX_WIDTH,
        gt=0,
        validation_alias=AliasChoices("max_width", "maxWidth"),
    )
    fixed_gap: float = Field(
        default_factory=lambda: settings.DEFAULT_FIXED_GAP,
        ge=0,
        validation_alias=AliasChoices("fixed_gap", "fixedGap"),
    )
    wood_height: float = Field(
        default_factory=lambda: settings.DEFAULT_WOOD_HEIGHT,
        ge=0,
        validation_alias=AliasChoices("wood_height", "woodHeight"),
    )

    model_config = ConfigDict(populate_by_name=True)


class CalculationRequest(BaseModel):
    items: list[LoadItemRequest] = []
    config: LoadConfigRequest = Field(default_factory=LoadConfigRequest)


# ----Calculation response-----
class BeamSegmentResponse(BaseModel):
    gauge: str
    length: int
    weight: float

    model_config = ConfigDict(from_attributes=True)


class SlotResponse(BaseModel):
    beam_id: str
    gauge: str
    width: float
    height: float
    weight: float
    priority: int
    is_paired: bool
    beams: list[BeamSegmentResponse]

    model_config = ConfigDict(from_attributes=True)


class LayerResponse(BaseModel):
    index: int
    slots: list[SlotResponse]
    total_width: float
    slots_width: float
    clearance: float
    max_height: float
    min_height: float
    height_diff: float
    priority: int
    weight: float
    beam_count: int

    model_config = ConfigDict(from_attributes=True)


class CalculationResponse(BaseModel):
    layers: list[LayerResponse]
    total_weight: float
    total_height: float
    max_width_used: float
    layer_count: int
    beam_count: int
    strategy: Optional[Literal["priority", "width"]] = None
    errors: list[str]
    warnings: list[str]
    engineering_notes: list[str]

    model_config = ConfigDict(from_attributes=True)
