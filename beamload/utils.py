from functools import lru_cache

from fastapi import HTTPException

from . import schemas, settings
from .errors import BeamNotFoundError, InvalidConfiguration, InvalidOrderLine
from .logger import logger
from .model import (
    BeamCatalog,
    CalculationResult,
    LoadConfig,
    LoadingEngine,
    OrderLine,
    load_catalog,
)


@lru_cache(maxsize=1)
def get_catalog() -> BeamCatalog:
    return load_catalog(settings.BEAM_CATALOG_PATH)


def prepare_items(items: list[schemas.LoadItemRequest]) -> list[OrderLine]:
    return [
        OrderLine(
            beam_id=item.beam_id,
            length=item.length,
            quantity=item.quantity,
            priority=item.priority,
            from_order_list=item.from_order_list,
        )
        for item in items
    ]


def prepare_config(config: schemas.LoadConfigRequest) -> LoadConfig:
    return LoadConfig(
        max_width=config.max_width,
        fixed_gap=config.fixed_gap,
        wood_height=config.wood_height,
    )


def result_to_response(result: CalculationResult) -> schemas.CalculationResponse:
    return schemas.CalculationResponse(
        layers=[schemas.LayerResponse.model_validate(layer) for layer in result.layers],
        total_weight=result.total_weight,
        total_height=result.total_height,
        max_width_used=result.max_width_used,
        layer_count=result.layer_count,
        beam_count=result.beam_count,
        strategy=result.strategy,
        errors=result.errors,
        warnings=result.warnings,
        engineering_notes=result.engineering_notes,
    )


def calculate_loading(
    payload: schemas.CalculationRequest, catalog: BeamCatalog
) -> schemas.CalculationResponse:
    try:
        result = LoadingEngine(catalog).calculate(
            prepare_items(payload.items), prepare_config(payload.config)
        )
        return result_to_response(result)

    except BeamNotFoundError as e:
        logger.info(f"Calculation rejected: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except (InvalidConfiguration, InvalidOrderLine) as e:
        logger.info(f"Calculation rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Calculation failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
