from fastapi import APIRouter, Depends

from .. import schemas, utils
from ..logger import logger
from ..model import BeamCatalog

router = APIRouter(tags=["Loading"])


@router.post("/calculate/", response_model=schemas.CalculationResponse)
def calculate_loading(
    payload: schemas.CalculationRequest,
    catalog: BeamCatalog = Depends(utils.get_catalog),
):
    logger.info(f"loading calculate request: {payload.model_dump_json()}")
    return utils.calculate_loading(payload, catalog)
