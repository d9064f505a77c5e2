from fastapi import APIRouter, Depends, HTTPException

from .. import schemas, utils
from ..errors import BeamNotFoundError
from ..model import BeamCatalog

router = APIRouter(tags=["Catalog"])


@router.get("/", response_model=schemas.CatalogResponse)
def read_catalog(catalog: BeamCatalog = Depends(utils.get_catalog)):
    items = [schemas.BeamBase.model_validate(beam) for beam in catalog]
    return {"items": items, "total_count": len(items)}


@router.get("/{beam_id}", response_model=schemas.BeamBase)
def read_beam(beam_id: str, catalog: BeamCatalog = Depends(utils.get_catalog)):
    try:
        return schemas.BeamBase.model_validate(catalog.get(beam_id))
    except BeamNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
