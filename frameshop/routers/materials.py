from fastapi import APIRouter

from .. import schemas
from ..pricing_engine import build_catalog

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("/", response_model=schemas.MaterialCatalog)
def get_catalog():
    """Frame, mat, glass and backing options with unit prices, plus the tier table."""
    return build_catalog()
