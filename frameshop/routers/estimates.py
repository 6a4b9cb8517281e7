import logging

from fastapi import APIRouter

from .. import schemas
from ..completion_estimator import calculate_estimated_completion, total_processing_days
from ..config import settings
from ..pricing_engine import calculate_framing_price

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.post("/price", response_model=schemas.PriceEstimate)
def estimate_price(specs: schemas.FramingSpecs):
    """
    Live price for the order-entry form. Dimensions are not sanity-checked:
    a half-filled form still gets a (degenerate) price back.
    """
    result = calculate_framing_price(specs.model_dump(mode="json"), tax_rate=settings.TAX_RATE)
    logger.debug("Price estimate area=%s total=%s",
                 result["finished_size"]["area"], result["breakdown"]["total"])
    return result


@router.post("/completion", response_model=schemas.CompletionEstimate)
def estimate_completion(req: schemas.CompletionRequest):
    complexity = req.complexity.value
    priority = req.priority.value
    return {
        "processing_days": total_processing_days(req.current_workload, complexity, priority),
        "estimated_completion": calculate_estimated_completion(
            req.current_workload, complexity, priority,
        ),
    }
