from typing import Optional
from fastapi import APIRouter, HTTPException
import structlog

from ..config import settings
from ..errors import SizeLookupError, ValidationError
from ..schemas.fit import AnalyzeFitRequest, AnalyzeFitResponse
from ..services.fit_evaluator import evaluate
from ..services.size_charts import reference_measurements
from ..services.style_recommender import recommend


logger = structlog.get_logger("perfect_fit")

router = APIRouter(prefix="/api", tags=["fit"])


@router.post("/analyze-fit", response_model=AnalyzeFitResponse, response_model_by_alias=True)
async def analyze_fit(payload: Optional[AnalyzeFitRequest] = None) -> AnalyzeFitResponse:
    if payload is None or payload.user_measurements is None or not payload.gender or not payload.garment_type:
        raise HTTPException(status_code=400, detail="Missing required fields")

    gender = payload.gender
    garment_type = payload.garment_type

    try:
        # Product links are not scraped; the medium row stands in for the product
        product_measurements = reference_measurements(gender, garment_type)
        fit = evaluate(payload.user_measurements, product_measurements)
        recommendations = recommend(gender, garment_type, fit)
    except SizeLookupError as e:
        if settings.strict_categories:
            logger.warning("fit_analysis_rejected", gender=gender, type=garment_type, error=str(e))
            raise HTTPException(status_code=400, detail="Unsupported gender or garment type")
        logger.error("fit_analysis_failed", gender=gender, type=garment_type, error=str(e))
        raise HTTPException(status_code=500, detail="Analysis failed")
    except ValidationError as e:
        dimension = getattr(e, "dimension", None)
        logger.warning("fit_analysis_rejected", gender=gender, type=garment_type, error=str(e))
        if dimension is None:
            raise HTTPException(status_code=400, detail=str(e))
        raise HTTPException(
            status_code=400,
            detail=f"Measurement '{dimension}' is not available for {gender} {garment_type}",
        )
    except Exception as e:
        logger.error("fit_analysis_failed", gender=gender, type=garment_type, error=str(e), exc_info=True)
        raise HTTPException(status_code=500, detail="Analysis failed")

    logger.info(
        "fit_analyzed",
        gender=gender,
        type=garment_type,
        overall=fit["overall"],
        dimensions=len(fit["measurements"]),
    )

    return AnalyzeFitResponse(
        fit=fit,
        product_measurements=product_measurements,
        recommendations=recommendations,
    )
