from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


Classification = Literal["tight", "perfect", "loose"]


class AnalyzeFitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_measurements: Optional[Dict[str, float]] = Field(None, alias="userMeasurements")
    # Accepted for compatibility with the front end; measurements are not fetched from it
    product_link: Optional[str] = Field(None, alias="productLink")
    gender: Optional[str] = None
    garment_type: Optional[str] = Field(None, alias="type")

    @field_validator("user_measurements", mode="before")
    @classmethod
    def _check_measurements(cls, value):
        # Empty values other than an object count as absent
        if not value and not isinstance(value, dict):
            return None
        if isinstance(value, dict):
            for name, measurement in value.items():
                if isinstance(measurement, bool):
                    raise ValueError(f"measurement '{name}' must be a number")
        return value


class FitVerdict(BaseModel):
    measurements: Dict[str, Classification]
    overall: Literal["good", "poor"]


class Recommendation(BaseModel):
    style: str
    description: str
    image: str


class AnalyzeFitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fit: FitVerdict
    product_measurements: Dict[str, float] = Field(..., alias="productMeasurements")
    recommendations: List[Recommendation]


class HealthResponse(BaseModel):
    status: str
    message: str
