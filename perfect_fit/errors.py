class FitAnalysisError(Exception):
    """Base class for failures raised while analysing a fit."""


class ValidationError(FitAnalysisError):
    """The client sent something we cannot analyse."""


class MeasurementMismatchError(ValidationError):
    def __init__(self, dimension: str) -> None:
        super().__init__(f"Reference measurements have no '{dimension}' dimension")
        self.dimension = dimension


class SizeLookupError(FitAnalysisError, LookupError):
    def __init__(self, gender: str, garment_type: str, size: str | None = None) -> None:
        where = f"{gender}/{garment_type}" + (f"/{size}" if size is not None else "")
        super().__init__(f"No size chart entry for {where}")
        self.gender = gender
        self.garment_type = garment_type
        self.size = size
