from typing import Any, Dict, Mapping

from ..errors import MeasurementMismatchError


# Allowed deviation in inches before a dimension stops fitting
TOLERANCE = 2.0

TIGHT = "tight"
PERFECT = "perfect"
LOOSE = "loose"

GOOD = "good"
POOR = "poor"


def classify(user: float, reference: float, tolerance: float = TOLERANCE) -> str:
    if abs(user - reference) <= tolerance:
        return PERFECT
    if reference > user + tolerance:
        return LOOSE
    return TIGHT


def overall_fit(classifications: Mapping[str, str]) -> str:
    perfect_count = sum(1 for c in classifications.values() if c == PERFECT)
    # Half or more of the dimensions must be perfect; an empty set passes
    return GOOD if perfect_count * 2 >= len(classifications) else POOR


def evaluate(user: Mapping[str, Any], reference: Mapping[str, Any], tolerance: float = TOLERANCE) -> Dict[str, Any]:
    """Compare user measurements against a reference row.

    Only the user's dimensions are classified; reference-only dimensions are
    ignored. A user dimension absent from the reference raises
    MeasurementMismatchError.
    """
    results: Dict[str, str] = {}
    for dimension, value in user.items():
        if dimension not in reference:
            raise MeasurementMismatchError(dimension)
        results[dimension] = classify(float(value), float(reference[dimension]), tolerance)

    return {"measurements": results, "overall": overall_fit(results)}
