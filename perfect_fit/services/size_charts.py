from types import MappingProxyType
from typing import Dict, Mapping

from ..errors import SizeLookupError


GENDERS = ("male", "female")
GARMENT_TYPES = ("shirt", "pant")


def _freeze(table: Dict) -> Mapping:
    return MappingProxyType({k: _freeze(v) if isinstance(v, dict) else v for k, v in table.items()})


# Garment size standards in inches
SIZE_CHARTS: Mapping[str, Mapping[str, Mapping[str, Mapping[str, float]]]] = _freeze({
    "male": {
        "shirt": {
            "S": {"chest": 36.0, "shoulder": 17.0, "length": 28.0},
            "M": {"chest": 40.0, "shoulder": 18.0, "length": 29.0},
            "L": {"chest": 44.0, "shoulder": 19.0, "length": 30.0},
            "XL": {"chest": 48.0, "shoulder": 20.0, "length": 31.0},
        },
        "pant": {
            "30": {"waist": 30.0, "hip": 38.0, "inseam": 30.0},
            "32": {"waist": 32.0, "hip": 40.0, "inseam": 32.0},
            "34": {"waist": 34.0, "hip": 42.0, "inseam": 34.0},
            "36": {"waist": 36.0, "hip": 44.0, "inseam": 36.0},
        },
    },
    "female": {
        "shirt": {
            "S": {"chest": 34.0, "shoulder": 15.0, "length": 26.0},
            "M": {"chest": 36.0, "shoulder": 16.0, "length": 27.0},
            "L": {"chest": 38.0, "shoulder": 17.0, "length": 28.0},
            "XL": {"chest": 40.0, "shoulder": 18.0, "length": 29.0},
        },
        "pant": {
            "28": {"waist": 28.0, "hip": 36.0, "inseam": 28.0},
            "30": {"waist": 30.0, "hip": 38.0, "inseam": 30.0},
            "32": {"waist": 32.0, "hip": 40.0, "inseam": 32.0},
            "34": {"waist": 34.0, "hip": 42.0, "inseam": 34.0},
        },
    },
})

# Medium row used in place of product-specific measurements.
# Pant charts are keyed by waist size, so the middle waist stands in for "M".
REFERENCE_SIZES: Mapping[str, Mapping[str, str]] = _freeze({
    "male": {"shirt": "M", "pant": "32"},
    "female": {"shirt": "M", "pant": "30"},
})


def size_chart(gender: str, garment_type: str) -> Mapping[str, Mapping[str, float]]:
    try:
        return SIZE_CHARTS[gender][garment_type]
    except (KeyError, TypeError):
        raise SizeLookupError(gender, garment_type)


def lookup(gender: str, garment_type: str, size: str) -> Dict[str, float]:
    """Return a copy of the measurements for one size label."""
    chart = size_chart(gender, garment_type)
    row = chart.get(str(size))
    if row is None:
        raise SizeLookupError(gender, garment_type, str(size))
    return dict(row)


def reference_measurements(gender: str, garment_type: str) -> Dict[str, float]:
    size_chart(gender, garment_type)
    return lookup(gender, garment_type, REFERENCE_SIZES[gender][garment_type])
