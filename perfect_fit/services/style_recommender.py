from typing import Any, Dict, List, Mapping, Tuple


PLACEHOLDER_BASE = "https://via.placeholder.com/200x250"


def _entry(style: str, description: str, background: str, foreground: str) -> Dict[str, str]:
    label = style.replace(" ", "+")
    return {
        "style": style,
        "description": description,
        "image": f"{PLACEHOLDER_BASE}/{background}/{foreground}?text={label}",
    }


STYLE_CATALOG: Dict[Tuple[str, str], Tuple[Dict[str, str], Dict[str, str]]] = {
    ("male", "shirt"): (
        _entry("Classic Fit", "Comfortable and versatile for everyday wear", "007bff", "ffffff"),
        _entry("Slim Fit", "Modern tailored look for a sleek appearance", "28a745", "ffffff"),
    ),
    ("male", "pant"): (
        _entry("Straight Leg", "Timeless and comfortable cut", "ffc107", "000000"),
        _entry("Tapered Fit", "Contemporary style with narrower ankle", "dc3545", "ffffff"),
    ),
    ("female", "shirt"): (
        _entry("Regular Fit", "Comfortable and flattering for all body types", "e83e8c", "ffffff"),
        _entry("Fitted", "Elegant silhouette that follows your curves", "6f42c1", "ffffff"),
    ),
    ("female", "pant"): (
        _entry("High Waist", "Flattering and on-trend style", "fd7e14", "ffffff"),
        _entry("Bootcut", "Classic and versatile fit", "20c997", "ffffff"),
    ),
}


def recommend(gender: str, garment_type: str, fit: Mapping[str, Any] | None = None) -> List[Dict[str, str]]:
    """Two style suggestions for the category; the fit verdict does not change them."""
    gender_key = "male" if gender == "male" else "female"
    type_key = "shirt" if garment_type == "shirt" else "pant"
    return [dict(entry) for entry in STYLE_CATALOG[(gender_key, type_key)]]
