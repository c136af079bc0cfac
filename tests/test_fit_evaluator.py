import pytest
from perfect_fit.errors import MeasurementMismatchError, ValidationError
from perfect_fit.services.fit_evaluator import (
    GOOD,
    LOOSE,
    PERFECT,
    POOR,
    TIGHT,
    classify,
    evaluate,
    overall_fit,
)


@pytest.mark.parametrize("user,reference", [(40, 40), (42, 40), (38, 40), (41.5, 40), (38.01, 40)])
def test_within_tolerance_is_perfect(user, reference):
    assert classify(user, reference) == PERFECT


@pytest.mark.parametrize("user,reference", [(30, 40), (37.9, 40), (20, 48)])
def test_reference_larger_beyond_tolerance_is_loose(user, reference):
    assert classify(user, reference) == LOOSE


@pytest.mark.parametrize("user,reference", [(42, 36), (42.1, 40), (60, 29)])
def test_user_larger_beyond_tolerance_is_tight(user, reference):
    assert classify(user, reference) == TIGHT


def test_examples_from_chest_measurements():
    # diff = 2, still within tolerance
    assert evaluate({"chest": 42}, {"chest": 40})["measurements"]["chest"] == PERFECT
    # reference 36 < user 42: neither perfect nor loose
    assert evaluate({"chest": 42}, {"chest": 36})["measurements"]["chest"] == TIGHT
    # 40 > 30 + 2
    assert evaluate({"chest": 30}, {"chest": 40})["measurements"]["chest"] == LOOSE


def test_custom_tolerance():
    assert classify(45, 40, tolerance=5.0) == PERFECT
    assert classify(45, 40, tolerance=1.0) == TIGHT


@pytest.mark.parametrize(
    "classifications,expected",
    [
        ({}, GOOD),
        ({"chest": PERFECT}, GOOD),
        ({"chest": TIGHT}, POOR),
        ({"chest": PERFECT, "waist": LOOSE}, GOOD),
        ({"chest": PERFECT, "shoulder": TIGHT, "length": LOOSE}, POOR),
        ({"chest": PERFECT, "shoulder": PERFECT, "length": LOOSE}, GOOD),
        ({"a": PERFECT, "b": PERFECT, "c": TIGHT, "d": LOOSE}, GOOD),
        ({"a": PERFECT, "b": TIGHT, "c": TIGHT, "d": LOOSE}, POOR),
    ],
)
def test_overall_requires_half_perfect(classifications, expected):
    assert overall_fit(classifications) == expected


def test_evaluate_only_classifies_user_dimensions():
    reference = {"chest": 40.0, "shoulder": 18.0, "length": 29.0}
    result = evaluate({"chest": 41, "length": 35}, reference)
    assert result["measurements"] == {"chest": PERFECT, "length": TIGHT}
    assert result["overall"] == GOOD


def test_evaluate_keeps_user_key_order():
    reference = {"waist": 32.0, "hip": 40.0, "inseam": 32.0}
    result = evaluate({"inseam": 32, "waist": 20, "hip": 40}, reference)
    assert list(result["measurements"]) == ["inseam", "waist", "hip"]


def test_evaluate_accepts_numeric_strings():
    result = evaluate({"chest": "42"}, {"chest": "40"})
    assert result["measurements"]["chest"] == PERFECT


def test_evaluate_rejects_dimension_missing_from_reference():
    with pytest.raises(MeasurementMismatchError) as info:
        evaluate({"chest": 40, "neck": 15}, {"chest": 40.0})
    assert info.value.dimension == "neck"
    assert isinstance(info.value, ValidationError)


def test_evaluate_is_deterministic():
    user = {"chest": 44, "shoulder": 18, "length": 25}
    reference = {"chest": 40.0, "shoulder": 18.0, "length": 29.0}
    assert evaluate(user, reference) == evaluate(user, reference)
