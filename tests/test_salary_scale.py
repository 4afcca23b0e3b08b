import json

import pytest

from conjuss_payroll.config import settings
from conjuss_payroll.exceptions import InvalidGradeOrStep, ScaleConfigurationError
from conjuss_payroll.processors.salary_scale import (
    CONJUSS_BASE_SALARIES,
    DEFAULT_SCALE,
    GRADE_LEVELS,
    CompensationScale,
    get_basic_salary,
    is_valid_grade_step,
    load_scale,
)


def test_reference_salaries():
    assert get_basic_salary("GL01", 1) == 42000
    assert get_basic_salary("GL08", 5) == 131100
    assert get_basic_salary("GL17", 15) == 837200


def test_every_coordinate_matches_table():
    for grade in GRADE_LEVELS:
        for step in range(1, 16):
            expected = CONJUSS_BASE_SALARIES[grade][step - 1]
            assert DEFAULT_SCALE.base_salary(grade, step) == expected
            assert DEFAULT_SCALE.base_salary(grade, step) == expected


def test_scale_has_17_grades_of_15_steps():
    assert DEFAULT_SCALE.grades == GRADE_LEVELS
    assert all(len(DEFAULT_SCALE.steps(grade)) == 15 for grade in GRADE_LEVELS)


def test_steps_never_decrease_within_a_grade():
    for grade in GRADE_LEVELS:
        steps = DEFAULT_SCALE.steps(grade)
        assert list(steps) == sorted(steps)


def test_grade_lookup_is_case_insensitive():
    assert get_basic_salary("gl08", 5) == 131100
    assert "gl17" in DEFAULT_SCALE


@pytest.mark.parametrize("grade, step", [
    ("GL99", 1),
    ("GL01", 16),
    ("GL01", 0),
    ("GL01", -1),
    ("GL01", "1"),
    ("GL01", 1.0),
    ("GL01", True),
    ("", 1),
    (None, 1),
])
def test_invalid_coordinates_are_rejected(grade, step):
    assert not is_valid_grade_step(grade, step)
    with pytest.raises(InvalidGradeOrStep) as exc_info:
        get_basic_salary(grade, step)
    assert exc_info.value.grade_level == grade
    assert exc_info.value.step == step


def test_invalid_grade_or_step_is_a_value_error():
    with pytest.raises(ValueError):
        get_basic_salary("GL18", 1)


def test_custom_scale():
    scale = CompensationScale.from_mapping({"gl01": list(range(1000, 16000, 1000))})
    assert scale.grades == ("GL01",)
    assert scale.base_salary("GL01", 15) == 15000
    assert not scale.is_valid("GL02", 1)


def test_scale_cannot_be_modified():
    with pytest.raises(TypeError):
        DEFAULT_SCALE._table["GL01"] = (0,) * 15


@pytest.mark.parametrize("rates", [
    {},
    {"GL01": [1000] * 14},
    {"GL01": [1000] * 14 + [-1]},
    {"GL01": [1000] * 14 + [10.5]},
    {"": [1000] * 15},
])
def test_malformed_scale_is_rejected(rates):
    with pytest.raises(ScaleConfigurationError):
        CompensationScale(rates)


def test_scale_from_json_file(tmp_path):
    path = tmp_path / "scale.json"
    path.write_text(json.dumps({"GL01": [20000] * 15, "GL02": [30000] * 15}), encoding="utf-8")

    scale = CompensationScale.from_json_file(path)

    assert scale.base_salary("GL02", 3) == 30000


def test_scale_from_broken_json_file(tmp_path):
    path = tmp_path / "scale.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ScaleConfigurationError):
        CompensationScale.from_json_file(path)

    with pytest.raises(ScaleConfigurationError):
        CompensationScale.from_json_file(tmp_path / "missing.json")


def test_load_scale_defaults_to_conjuss(monkeypatch):
    monkeypatch.setattr(settings, "SALARY_SCALE_FILE", None)
    assert load_scale() is DEFAULT_SCALE


def test_load_scale_from_settings(monkeypatch, tmp_path):
    path = tmp_path / "scale.json"
    path.write_text(json.dumps({"GL01": [10000] * 15}), encoding="utf-8")
    monkeypatch.setattr(settings, "SALARY_SCALE_FILE", str(path))

    scale = load_scale()

    assert scale is not DEFAULT_SCALE
    assert scale.base_salary("GL01", 1) == 10000
