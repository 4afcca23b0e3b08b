from decimal import Decimal

import pytest

from conjuss_payroll.exceptions import InvalidAdjustment, InvalidAmount
from conjuss_payroll.models.payroll import (
    AdditionalPayments,
    AllowanceOverrides,
    DeductionOverrides,
    PayrollInput,
    whole_amount,
)
from conjuss_payroll.models.staff import Staff


def test_allowance_overrides_keep_absent_and_zero_apart():
    overrides = AllowanceOverrides(housing=0)

    assert overrides.housing == 0
    assert overrides.transport is None


def test_integral_amounts_are_normalised():
    overrides = AllowanceOverrides(housing=5000.0, medical=Decimal("1200"))

    assert overrides.housing == 5000
    assert isinstance(overrides.housing, int)
    assert overrides.medical == 1200


@pytest.mark.parametrize("value", [-1, -0.5, 12.5, Decimal("10.01"), "5000", True, float("nan"), float("inf")])
def test_invalid_amounts_are_rejected(value):
    with pytest.raises(InvalidAmount) as exc_info:
        AdditionalPayments(bonus=value)
    assert exc_info.value.field == "bonus"


def test_whole_amount():
    assert whole_amount("overtime", 0) == 0
    assert whole_amount("overtime", Decimal("750.00")) == 750
    with pytest.raises(InvalidAmount):
        whole_amount("overtime", Decimal("NaN"))


def test_negative_deduction_is_rejected():
    with pytest.raises(InvalidAmount):
        DeductionOverrides(loan_deduction=-5000)


def test_payroll_input_from_dict():
    payroll_input = PayrollInput.from_dict({
        "gradeLevel": "GL05",
        "step": 3,
        "allowances": {"housing": 10000, "hazard": 0},
        "additionalPayments": {"overtime": 4500},
        "deductions": {"unionDues": 800, "cooperativeDeduction": 2000},
    })

    assert payroll_input.grade_level == "GL05"
    assert payroll_input.step == 3
    assert payroll_input.allowances.housing == 10000
    assert payroll_input.allowances.hazard == 0
    assert payroll_input.allowances.leave is None
    assert payroll_input.additional_payments.overtime == 4500
    assert payroll_input.additional_payments.total == 4500
    assert payroll_input.deductions.union_dues == 800
    assert payroll_input.deductions.cooperative_deduction == 2000
    assert payroll_input.deductions.insurance == 0


def test_payroll_input_from_dict_accepts_snake_case():
    payroll_input = PayrollInput.from_dict({
        "grade_level": "GL02",
        "step": 1,
        "additional_payments": {"arrears": 100},
        "deductions": {"other_deductions": 50},
    })

    assert payroll_input.additional_payments.arrears == 100
    assert payroll_input.deductions.other_deductions == 50


def test_payroll_input_from_dict_rejects_unknown_fields():
    with pytest.raises(InvalidAdjustment):
        PayrollInput.from_dict({"gradeLevel": "GL01", "step": 1, "allowances": {"uniform": 100}})


def test_payroll_input_from_dict_rejects_unknown_top_level_fields():
    with pytest.raises(InvalidAdjustment, match="additionalPayment"):
        PayrollInput.from_dict({"gradeLevel": "GL01", "step": 1, "additionalPayment": {"bonus": 5000}})


def test_payroll_input_treats_none_groups_as_omitted():
    payroll_input = PayrollInput("GL01", 1, allowances=None, additional_payments=None, deductions=None)

    assert payroll_input.allowances == AllowanceOverrides()
    assert payroll_input.additional_payments == AdditionalPayments()
    assert payroll_input.deductions == DeductionOverrides()


def test_staff_full_name_and_eligibility():
    staff = Staff(
        staff_id="JSC/2025/00009",
        first_name="Ngozi",
        middle_name="Ada",
        last_name="Obi",
        department="ADM",
        grade_level="GL03",
        step=2,
        job_title="Typist",
    )

    assert staff.full_name == "Ngozi Ada Obi"
    assert staff.is_eligible_for_payroll

    staff.status = "retired"
    assert not staff.is_eligible_for_payroll


def test_staff_rejects_unknown_status():
    with pytest.raises(ValueError):
        Staff("JSC/2025/00009", "A", "B", "ADM", "GL01", 1, "Clerk", status="suspended")
