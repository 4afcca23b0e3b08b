import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from ..models.payroll import (
    AllowanceOverrides,
    AllowanceSet,
    DeductionOverrides,
    DeductionSet,
    PayrollCalculationResult,
    PayrollInput,
)
from .salary_scale import DEFAULT_SCALE, CompensationScale

logger = logging.getLogger(__name__)

# Allowance percentages of basic salary
ALLOWANCE_RATES = {
    'housing': Decimal('0.20'),
    'transport': Decimal('0.15'),
    'medical': Decimal('0.10'),
    'leave': Decimal('0.08'),
    'responsibility': Decimal('0.05'),
    'hazard': Decimal('0.03'),
}

# Statutory deductions as a share of gross pay
PENSION_RATE = Decimal('0.08')
NHF_RATE = Decimal('0.025')

# PAYE: annual tax-free allowance, then (band width, marginal rate); None is the open top band
TAX_FREE_ALLOWANCE = Decimal('200000')
TAX_BANDS = (
    (Decimal('300000'), Decimal('0.07')),
    (Decimal('300000'), Decimal('0.11')),
    (Decimal('500000'), Decimal('0.15')),
    (Decimal('500000'), Decimal('0.19')),
    (Decimal('1600000'), Decimal('0.21')),
    (None, Decimal('0.24')),
)

MONTHS_PER_YEAR = 12


def round_amount(value) -> int:
    """Round to whole Naira, halves away from zero"""
    return int(Decimal(value).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def calculate_allowances(basic_salary: int, overrides: Optional[AllowanceOverrides] = None) -> AllowanceSet:
    """Use explicit allowances where given, otherwise the standard percentage of basic salary"""
    overrides = overrides or AllowanceOverrides()
    amounts = {}
    for name, rate in ALLOWANCE_RATES.items():
        explicit = getattr(overrides, name)
        amounts[name] = explicit if explicit is not None else round_amount(basic_salary * rate)
    return AllowanceSet(**amounts)


def calculate_annual_tax(taxable_income) -> Decimal:
    """Apply the progressive bands to annual taxable income"""
    remaining = Decimal(taxable_income)
    tax = Decimal('0')
    for width, rate in TAX_BANDS:
        if remaining <= 0:
            break
        portion = remaining if width is None else min(remaining, width)
        tax += portion * rate
        remaining -= portion
    return tax


def calculate_paye(gross_pay) -> int:
    """Monthly PAYE withholding for a monthly gross pay"""
    annual_income = Decimal(gross_pay) * MONTHS_PER_YEAR
    taxable_income = annual_income - TAX_FREE_ALLOWANCE

    if taxable_income <= 0:
        return 0

    return round_amount(calculate_annual_tax(taxable_income) / MONTHS_PER_YEAR)


def calculate_deductions(gross_pay: int, overrides: Optional[DeductionOverrides] = None) -> DeductionSet:
    overrides = overrides or DeductionOverrides()
    return DeductionSet(
        paye=calculate_paye(gross_pay),
        pension=round_amount(gross_pay * PENSION_RATE),
        nhf=round_amount(gross_pay * NHF_RATE),
        insurance=overrides.insurance,
        union_dues=overrides.union_dues,
        loan_deduction=overrides.loan_deduction,
        cooperative_deduction=overrides.cooperative_deduction,
        other_deductions=overrides.other_deductions,
    )


class PayrollCalculator:
    """Compute gross and net pay from the salary scale"""

    def __init__(self, scale: Optional[CompensationScale] = None):
        self.scale = scale or DEFAULT_SCALE

    def is_valid_grade_step(self, grade_level: str, step: int) -> bool:
        return self.scale.is_valid(grade_level, step)

    def calculate(self, payroll_input: PayrollInput) -> PayrollCalculationResult:
        """Full payroll breakdown for one grade/step and its adjustments"""

        # Basic salary from the grade/step scale
        basic_salary = self.scale.base_salary(payroll_input.grade_level, payroll_input.step)

        allowances = calculate_allowances(basic_salary, payroll_input.allowances)
        additional = payroll_input.additional_payments

        gross_pay = basic_salary + allowances.total + additional.total

        deductions = calculate_deductions(gross_pay, payroll_input.deductions)
        total_deductions = deductions.total

        logger.debug(
            f"{payroll_input.grade_level} step {payroll_input.step}: "
            f"gross {gross_pay}, deductions {total_deductions}"
        )

        return PayrollCalculationResult(
            basic_salary=basic_salary,
            housing_allowance=allowances.housing,
            transport_allowance=allowances.transport,
            medical_allowance=allowances.medical,
            leave_allowance=allowances.leave,
            responsibility_allowance=allowances.responsibility,
            hazard_allowance=allowances.hazard,
            overtime=additional.overtime,
            bonus=additional.bonus,
            arrears=additional.arrears,
            gross_pay=gross_pay,
            paye=deductions.paye,
            pension=deductions.pension,
            nhf=deductions.nhf,
            insurance=deductions.insurance,
            union_dues=deductions.union_dues,
            loan_deduction=deductions.loan_deduction,
            cooperative_deduction=deductions.cooperative_deduction,
            other_deductions=deductions.other_deductions,
            total_deductions=total_deductions,
            net_pay=gross_pay - total_deductions,
        )


def compute_payroll(payroll_input: PayrollInput, scale: Optional[CompensationScale] = None) -> PayrollCalculationResult:
    return PayrollCalculator(scale).calculate(payroll_input)
