from .exceptions import InvalidAdjustment, InvalidAmount, InvalidGradeOrStep, PayrollError
from .models.payroll import (
    AdditionalPayments,
    AllowanceOverrides,
    DeductionOverrides,
    PayrollCalculationResult,
    PayrollInput,
)
from .processors.salary_calculator import PayrollCalculator, compute_payroll
from .processors.salary_scale import CompensationScale, is_valid_grade_step

__version__ = "0.1.0"

__all__ = [
    'AdditionalPayments',
    'AllowanceOverrides',
    'CompensationScale',
    'DeductionOverrides',
    'InvalidAdjustment',
    'InvalidAmount',
    'InvalidGradeOrStep',
    'PayrollCalculationResult',
    'PayrollCalculator',
    'PayrollError',
    'PayrollInput',
    'compute_payroll',
    'is_valid_grade_step',
]
