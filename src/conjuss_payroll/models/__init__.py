from .payroll import (
    AdditionalPayments,
    AllowanceOverrides,
    AllowanceSet,
    DeductionOverrides,
    DeductionSet,
    PayrollCalculationResult,
    PayrollInput,
)
from .payroll_run import PayrollItem, PayrollRun, PayrollRunStatus, StaffError
from .staff import Department, Staff

__all__ = [
    'AdditionalPayments',
    'AllowanceOverrides',
    'AllowanceSet',
    'DeductionOverrides',
    'DeductionSet',
    'PayrollCalculationResult',
    'PayrollInput',
    'PayrollItem',
    'PayrollRun',
    'PayrollRunStatus',
    'StaffError',
    'Department',
    'Staff',
]
