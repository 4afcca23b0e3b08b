from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InvalidAdjustment, InvalidAmount
from ..utils.validators import validate_amount


def whole_amount(name: str, value: Any) -> int:
    """Normalise a caller supplied amount to whole Naira, rejecting anything else"""
    if not validate_amount(value) or value != int(value):
        raise InvalidAmount(name, value)
    return int(value)


def _normalise_amounts(record) -> None:
    for f in fields(record):
        value = getattr(record, f.name)
        if value is not None:
            object.__setattr__(record, f.name, whole_amount(f.name, value))


def _kwargs_from_mapping(cls, data: Optional[Mapping[str, Any]], aliases: Dict[str, str]) -> Dict[str, Any]:
    if not data:
        return {}
    names = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in data.items():
        name = aliases.get(key, key)
        if name not in names:
            raise InvalidAdjustment(f"Unknown {cls.__name__} field: {key}")
        kwargs[name] = value
    return kwargs


@dataclass(frozen=True)
class AllowanceOverrides:
    """Explicit allowance amounts; None means derive from basic salary"""
    housing: Optional[int] = None
    transport: Optional[int] = None
    medical: Optional[int] = None
    leave: Optional[int] = None
    responsibility: Optional[int] = None
    hazard: Optional[int] = None

    def __post_init__(self):
        _normalise_amounts(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "AllowanceOverrides":
        return cls(**_kwargs_from_mapping(cls, data, {}))


@dataclass(frozen=True)
class AdditionalPayments:
    """One-off payments added to gross pay"""
    overtime: int = 0
    bonus: int = 0
    arrears: int = 0

    def __post_init__(self):
        _normalise_amounts(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "AdditionalPayments":
        return cls(**_kwargs_from_mapping(cls, data, {}))

    @property
    def total(self) -> int:
        return self.overtime + self.bonus + self.arrears


@dataclass(frozen=True)
class DeductionOverrides:
    """Optional deductions supplied by the caller"""
    insurance: int = 0
    union_dues: int = 0
    loan_deduction: int = 0
    cooperative_deduction: int = 0
    other_deductions: int = 0

    ALIASES = {
        'unionDues': 'union_dues',
        'loanDeduction': 'loan_deduction',
        'cooperativeDeduction': 'cooperative_deduction',
        'otherDeductions': 'other_deductions',
    }

    def __post_init__(self):
        _normalise_amounts(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DeductionOverrides":
        return cls(**_kwargs_from_mapping(cls, data, cls.ALIASES))


@dataclass(frozen=True)
class PayrollInput:
    """Everything needed to compute one staff member's pay"""
    grade_level: str
    step: int
    allowances: AllowanceOverrides = field(default_factory=AllowanceOverrides)
    additional_payments: AdditionalPayments = field(default_factory=AdditionalPayments)
    deductions: DeductionOverrides = field(default_factory=DeductionOverrides)

    KEYS = {
        'gradeLevel', 'grade_level', 'step', 'allowances',
        'additionalPayments', 'additional_payments', 'deductions',
    }

    def __post_init__(self):
        # None stands for an omitted group
        if self.allowances is None:
            object.__setattr__(self, 'allowances', AllowanceOverrides())
        if self.additional_payments is None:
            object.__setattr__(self, 'additional_payments', AdditionalPayments())
        if self.deductions is None:
            object.__setattr__(self, 'deductions', DeductionOverrides())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PayrollInput":
        """Build an input from the camelCase shape used by the web client"""
        unknown = sorted(set(data) - cls.KEYS)
        if unknown:
            raise InvalidAdjustment(f"Unknown PayrollInput field: {', '.join(unknown)}")
        grade_level = data.get('gradeLevel', data.get('grade_level'))
        additional = data.get('additionalPayments', data.get('additional_payments'))
        return cls(
            grade_level=grade_level,
            step=data.get('step'),
            allowances=AllowanceOverrides.from_dict(data.get('allowances')),
            additional_payments=AdditionalPayments.from_dict(additional),
            deductions=DeductionOverrides.from_dict(data.get('deductions')),
        )


@dataclass(frozen=True)
class AllowanceSet:
    housing: int
    transport: int
    medical: int
    leave: int
    responsibility: int
    hazard: int

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class DeductionSet:
    paye: int
    pension: int
    nhf: int
    insurance: int = 0
    union_dues: int = 0
    loan_deduction: int = 0
    cooperative_deduction: int = 0
    other_deductions: int = 0

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))


# Attribute name -> key used by payslip/bank exporters and the web client
RESULT_FIELDS = [
    ('basic_salary', 'basicSalary'),
    ('housing_allowance', 'housingAllowance'),
    ('transport_allowance', 'transportAllowance'),
    ('medical_allowance', 'medicalAllowance'),
    ('leave_allowance', 'leaveAllowance'),
    ('responsibility_allowance', 'responsibilityAllowance'),
    ('hazard_allowance', 'hazardAllowance'),
    ('overtime', 'overtime'),
    ('bonus', 'bonus'),
    ('arrears', 'arrears'),
    ('gross_pay', 'grossPay'),
    ('paye', 'paye'),
    ('pension', 'pension'),
    ('nhf', 'nhf'),
    ('insurance', 'insurance'),
    ('union_dues', 'unionDues'),
    ('loan_deduction', 'loanDeduction'),
    ('cooperative_deduction', 'cooperativeDeduction'),
    ('other_deductions', 'otherDeductions'),
    ('total_deductions', 'totalDeductions'),
    ('net_pay', 'netPay'),
]


@dataclass(frozen=True)
class PayrollCalculationResult:
    """Itemised payroll breakdown for one staff member"""
    basic_salary: int
    housing_allowance: int
    transport_allowance: int
    medical_allowance: int
    leave_allowance: int
    responsibility_allowance: int
    hazard_allowance: int
    overtime: int
    bonus: int
    arrears: int
    gross_pay: int
    paye: int
    pension: int
    nhf: int
    insurance: int
    union_dues: int
    loan_deduction: int
    cooperative_deduction: int
    other_deductions: int
    total_deductions: int
    net_pay: int

    @property
    def total_allowances(self) -> int:
        return (self.housing_allowance + self.transport_allowance + self.medical_allowance
                + self.leave_allowance + self.responsibility_allowance + self.hazard_allowance)

    @property
    def total_additional_payments(self) -> int:
        return self.overtime + self.bonus + self.arrears

    def to_dict(self) -> Dict[str, int]:
        return {key: getattr(self, attr) for attr, key in RESULT_FIELDS}
