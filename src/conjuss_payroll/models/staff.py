from dataclasses import dataclass
from typing import Optional

STAFF_STATUSES = ('active', 'on-leave', 'retired', 'terminated')


@dataclass
class Department:
    """Department data model"""
    id: str
    name: str
    code: str
    description: Optional[str] = None
    is_active: bool = True

    def __str__(self):
        return f"Department({self.code}, {self.name})"


@dataclass
class Staff:
    """Staff data model"""
    staff_id: str
    first_name: str
    last_name: str
    department: str
    grade_level: str
    step: int
    job_title: str
    middle_name: Optional[str] = None
    status: str = 'active'
    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    account_name: Optional[str] = None

    def __post_init__(self):
        if self.status not in STAFF_STATUSES:
            raise ValueError(f"Unknown staff status: {self.status}")

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def is_eligible_for_payroll(self) -> bool:
        return self.status == 'active'

    def __str__(self):
        return f"Staff({self.staff_id}, {self.full_name})"
