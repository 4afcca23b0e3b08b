from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional
import uuid

from .payroll import PayrollCalculationResult
from .staff import Staff


class PayrollRunStatus(str, Enum):
    DRAFT = 'draft'
    PENDING_REVIEW = 'pending_review'
    APPROVED = 'approved'
    FINALIZED = 'finalized'
    CANCELLED = 'cancelled'


ALLOWED_TRANSITIONS = {
    PayrollRunStatus.DRAFT: {PayrollRunStatus.PENDING_REVIEW, PayrollRunStatus.CANCELLED},
    PayrollRunStatus.PENDING_REVIEW: {PayrollRunStatus.APPROVED, PayrollRunStatus.DRAFT, PayrollRunStatus.CANCELLED},
    PayrollRunStatus.APPROVED: {PayrollRunStatus.FINALIZED, PayrollRunStatus.CANCELLED},
    PayrollRunStatus.FINALIZED: set(),
    PayrollRunStatus.CANCELLED: set(),
}


@dataclass
class PayrollItem:
    """Computed pay for one staff member in a run"""
    staff: Staff
    calculation: PayrollCalculationResult

    @property
    def staff_id(self) -> str:
        return self.staff.staff_id


@dataclass
class StaffError:
    """Staff member skipped during calculation"""
    staff_id: str
    staff_name: str
    message: str


@dataclass
class PayrollRun:
    """A monthly payroll batch and its approval trail"""
    title: str
    pay_period: str
    created_by: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: PayrollRunStatus = PayrollRunStatus.DRAFT
    items: List[PayrollItem] = field(default_factory=list)
    errors: List[StaffError] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    finalized_by: Optional[str] = None
    finalized_at: Optional[datetime] = None
    cancelled_by: Optional[str] = None
    cancelled_at: Optional[datetime] = None

    def can_transition_to(self, status: PayrollRunStatus) -> bool:
        return status in ALLOWED_TRANSITIONS[self.status]

    @property
    def staff_count(self) -> int:
        return len(self.items)

    @property
    def total_gross(self) -> int:
        return sum(item.calculation.gross_pay for item in self.items)

    @property
    def total_deductions(self) -> int:
        return sum(item.calculation.total_deductions for item in self.items)

    @property
    def total_amount(self) -> int:
        """Total net pay disbursed by the run"""
        return sum(item.calculation.net_pay for item in self.items)

    def __repr__(self):
        return f"<PayrollRun(id={self.id}, period={self.pay_period}, status={self.status.value})>"
