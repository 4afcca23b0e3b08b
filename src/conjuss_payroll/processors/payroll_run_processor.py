import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional

from ..exceptions import InvalidAdjustment, InvalidAmount, InvalidGradeOrStep, InvalidStatusTransition
from ..models.payroll import PayrollInput
from ..models.payroll_run import PayrollItem, PayrollRun, PayrollRunStatus, StaffError
from ..models.staff import Staff
from .salary_calculator import PayrollCalculator

logger = logging.getLogger(__name__)


class PayrollRunProcessor:
    """Calculate a payroll batch and move it through review and approval"""

    def __init__(self, calculator: Optional[PayrollCalculator] = None):
        self.calculator = calculator or PayrollCalculator()

    def create_run(self, title: str, pay_period: str, created_by: str) -> PayrollRun:
        run = PayrollRun(title=title, pay_period=pay_period, created_by=created_by)
        logger.info(f"Created payroll run {run.id} for {pay_period} by {created_by}")
        return run

    def calculate(
        self,
        run: PayrollRun,
        staff_members: Iterable[Staff],
        adjustments: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> PayrollRun:
        """Compute pay for every eligible staff member, replacing earlier results.

        ``adjustments`` maps a staff ID to the optional parts of a payroll input
        (``allowances``, ``additionalPayments``, ``deductions``). Staff whose grade
        or adjustments are invalid are recorded in ``run.errors`` and skipped.
        """
        if run.status != PayrollRunStatus.DRAFT:
            raise InvalidStatusTransition(
                f"Payroll run {run.id} is {run.status.value}; only draft runs can be recalculated"
            )

        adjustments = adjustments or {}
        items = []
        errors = []

        for staff in staff_members:
            if not staff.is_eligible_for_payroll:
                logger.debug(f"Skipping {staff.staff_id} ({staff.status})")
                continue

            try:
                payroll_input = self._build_input(staff, adjustments.get(staff.staff_id))
                calculation = self.calculator.calculate(payroll_input)
            except (InvalidGradeOrStep, InvalidAmount, InvalidAdjustment) as e:
                logger.warning(f"Cannot calculate pay for {staff.staff_id}: {e}")
                errors.append(StaffError(staff.staff_id, staff.full_name, str(e)))
                continue

            items.append(PayrollItem(staff=staff, calculation=calculation))

        run.items = items
        run.errors = errors

        logger.info(
            f"Calculated payroll run {run.id}: {run.staff_count} staff, "
            f"net total {run.total_amount}, {len(errors)} errors"
        )
        return run

    def _build_input(self, staff: Staff, adjustment: Optional[Mapping[str, Any]]) -> PayrollInput:
        data: Dict[str, Any] = dict(adjustment or {})
        data['gradeLevel'] = staff.grade_level
        data['step'] = staff.step
        return PayrollInput.from_dict(data)

    def submit_for_review(self, run: PayrollRun, submitted_by: str) -> PayrollRun:
        if not run.items:
            raise InvalidStatusTransition(f"Payroll run {run.id} has no calculated items")
        return self._transition(run, PayrollRunStatus.PENDING_REVIEW, submitted_by)

    def return_to_draft(self, run: PayrollRun, reviewed_by: str) -> PayrollRun:
        """Send a run back for correction"""
        self._transition(run, PayrollRunStatus.DRAFT, reviewed_by)
        run.reviewed_by = reviewed_by
        run.reviewed_at = datetime.now()
        return run

    def approve(self, run: PayrollRun, approved_by: str) -> PayrollRun:
        self._transition(run, PayrollRunStatus.APPROVED, approved_by)
        now = datetime.now()
        run.reviewed_by = run.approved_by = approved_by
        run.reviewed_at = run.approved_at = now
        return run

    def finalize(self, run: PayrollRun, finalized_by: str) -> PayrollRun:
        self._transition(run, PayrollRunStatus.FINALIZED, finalized_by)
        run.finalized_by = finalized_by
        run.finalized_at = datetime.now()
        return run

    def cancel(self, run: PayrollRun, cancelled_by: str) -> PayrollRun:
        self._transition(run, PayrollRunStatus.CANCELLED, cancelled_by)
        run.cancelled_by = cancelled_by
        run.cancelled_at = datetime.now()
        return run

    def _transition(self, run: PayrollRun, status: PayrollRunStatus, actor: str) -> PayrollRun:
        if not run.can_transition_to(status):
            raise InvalidStatusTransition(
                f"Cannot move payroll run {run.id} from {run.status.value} to {status.value}"
            )
        previous = run.status
        run.status = status
        logger.info(f"Payroll run {run.id}: {previous.value} -> {status.value} by {actor}")
        return run

    @staticmethod
    def summarize(run: PayrollRun) -> Dict[str, Any]:
        """Totals shown on the run review screen"""
        return {
            'id': run.id,
            'title': run.title,
            'pay_period': run.pay_period,
            'status': run.status.value,
            'staff_count': run.staff_count,
            'total_gross': run.total_gross,
            'total_deductions': run.total_deductions,
            'total_amount': run.total_amount,
            'errors': len(run.errors),
        }
