class PayrollError(Exception):
    """Base exception for payroll rule violations."""


class InvalidGradeOrStep(PayrollError, ValueError):
    """Raised when a grade level or step is not on the compensation scale."""

    def __init__(self, grade_level, step):
        self.grade_level = grade_level
        self.step = step
        super().__init__(f"Invalid grade level or step: {grade_level!r} step {step!r}")


class InvalidAmount(PayrollError, ValueError):
    """Raised when a monetary amount is negative or not a whole number."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid amount for {field}: {value!r}")


class ScaleConfigurationError(PayrollError):
    """Raised when an alternate salary scale cannot be loaded."""


class InvalidStatusTransition(PayrollError):
    """Raised when a payroll run is moved to a status it cannot reach."""


class StaffNotFound(PayrollError, LookupError):
    """Raised when a staff member is not in the directory."""


class InvalidAdjustment(PayrollError, ValueError):
    """Raised when a payroll input names a field that does not exist."""
