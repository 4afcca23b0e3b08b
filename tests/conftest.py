import pytest

from conjuss_payroll.api.mock_directory import MockStaffDirectory
from conjuss_payroll.models.staff import Staff
from conjuss_payroll.processors.payroll_run_processor import PayrollRunProcessor


def make_staff(staff_id="JSC/2025/00100", grade_level="GL01", step=1, **overrides):
    data = {
        "staff_id": staff_id,
        "first_name": "Test",
        "last_name": "Officer",
        "department": "ADM",
        "grade_level": grade_level,
        "step": step,
        "job_title": "Clerk",
        "bank_name": "First Bank",
        "account_number": "3000000001",
        "account_name": "Test Officer",
    }
    data.update(overrides)
    return Staff(**data)


@pytest.fixture
def directory():
    return MockStaffDirectory()


@pytest.fixture
def processor():
    return PayrollRunProcessor()


@pytest.fixture
def calculated_run(directory, processor):
    run = processor.create_run("January 2025 Payroll", "January 2025", created_by="payroll.admin")
    return processor.calculate(run, directory.get_all_staff())
