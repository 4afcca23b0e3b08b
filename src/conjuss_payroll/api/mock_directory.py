import logging
from typing import Dict, List

from ..exceptions import StaffNotFound
from ..models.staff import Department, Staff
from ..utils.validators import validate_account_number, validate_staff_id

logger = logging.getLogger(__name__)


class MockStaffDirectory:
    """In-memory staff and department directory used for demos and tests"""

    # Sample department data
    MOCK_DEPARTMENTS = [
        {"id": "dep-001", "name": "Judicial Officers", "code": "JUD", "description": "Judges and magistrates"},
        {"id": "dep-002", "name": "Administration", "code": "ADM", "description": "Registry and general administration"},
        {"id": "dep-003", "name": "Security", "code": "SEC", "description": "Court security"},
        {"id": "dep-004", "name": "Information Technology", "code": "ICT", "description": "Systems and support"},
    ]

    # Sample staff data
    MOCK_STAFF = [
        {
            "staff_id": "JSC/2025/00001",
            "first_name": "Adaeze",
            "last_name": "Okafor",
            "department": "JUD",
            "grade_level": "GL15",
            "step": 4,
            "job_title": "Chief Registrar",
            "bank_name": "First Bank",
            "account_number": "3012345678",
            "account_name": "Adaeze Okafor",
        },
        {
            "staff_id": "JSC/2025/00002",
            "first_name": "Ibrahim",
            "middle_name": "Musa",
            "last_name": "Bello",
            "department": "ADM",
            "grade_level": "GL08",
            "step": 5,
            "job_title": "Executive Officer",
            "bank_name": "Zenith Bank",
            "account_number": "2087654321",
            "account_name": "Ibrahim Musa Bello",
        },
        {
            "staff_id": "JSC/2025/00003",
            "first_name": "Funke",
            "last_name": "Adeyemi",
            "department": "ICT",
            "grade_level": "GL10",
            "step": 2,
            "job_title": "Systems Analyst",
            "bank_name": "GTBank",
            "account_number": "0123456789",
            "account_name": "Funke Adeyemi",
        },
        {
            "staff_id": "JSC/2025/00004",
            "first_name": "Chinedu",
            "last_name": "Eze",
            "department": "SEC",
            "grade_level": "GL04",
            "step": 7,
            "job_title": "Security Officer",
            "bank_name": "First Bank",
            "account_number": "3023456789",
            "account_name": "Chinedu Eze",
        },
        {
            "staff_id": "JSC/2025/00005",
            "first_name": "Halima",
            "last_name": "Yusuf",
            "department": "ADM",
            "grade_level": "GL06",
            "step": 1,
            "job_title": "Clerical Officer",
            "status": "on-leave",
            "bank_name": "Access Bank",
            "account_number": "0698765432",
            "account_name": "Halima Yusuf",
        },
    ]

    def __init__(self):
        self._departments: Dict[str, Department] = {
            d["code"]: Department(**d) for d in self.MOCK_DEPARTMENTS
        }
        self._staff: Dict[str, Staff] = {}
        for record in self.MOCK_STAFF:
            self.add_staff(Staff(**record))

    def add_staff(self, staff: Staff) -> Staff:
        """Register a staff member after checking identity and bank details"""
        if not validate_staff_id(staff.staff_id):
            raise ValueError(f"Invalid staff ID: {staff.staff_id}")
        if staff.department not in self._departments:
            raise ValueError(f"Unknown department: {staff.department}")
        if staff.account_number and not validate_account_number(staff.account_number):
            raise ValueError(f"Invalid account number for {staff.staff_id}")

        self._staff[staff.staff_id] = staff
        logger.debug(f"Added {staff}")
        return staff

    def get_all_staff(self) -> List[Staff]:
        return list(self._staff.values())

    def get_staff(self, staff_id: str) -> Staff:
        staff = self._staff.get(staff_id)
        if staff is None:
            raise StaffNotFound(f"Staff {staff_id} not found")
        return staff

    def get_eligible_staff(self) -> List[Staff]:
        """Staff who should be included in a payroll run"""
        return [s for s in self._staff.values() if s.is_eligible_for_payroll]

    def get_departments(self) -> List[Department]:
        return list(self._departments.values())

    def get_department(self, code: str) -> Department:
        department = self._departments.get(code)
        if department is None:
            raise LookupError(f"Department {code} not found")
        return department
