import pytest

from conjuss_payroll.exceptions import StaffNotFound

from conftest import make_staff


def test_sample_directory(directory):
    assert len(directory.get_all_staff()) == 5
    assert len(directory.get_eligible_staff()) == 4
    assert {d.code for d in directory.get_departments()} == {"JUD", "ADM", "SEC", "ICT"}


def test_get_staff(directory):
    staff = directory.get_staff("JSC/2025/00002")

    assert staff.full_name == "Ibrahim Musa Bello"
    assert (staff.grade_level, staff.step) == ("GL08", 5)


def test_get_unknown_staff(directory):
    with pytest.raises(StaffNotFound):
        directory.get_staff("JSC/2025/99999")


def test_get_department(directory):
    assert directory.get_department("ICT").name == "Information Technology"
    with pytest.raises(LookupError):
        directory.get_department("FIN")


def test_add_staff(directory):
    directory.add_staff(make_staff("JSC/2025/00200"))

    assert directory.get_staff("JSC/2025/00200").department == "ADM"


@pytest.mark.parametrize("overrides", [
    {"staff_id": "2025/00200"},
    {"department": "FIN"},
    {"account_number": "12-34"},
])
def test_add_staff_rejects_bad_records(directory, overrides):
    with pytest.raises(ValueError):
        directory.add_staff(make_staff(**{"staff_id": "JSC/2025/00200", **overrides}))
