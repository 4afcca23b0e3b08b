from datetime import date
from decimal import Decimal

from conjuss_payroll.utils.formatters import (
    format_currency,
    format_date,
    format_pay_period,
    format_percentage,
)
from conjuss_payroll.utils.validators import (
    validate_account_number,
    validate_amount,
    validate_staff_id,
)


def test_format_currency():
    assert format_currency(42000) == "₦42,000.00"
    assert format_currency(Decimal("1234.5")) == "₦1,234.50"
    assert format_currency(0) == "₦0.00"
    assert format_currency(-500) == "-₦500.00"
    assert format_currency(837200, symbol="NGN ") == "NGN 837,200.00"


def test_format_dates():
    assert format_pay_period(date(2025, 1, 15)) == "January 2025"
    assert format_date(date(2025, 3, 7)) == "07/03/2025"


def test_format_percentage():
    assert format_percentage(Decimal("0.025")) == "2.5%"


def test_validate_staff_id():
    assert validate_staff_id("JSC/2025/00001")
    assert not validate_staff_id("JSC/25/00001")
    assert not validate_staff_id("ABC/2025/00001")


def test_validate_account_number():
    assert validate_account_number("0123456789")
    assert validate_account_number("01234 56789")
    assert not validate_account_number("012345678")
    assert not validate_account_number("01234567AB")


def test_validate_amount():
    assert validate_amount(0)
    assert validate_amount(Decimal("10.50"))
    assert not validate_amount(-1)
    assert not validate_amount(True)
    assert not validate_amount("100")
    assert not validate_amount(float("inf"))
