import math
import re
from decimal import Decimal
from typing import Union


def validate_staff_id(staff_id: str) -> bool:
    """Validate staff number format, e.g. JSC/2025/00001"""
    pattern = r'^JSC/\d{4}/\d{5}$'
    return bool(re.match(pattern, staff_id))


def validate_account_number(account_number: str) -> bool:
    """NUBAN account numbers are 10 digits"""
    account_number = account_number.replace(' ', '')
    return len(account_number) == 10 and account_number.isdigit()


def validate_amount(amount: Union[int, Decimal, float]) -> bool:
    """Validate amount is a finite, non-negative number"""
    if isinstance(amount, bool) or not isinstance(amount, (int, Decimal, float)):
        return False
    if isinstance(amount, float) and not math.isfinite(amount):
        return False
    if isinstance(amount, Decimal) and not amount.is_finite():
        return False
    return amount >= 0
