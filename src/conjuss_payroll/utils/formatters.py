from decimal import Decimal
from datetime import date
from typing import Union

from ..config.settings import CURRENCY_SYMBOL

Amount = Union[int, Decimal, float]


def format_currency(amount: Amount, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format currency amount, e.g. ₦42,000.00"""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_pay_period(d: date) -> str:
    """Pay period label, e.g. January 2025"""
    return d.strftime("%B %Y")


def format_date(d: date) -> str:
    return d.strftime("%d/%m/%Y")


def format_percentage(rate: Decimal) -> str:
    """Format a fractional rate as a percentage"""
    return f"{rate * 100:.1f}%"
