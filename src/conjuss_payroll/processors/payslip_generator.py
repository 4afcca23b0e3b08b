import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill

from ..config.settings import OUTPUT_DIR, ORGANIZATION_NAME
from ..models.payroll import PayrollCalculationResult
from ..models.payroll_run import PayrollItem
from ..utils.formatters import format_currency

logger = logging.getLogger(__name__)

# (label, result attribute, printed even when zero)
EARNING_LINES = [
    ("Basic Salary", "basic_salary", True),
    ("Housing Allowance", "housing_allowance", True),
    ("Transport Allowance", "transport_allowance", True),
    ("Medical Allowance", "medical_allowance", True),
    ("Leave Allowance", "leave_allowance", True),
    ("Responsibility Allowance", "responsibility_allowance", False),
    ("Hazard Allowance", "hazard_allowance", False),
    ("Overtime", "overtime", False),
    ("Bonus", "bonus", False),
    ("Arrears", "arrears", False),
]

DEDUCTION_LINES = [
    ("PAYE Tax", "paye", True),
    ("Pension (8%)", "pension", True),
    ("NHF (2.5%)", "nhf", True),
    ("Insurance", "insurance", False),
    ("Union Dues", "union_dues", False),
    ("Loan Repayment", "loan_deduction", False),
    ("Cooperative", "cooperative_deduction", False),
    ("Other Deductions", "other_deductions", False),
]


@dataclass
class PayslipData:
    """Identity and period details printed alongside a calculation"""
    staff_id: str
    staff_name: str
    pay_period: str
    department: str
    grade_level: str
    step: int
    calculation: PayrollCalculationResult


def _lines(calculation: PayrollCalculationResult, layout) -> List[Tuple[str, int]]:
    lines = []
    for label, attr, always in layout:
        amount = getattr(calculation, attr)
        if always or amount > 0:
            lines.append((label, amount))
    return lines


class PayslipGenerator:
    """Generate individual payslip Excel files"""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "payslips"
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def build(item: PayrollItem, pay_period: str, department_name: Optional[str] = None) -> PayslipData:
        staff = item.staff
        return PayslipData(
            staff_id=staff.staff_id,
            staff_name=staff.full_name,
            pay_period=pay_period,
            department=department_name or staff.department,
            grade_level=staff.grade_level,
            step=staff.step,
            calculation=item.calculation,
        )

    @staticmethod
    def earnings_lines(data: PayslipData) -> List[Tuple[str, int]]:
        return _lines(data.calculation, EARNING_LINES)

    @staticmethod
    def deduction_lines(data: PayslipData) -> List[Tuple[str, int]]:
        return _lines(data.calculation, DEDUCTION_LINES)

    def generate(self, data: PayslipData) -> str:
        """Generate payslip Excel file"""

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Payslip"

        # Set column widths
        ws.column_dimensions['A'].width = 28
        ws.column_dimensions['B'].width = 18
        ws.column_dimensions['C'].width = 4
        ws.column_dimensions['D'].width = 28
        ws.column_dimensions['E'].width = 18

        # Define styles
        header_font = Font(bold=True, size=14, color="1E40AF")
        bold_font = Font(bold=True)
        section_font = Font(bold=True, color="FFFFFF")
        section_fill = PatternFill(start_color="1E40AF", end_color="1E40AF", fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Header section
        row = 1
        ws.merge_cells(f'A{row}:E{row}')
        ws[f'A{row}'] = ORGANIZATION_NAME
        ws[f'A{row}'].font = header_font
        ws[f'A{row}'].alignment = Alignment(horizontal='center')

        row = 2
        ws.merge_cells(f'A{row}:E{row}')
        ws[f'A{row}'] = "MONTHLY PAYSLIP"
        ws[f'A{row}'].font = bold_font
        ws[f'A{row}'].alignment = Alignment(horizontal='center')

        # Staff information
        info = [
            ("Staff ID", data.staff_id, "Pay Period", data.pay_period),
            ("Name", data.staff_name, "Grade Level", data.grade_level),
            ("Department", data.department, "Step", data.step),
        ]
        row = 4
        for left_label, left_value, right_label, right_value in info:
            ws[f'A{row}'] = left_label
            ws[f'A{row}'].font = bold_font
            ws[f'B{row}'] = left_value
            ws[f'D{row}'] = right_label
            ws[f'D{row}'].font = bold_font
            ws[f'E{row}'] = right_value
            row += 1

        # Earnings and deductions side by side
        row += 1
        for col, title in (('A', "EARNINGS"), ('D', "DEDUCTIONS")):
            ws[f'{col}{row}'] = title
            ws[f'{col}{row}'].font = section_font
            ws[f'{col}{row}'].fill = section_fill

        earnings = self.earnings_lines(data)
        deductions = self.deduction_lines(data)
        first_line = row + 1

        for offset, (label, amount) in enumerate(earnings):
            ws[f'A{first_line + offset}'] = label
            ws[f'B{first_line + offset}'] = amount
            ws[f'B{first_line + offset}'].number_format = '#,##0.00'

        for offset, (label, amount) in enumerate(deductions):
            ws[f'D{first_line + offset}'] = label
            ws[f'E{first_line + offset}'] = amount
            ws[f'E{first_line + offset}'].number_format = '#,##0.00'

        # Totals
        row = first_line + max(len(earnings), len(deductions))
        ws[f'A{row}'] = "Gross Pay"
        ws[f'B{row}'] = data.calculation.gross_pay
        ws[f'D{row}'] = "Total Deductions"
        ws[f'E{row}'] = data.calculation.total_deductions
        for cell in [f'A{row}', f'B{row}', f'D{row}', f'E{row}']:
            ws[cell].font = bold_font
            ws[cell].border = thin_border
        ws[f'B{row}'].number_format = '#,##0.00'
        ws[f'E{row}'].number_format = '#,##0.00'

        # Net pay
        row += 2
        ws[f'A{row}'] = "NET PAY"
        ws[f'A{row}'].font = Font(bold=True, size=14)
        ws[f'B{row}'] = format_currency(data.calculation.net_pay)
        ws[f'B{row}'].font = Font(bold=True, size=14)

        # Generate filename
        period = data.pay_period.replace(' ', '_')
        filename = f"{data.staff_id.replace('/', '-')}_{period}_payslip.xlsx"
        filepath = self.output_dir / filename

        # Save workbook
        wb.save(filepath)
        logger.info(f"Generated payslip {filepath.name}")

        return str(filepath)
