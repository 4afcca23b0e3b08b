import logging
from pathlib import Path
from typing import Optional

import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from openpyxl.utils import get_column_letter

from ..config.settings import OUTPUT_DIR, ORGANIZATION_NAME
from ..models.payroll import RESULT_FIELDS
from ..models.payroll_run import PayrollRun

logger = logging.getLogger(__name__)

IDENTITY_HEADERS = ['Staff ID', 'Name', 'Department', 'Grade', 'Step']

AMOUNT_HEADERS = {
    'basic_salary': 'Basic Salary',
    'housing_allowance': 'Housing',
    'transport_allowance': 'Transport',
    'medical_allowance': 'Medical',
    'leave_allowance': 'Leave',
    'responsibility_allowance': 'Responsibility',
    'hazard_allowance': 'Hazard',
    'overtime': 'Overtime',
    'bonus': 'Bonus',
    'arrears': 'Arrears',
    'gross_pay': 'Gross Pay',
    'paye': 'PAYE',
    'pension': 'Pension',
    'nhf': 'NHF',
    'insurance': 'Insurance',
    'union_dues': 'Union Dues',
    'loan_deduction': 'Loan',
    'cooperative_deduction': 'Cooperative',
    'other_deductions': 'Other',
    'total_deductions': 'Total Deductions',
    'net_pay': 'Net Pay',
}


class PayrollRegisterGenerator:
    """Generate the itemised register for a whole payroll run"""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "registers"
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate(self, run: PayrollRun) -> str:
        """Generate payroll register Excel file"""

        if not run.items:
            raise ValueError(f"Payroll run {run.id} has no items")

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Register"

        # Define styles
        bold_font = Font(bold=True)
        header_fill = PatternFill(start_color="B4C7E7", end_color="B4C7E7", fill_type="solid")
        total_fill = PatternFill(start_color="DDEBF7", end_color="DDEBF7", fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Title rows
        ws['A1'] = ORGANIZATION_NAME
        ws['A1'].font = Font(bold=True, size=14)
        ws['A2'] = f"{run.title} - {run.pay_period} ({run.status.value})"
        ws['A2'].font = bold_font

        # Column headers
        header_row = 4
        attrs = [attr for attr, _ in RESULT_FIELDS]
        headers = IDENTITY_HEADERS + [AMOUNT_HEADERS[attr] for attr in attrs]

        for col_idx, header in enumerate(headers, start=1):
            cell = ws.cell(row=header_row, column=col_idx)
            cell.value = header
            cell.font = bold_font
            cell.fill = header_fill
            cell.border = thin_border
            cell.alignment = Alignment(horizontal='center', vertical='center', wrap_text=True)
            ws.column_dimensions[get_column_letter(col_idx)].width = 14
        ws.column_dimensions['B'].width = 28

        # Data rows
        row = header_row + 1
        first_amount_col = len(IDENTITY_HEADERS) + 1

        for item in run.items:
            staff = item.staff
            values = [staff.staff_id, staff.full_name, staff.department, staff.grade_level, staff.step]
            values += [getattr(item.calculation, attr) for attr in attrs]

            for col_idx, value in enumerate(values, start=1):
                cell = ws.cell(row=row, column=col_idx)
                cell.value = value
                cell.border = thin_border
                if col_idx >= first_amount_col:
                    cell.number_format = '#,##0.00'
            row += 1

        # Totals row
        ws.cell(row=row, column=1, value="TOTAL").font = bold_font
        for offset, attr in enumerate(attrs):
            col_idx = first_amount_col + offset
            cell = ws.cell(row=row, column=col_idx)
            cell.value = sum(getattr(item.calculation, attr) for item in run.items)
            cell.font = bold_font
            cell.fill = total_fill
            cell.border = thin_border
            cell.number_format = '#,##0.00'

        # Staff that could not be calculated
        if run.errors:
            row += 2
            ws.cell(row=row, column=1, value="Not calculated").font = bold_font
            for error in run.errors:
                row += 1
                ws.cell(row=row, column=1, value=error.staff_id)
                ws.cell(row=row, column=2, value=error.staff_name)
                ws.cell(row=row, column=3, value=error.message)

        # Generate filename
        filename = f"payroll_register_{run.pay_period.replace(' ', '_')}_{run.id[:8]}.xlsx"
        filepath = self.output_dir / filename

        # Save workbook
        wb.save(filepath)
        logger.info(f"Generated payroll register {filepath.name} with {run.staff_count} staff")

        return str(filepath)
