import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill

from ..config.settings import OUTPUT_DIR
from ..models.payroll_run import PayrollRun
from ..utils.validators import validate_account_number

logger = logging.getLogger(__name__)

NIGERIAN_BANK_CODES = {
    'Access Bank': '044',
    'Citibank': '023',
    'Ecobank': '050',
    'Fidelity Bank': '070',
    'First Bank': '011',
    'First City Monument Bank': '214',
    'Globus Bank': '00103',
    'GTBank': '058',
    'Heritage Bank': '030',
    'Keystone Bank': '082',
    'Polaris Bank': '076',
    'Stanbic IBTC': '221',
    'Standard Chartered': '068',
    'Sterling Bank': '232',
    'Union Bank': '032',
    'United Bank for Africa': '033',
    'Unity Bank': '215',
    'Wema Bank': '035',
    'Zenith Bank': '057',
}

HEADERS = ['Staff ID', 'Staff Name', 'Account Number', 'Bank Name', 'Account Name', 'Amount', 'Bank Code']


@dataclass
class BankTransferRecord:
    """One net-pay transfer instruction"""
    staff_id: str
    staff_name: str
    account_number: str
    bank_name: str
    account_name: str
    amount: int
    bank_code: str = ''

    def as_row(self) -> list:
        return [self.staff_id, self.staff_name, self.account_number, self.bank_name,
                self.account_name, self.amount, self.bank_code]


class BankTransferGenerator:
    """Build bank transfer schedules from a payroll run"""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "bank_transfers"
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def build_records(self, run: PayrollRun, bank_name: Optional[str] = None) -> List[BankTransferRecord]:
        """Transfer records for every paid staff member, optionally for one bank"""
        records = []
        for item in run.items:
            staff = item.staff
            if bank_name and staff.bank_name != bank_name:
                continue
            if not staff.bank_name or not staff.account_number or not validate_account_number(staff.account_number):
                logger.warning(f"No valid bank details for {staff.staff_id}, leaving out of transfer schedule")
                continue

            records.append(BankTransferRecord(
                staff_id=staff.staff_id,
                staff_name=staff.full_name,
                account_number=staff.account_number,
                bank_name=staff.bank_name,
                account_name=staff.account_name or staff.full_name,
                amount=item.calculation.net_pay,
                bank_code=NIGERIAN_BANK_CODES.get(staff.bank_name, ''),
            ))
        return records

    @staticmethod
    def summarize(records: List[BankTransferRecord]) -> Dict[str, Dict[str, int]]:
        """Number of transfers and total amount per bank"""
        summary: Dict[str, Dict[str, int]] = {}
        for record in records:
            bank = summary.setdefault(record.bank_name, {'count': 0, 'total_amount': 0})
            bank['count'] += 1
            bank['total_amount'] += record.amount
        return summary

    @staticmethod
    def group_by_bank(records: List[BankTransferRecord]) -> Dict[str, List[BankTransferRecord]]:
        groups: Dict[str, List[BankTransferRecord]] = {}
        for record in records:
            groups.setdefault(record.bank_name, []).append(record)
        return groups

    def generate(self, records: List[BankTransferRecord], bank_name: str, pay_period: str) -> str:
        """Generate bank transfer schedule Excel file"""
        if not records:
            raise ValueError(f"No payment records found for {bank_name}")

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Transfers"

        # Define styles
        bold_font = Font(bold=True)
        header_fill = PatternFill(start_color="B4C7E7", end_color="B4C7E7", fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Header row
        for col_idx, header in enumerate(HEADERS, start=1):
            cell = ws.cell(row=1, column=col_idx)
            cell.value = header
            cell.font = bold_font
            cell.fill = header_fill
            cell.border = thin_border
            cell.alignment = Alignment(horizontal='center', vertical='center')
            ws.column_dimensions[cell.column_letter].width = 22

        # Data rows
        row = 2
        for record in records:
            for col_idx, value in enumerate(record.as_row(), start=1):
                cell = ws.cell(row=row, column=col_idx)
                cell.value = value
                cell.border = thin_border
            ws.cell(row=row, column=6).number_format = '#,##0.00'
            row += 1

        # Total row
        ws.cell(row=row, column=5, value="TOTAL").font = bold_font
        total_cell = ws.cell(row=row, column=6, value=sum(r.amount for r in records))
        total_cell.font = bold_font
        total_cell.number_format = '#,##0.00'

        # Generate filename
        filename = f"{bank_name.replace(' ', '_')}_Transfer_{pay_period.replace(' ', '_')}.xlsx"
        filepath = self.output_dir / filename

        # Save workbook
        wb.save(filepath)
        logger.info(f"Generated bank transfer schedule {filepath.name} ({len(records)} transfers)")

        return str(filepath)
