import argparse
import logging
from datetime import date
from pathlib import Path

from .api.mock_directory import MockStaffDirectory
from .config.settings import LOG_LEVEL, OUTPUT_DIR
from .processors.bank_transfer_generator import BankTransferGenerator
from .processors.payroll_register_generator import PayrollRegisterGenerator
from .processors.payroll_run_processor import PayrollRunProcessor
from .processors.payslip_generator import PayslipGenerator
from .processors.salary_calculator import PayrollCalculator
from .processors.salary_scale import load_scale
from .utils.formatters import format_currency, format_pay_period

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    today = date.today()
    parser = argparse.ArgumentParser(description="Run a CONJUSS payroll for the sample staff directory")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month, choices=range(1, 13))
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR, help="Directory for generated workbooks")
    parser.add_argument("--scale", type=Path, default=None, help="JSON salary scale to use instead of CONJUSS")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for payroll processing"""
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    pay_period = format_pay_period(date(args.year, args.month, 1))
    logger.info(f"Starting payroll for {pay_period}")

    directory = MockStaffDirectory()
    processor = PayrollRunProcessor(PayrollCalculator(load_scale(args.scale)))

    run = processor.create_run(f"{pay_period} Payroll", pay_period, created_by="system")
    processor.calculate(run, directory.get_all_staff())

    # Payslips
    payslips = PayslipGenerator(args.output / "payslips")
    departments = {d.code: d.name for d in directory.get_departments()}
    for item in run.items:
        payslips.generate(PayslipGenerator.build(item, pay_period, departments.get(item.staff.department)))

    # Register and bank schedules
    PayrollRegisterGenerator(args.output / "registers").generate(run)

    bank_generator = BankTransferGenerator(args.output / "bank_transfers")
    records = bank_generator.build_records(run)
    for bank_name, bank_records in bank_generator.group_by_bank(records).items():
        bank_generator.generate(bank_records, bank_name, pay_period)

    summary = processor.summarize(run)

    print("=" * 60)
    print(f"{run.title}")
    print("=" * 60)
    print(f"Staff paid:        {summary['staff_count']}")
    print(f"Gross pay:         {format_currency(summary['total_gross'])}")
    print(f"Total deductions:  {format_currency(summary['total_deductions'])}")
    print(f"Net pay:           {format_currency(summary['total_amount'])}")
    for error in run.errors:
        print(f"Not calculated:    {error.staff_id} - {error.message}")
    print(f"\nWorkbooks saved to: {args.output}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
