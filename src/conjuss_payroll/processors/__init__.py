from .salary_scale import CompensationScale, DEFAULT_SCALE, load_scale
from .salary_calculator import PayrollCalculator, compute_payroll
from .payroll_run_processor import PayrollRunProcessor
from .payslip_generator import PayslipGenerator, PayslipData
from .bank_transfer_generator import BankTransferGenerator, BankTransferRecord
from .payroll_register_generator import PayrollRegisterGenerator


__all__ = [
    'CompensationScale',
    'DEFAULT_SCALE',
    'load_scale',
    'PayrollCalculator',
    'compute_payroll',
    'PayrollRunProcessor',
    'PayslipGenerator',
    'PayslipData',
    'BankTransferGenerator',
    'BankTransferRecord',
    'PayrollRegisterGenerator'
]
