from conjuss_payroll.main import main


def test_main_generates_workbooks(tmp_path, capsys):
    exit_code = main(["--year", "2025", "--month", "1", "--output", str(tmp_path)])

    assert exit_code == 0
    assert len(list((tmp_path / "payslips").glob("*.xlsx"))) == 4
    assert len(list((tmp_path / "registers").glob("payroll_register_January_2025_*.xlsx"))) == 1
    banks = sorted(p.name for p in (tmp_path / "bank_transfers").glob("*.xlsx"))
    assert banks == [
        "First_Bank_Transfer_January_2025.xlsx",
        "GTBank_Transfer_January_2025.xlsx",
        "Zenith_Bank_Transfer_January_2025.xlsx",
    ]

    output = capsys.readouterr().out
    assert "January 2025 Payroll" in output
    assert "Staff paid:        4" in output
