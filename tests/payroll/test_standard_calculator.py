from src.hrms.hrms.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_net_salary_is_basic_plus_bonus_minus_deductions_and_tax():
    calc = StandardPayrollCalculator()

    assert calc.net_salary(basic_salary=6000, bonus=500, deductions=300, tax=900) == 5300


def test_monthly_breakdown_from_annual_salary():
    calc = StandardPayrollCalculator()

    pay = calc.monthly_breakdown(annual_salary=78000, bonus=100)

    assert pay.basic_salary == 6500
    assert pay.deductions == 325
    assert pay.tax == 975
    assert pay.net_salary == 5300


def test_monthly_breakdown_rounds_basic_and_floors_withholdings():
    calc = StandardPayrollCalculator()

    pay = calc.monthly_breakdown(annual_salary=85000)

    # 85000 / 12 = 7083.33...
    assert pay.basic_salary == 7083
    assert pay.deductions == 354
    assert pay.tax == 1062
    assert pay.net_salary == 5667
