from decimal import Decimal

from taxplanner.core.models import (
  DividendInput,
  DividendPreference,
  SalaryInput,
  ScenarioRequest,
  UnincorporatedInput,
)

# Dashboard defaults: business income 150k, 100k personal cash needed.
DASHBOARD_INCOME = Decimal("150000")
DASHBOARD_CASH_NEEDED = Decimal("100000")

MONEY_FIELDS = (
  "gross_salary",
  "eligible_dividends",
  "non_eligible_dividends",
  "corporate_taxes",
  "corporate_cpp",
  "personal_taxes",
  "total_taxes",
  "total_cpp",
  "personal_cpp",
  "corporate_cash",
  "personal_cash",
  "total_cash",
  "effective_tax_rate",
  "rrsp_room",
  "federal_tax",
  "provincial_tax",
  "taxable_income",
)


def make_request(
  income: str | Decimal = DASHBOARD_INCOME,
  cash_needed: str | Decimal = DASHBOARD_CASH_NEEDED,
  other_expenses: str | Decimal = "0",
  preference: DividendPreference = DividendPreference.MIXED,
) -> ScenarioRequest:
  return ScenarioRequest(
    business_income=Decimal(income),
    personal_cash_needed=Decimal(cash_needed),
    other_expenses=Decimal(other_expenses),
    dividend_preference=preference,
  )


def make_uninc(income: str | Decimal) -> UnincorporatedInput:
  return UnincorporatedInput(business_income=Decimal(income))


def make_salary(income: str | Decimal, cash_needed: str | Decimal, other_expenses: str = "0") -> SalaryInput:
  return SalaryInput(
    business_income=Decimal(income),
    personal_cash_needed=Decimal(cash_needed),
    other_expenses=Decimal(other_expenses),
  )


def make_dividends(
  income: str | Decimal,
  cash_needed: str | Decimal,
  preference: DividendPreference = DividendPreference.MIXED,
  other_expenses: str = "0",
) -> DividendInput:
  return DividendInput(
    business_income=Decimal(income),
    personal_cash_needed=Decimal(cash_needed),
    other_expenses=Decimal(other_expenses),
    dividend_preference=preference,
  )
