from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ZERO = Decimal("0")


class ScenarioKind(str, Enum):
    UNINCORPORATED = "unincorporated"
    INCORPORATED_SALARY = "incorporated_salary"
    INCORPORATED_DIVIDENDS = "incorporated_dividends"


class DividendPreference(str, Enum):
    MIXED = "mixed"
    ELIGIBLE_ONLY = "eligible_only"
    NON_ELIGIBLE_ONLY = "non_eligible_only"


class _AmountInput(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("*", mode="after")
    @classmethod
    def _clamp_amounts(cls, value):
        if isinstance(value, Decimal):
            return max(_ZERO, value)
        return value


class UnincorporatedInput(_AmountInput):
    business_income: Decimal = Field(_ZERO, description="Self-employment income before tax and CPP")


class SalaryInput(_AmountInput):
    business_income: Decimal = Field(_ZERO, description="Corporate revenue before salary, CPP and tax")
    personal_cash_needed: Decimal = Field(_ZERO, description="Target take-home after tax and CPP")
    other_expenses: Decimal = Field(_ZERO, description="Other deductible corporate expenses")


class DividendInput(_AmountInput):
    business_income: Decimal = Field(_ZERO, description="Corporate revenue before tax")
    personal_cash_needed: Decimal = Field(_ZERO, description="Target take-home after personal tax")
    other_expenses: Decimal = Field(_ZERO, description="Other deductible corporate expenses")
    dividend_preference: DividendPreference = DividendPreference.MIXED


class ScenarioRequest(_AmountInput):
    """One record that can drive any of the three calculators."""

    business_income: Decimal = _ZERO
    personal_cash_needed: Decimal = _ZERO
    other_expenses: Decimal = _ZERO
    dividend_preference: DividendPreference = DividendPreference.MIXED

    def unincorporated(self) -> UnincorporatedInput:
        return UnincorporatedInput(business_income=self.business_income)

    def salary(self) -> SalaryInput:
        return SalaryInput(
            business_income=self.business_income,
            personal_cash_needed=self.personal_cash_needed,
            other_expenses=self.other_expenses,
        )

    def dividends(self) -> DividendInput:
        return DividendInput(
            business_income=self.business_income,
            personal_cash_needed=self.personal_cash_needed,
            other_expenses=self.other_expenses,
            dividend_preference=self.dividend_preference,
        )


class CorpTaxResult(BaseModel):
    profit_before_tax: Decimal
    sbd_portion: Decimal
    general_portion: Decimal
    tax_on_sbd: Decimal
    tax_on_general: Decimal
    corporate_taxes: Decimal
    effective_rate: Decimal

    model_config = ConfigDict(frozen=True)


class ScenarioResult(BaseModel):
    scenario: ScenarioKind
    gross_salary: Decimal = _ZERO
    eligible_dividends: Decimal = _ZERO
    non_eligible_dividends: Decimal = _ZERO
    corporate_taxes: Decimal = _ZERO
    corporate_cpp: Decimal = _ZERO
    personal_taxes: Decimal = _ZERO
    total_taxes: Decimal = _ZERO
    total_cpp: Decimal = _ZERO
    personal_cpp: Decimal = _ZERO
    corporate_cash: Decimal = _ZERO
    personal_cash: Decimal = _ZERO
    total_cash: Decimal = _ZERO
    effective_tax_rate: Decimal = _ZERO
    rrsp_room: Decimal = _ZERO
    federal_tax: Decimal = _ZERO
    provincial_tax: Decimal = _ZERO
    taxable_income: Decimal = _ZERO
    capped: bool = False
    required_dividends: Decimal = _ZERO
    target_shortfall: Decimal = _ZERO

    model_config = ConfigDict(frozen=True)

    @property
    def taxes_and_cpp(self) -> Decimal:
        return self.total_taxes + self.total_cpp


class ComparisonResult(BaseModel):
    unincorporated: ScenarioResult
    incorporated_salary: ScenarioResult
    incorporated_dividends: ScenarioResult
    lowest_taxes_and_cpp: ScenarioKind
    highest_total_cash: ScenarioKind

    model_config = ConfigDict(frozen=True)

    def results(self) -> tuple[ScenarioResult, ScenarioResult, ScenarioResult]:
        return (self.unincorporated, self.incorporated_salary, self.incorporated_dividends)
