import argparse
import json
import logging
import os
import sys
from decimal import Decimal
from pathlib import Path
from typing import Literal, Sequence

if __package__ in (None, ""):
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from taxplanner.config import get_settings
from taxplanner.core.corporate import compute_corporate_taxes_bc
from taxplanner.core.models import (
    ComparisonResult,
    CorpTaxResult,
    DividendPreference,
    ScenarioKind,
    ScenarioRequest,
    ScenarioResult,
)
from taxplanner.core.scenarios import calculate_scenario, compare_scenarios

ColorPreference = Literal["auto", "always", "never"]

_COMMAND_TO_KIND = {
    "unincorporated": ScenarioKind.UNINCORPORATED,
    "salary": ScenarioKind.INCORPORATED_SALARY,
    "dividends": ScenarioKind.INCORPORATED_DIVIDENDS,
}

_SCENARIO_TITLES = {
    ScenarioKind.UNINCORPORATED: "Not Incorporated",
    ScenarioKind.INCORPORATED_SALARY: "Incorporated - Salary",
    ScenarioKind.INCORPORATED_DIVIDENDS: "Incorporated - Dividends",
}

_RESULT_ROWS: tuple[tuple[str, str], ...] = (
    ("gross_salary", "Gross salary"),
    ("eligible_dividends", "Eligible dividends"),
    ("non_eligible_dividends", "Non-eligible dividends"),
    ("taxable_income", "Taxable income"),
    ("federal_tax", "Federal tax (net of credits)"),
    ("provincial_tax", "BC tax (net of credits)"),
    ("personal_taxes", "Personal taxes"),
    ("personal_cpp", "Personal CPP"),
    ("corporate_taxes", "Corporate taxes"),
    ("corporate_cpp", "Corporate CPP"),
    ("total_taxes", "Total taxes"),
    ("total_cpp", "Total CPP"),
    ("personal_cash", "Personal cash"),
    ("corporate_cash", "Corporate cash"),
    ("total_cash", "Total cash"),
    ("effective_tax_rate", "Effective rate (incl. CPP)"),
    ("rrsp_room", "RRSP room"),
)


def _resolve_color_preference(pref: ColorPreference) -> ColorPreference:
    if pref == "auto" and os.getenv("NO_COLOR"):
        return "never"
    return pref


def _get_console(pref: ColorPreference) -> Console:
    resolved = _resolve_color_preference(pref)
    if resolved == "never":
        return Console(no_color=True, highlight=False)
    return Console(force_terminal=True if resolved == "always" else None)


def _format_currency(value: Decimal) -> str:
    return f"${value:,.2f}"


def _format_rate(value: Decimal) -> str:
    return f"{value * 100:.2f}%"


def _format_field(field: str, value: Decimal) -> str:
    if field == "effective_tax_rate":
        return _format_rate(value)
    return _format_currency(value)


def _notes(results: Sequence[ScenarioResult]) -> list[str]:
    notes: list[str] = []
    for result in results:
        if not result.capped:
            continue
        title = _SCENARIO_TITLES[result.scenario]
        if result.scenario is ScenarioKind.INCORPORATED_DIVIDENDS:
            notes.append(
                f"{title}: target capped by after-tax corporate profit "
                f"(needs {_format_currency(result.required_dividends)}, "
                f"short {_format_currency(result.target_shortfall)})."
            )
        else:
            notes.append(f"{title}: salary and employer CPP exceed business income.")
    return notes


def _print_results(console: Console, results: Sequence[ScenarioResult]) -> None:
    table = Table(title="BC 2025 scenario results", expand=False)
    table.add_column("Metric")
    for result in results:
        table.add_column(_SCENARIO_TITLES[result.scenario], justify="right")
    for field, label in _RESULT_ROWS:
        table.add_row(label, *(_format_field(field, getattr(r, field)) for r in results))
    console.print(table)
    for note in _notes(results):
        console.print(f"NOTE: {note}")


def _print_comparison(console: Console, comparison: ComparisonResult) -> None:
    _print_results(console, comparison.results())
    console.print(
        f"Lowest taxes + CPP: {_SCENARIO_TITLES[comparison.lowest_taxes_and_cpp]}"
    )
    console.print(f"Highest total cash: {_SCENARIO_TITLES[comparison.highest_total_cash]}")


def _print_corporate(console: Console, result: CorpTaxResult) -> None:
    table = Table(title="BC 2025 corporate tax", expand=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Profit before tax", _format_currency(result.profit_before_tax))
    table.add_row("Small-business portion", _format_currency(result.sbd_portion))
    table.add_row("General-rate portion", _format_currency(result.general_portion))
    table.add_row("Tax on small-business portion", _format_currency(result.tax_on_sbd))
    table.add_row("Tax on general portion", _format_currency(result.tax_on_general))
    table.add_row("Corporate taxes", _format_currency(result.corporate_taxes))
    table.add_row("Effective rate", _format_rate(result.effective_rate))
    console.print(table)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="taxplanner",
        description="Compare BC 2025 small-business income structures.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="compare",
        choices=["compare", "unincorporated", "salary", "dividends", "corporate"],
        help="Calculator to run (default: compare).",
    )
    parser.add_argument("--income", default="0", help="Business income before tax.")
    parser.add_argument("--cash-needed", default="0", help="Personal cash needed after tax and CPP.")
    parser.add_argument("--other-expenses", default="0", help="Other corporate expenses.")
    parser.add_argument(
        "--dividend-preference",
        choices=[p.value for p in DividendPreference],
        default=DividendPreference.MIXED.value,
        help="Dividend classes to draw (default: mixed, eligible first).",
    )
    parser.add_argument("--profit", default="0", help="Profit before tax for the corporate command.")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON.")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="Alias for --color never.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    console = _get_console(args.color)
    options = get_settings().solver_options()

    try:
        if args.command == "corporate":
            corp = compute_corporate_taxes_bc(Decimal(args.profit))
            payload = corp
        else:
            request = ScenarioRequest(
                business_income=args.income,
                personal_cash_needed=args.cash_needed,
                other_expenses=args.other_expenses,
                dividend_preference=args.dividend_preference,
            )
            if args.command == "compare":
                payload = compare_scenarios(request, options=options)
            else:
                payload = calculate_scenario(_COMMAND_TO_KIND[args.command], request, options=options)
    except ValidationError as exc:
        console.print("There was a problem with the values provided:")
        for error in exc.errors():
            location = " -> ".join(str(part) for part in error.get("loc", ("value",)))
            console.print(f"  - {location}: {error.get('msg')}")
        sys.exit(1)
    except ArithmeticError as exc:
        console.print(f"Invalid amount: {exc}")
        sys.exit(1)

    if args.json:
        print(json.dumps(payload.model_dump(mode="json"), indent=2))
        return
    if isinstance(payload, CorpTaxResult):
        _print_corporate(console, payload)
    elif isinstance(payload, ComparisonResult):
        _print_comparison(console, payload)
    else:
        _print_results(console, [payload])


if __name__ == "__main__":
    main()
