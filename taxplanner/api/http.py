import logging
from decimal import Decimal

from fastapi import APIRouter, FastAPI, HTTPException, Request

from taxplanner import __version__
from taxplanner.config import get_settings
from taxplanner.core.corporate import compute_corporate_taxes_bc
from taxplanner.core.models import (
    ComparisonResult,
    CorpTaxResult,
    ScenarioKind,
    ScenarioRequest,
    ScenarioResult,
)
from taxplanner.core.provinces import PROVINCE_CODE, PROVINCE_NAME
from taxplanner.core.scenarios import calculate_scenario, compare_scenarios
from taxplanner.core.solver import SolverOptions
from taxplanner.core.tax_years import TAX_YEAR
from taxplanner.lifespan import build_application_lifespan

logger = logging.getLogger("taxplanner")


async def _announce_tax_year(_: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "Planner startup complete; tax_year=%s province=%s build=%s",
        TAX_YEAR,
        PROVINCE_CODE,
        settings.build_version,
    )


app = FastAPI(
    title="BC Incorporation Planner",
    description="Compare unincorporated, salary and dividend structures under BC 2025 rules.",
    version=__version__,
    lifespan=build_application_lifespan("planner", startup_hook=_announce_tax_year),
)
router = APIRouter()


def _solver_options(request: Request) -> SolverOptions:
    options = getattr(request.app.state, "solver_options", None)
    return options if options is not None else get_settings().solver_options()


@router.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    return {
        "status": "ok",
        "tax_year": TAX_YEAR,
        "province": PROVINCE_CODE,
        "province_name": PROVINCE_NAME,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


@router.get("/scenarios")
def list_scenarios():
    return {"scenarios": [kind.value for kind in ScenarioKind]}


@router.post("/scenarios/compare", response_model=ComparisonResult)
def compare(req: ScenarioRequest, request: Request) -> ComparisonResult:
    return compare_scenarios(req, options=_solver_options(request))


@router.post("/scenarios/{kind}", response_model=ScenarioResult)
def scenario(kind: str, req: ScenarioRequest, request: Request) -> ScenarioResult:
    try:
        result = calculate_scenario(kind, req, options=_solver_options(request))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown scenario '{kind}'") from exc
    if result.capped:
        logger.info("Scenario %s returned a capped result", kind)
    return result


@router.get("/corporate-tax", response_model=CorpTaxResult)
def corporate_tax(profit: Decimal) -> CorpTaxResult:
    return compute_corporate_taxes_bc(profit)


app.include_router(router)
