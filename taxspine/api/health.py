"""Health check endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from taxspine.core.config import settings
from taxspine.tax.year_rules import TAX_YEAR_RULES

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    supported_tax_years: list[int]
    default_tax_year: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report service status and the tax years it can compute.

    Returns:
        HealthResponse with the supported years.
    """
    return HealthResponse(
        status="ok",
        supported_tax_years=sorted(int(year) for year in TAX_YEAR_RULES),
        default_tax_year=settings.default_tax_year,
    )
