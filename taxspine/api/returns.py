"""Return computation API endpoint."""

from __future__ import annotations

from dataclasses import fields
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator, model_validator

from taxspine.core.config import settings
from taxspine.core.logging import get_logger, tax_year_ctx
from taxspine.tax.filing import Filer, FilingStatus
from taxspine.tax.schedule1 import AdditionalIncome, Adjustments
from taxspine.tax.spine import ReturnInput, TaxComputeError, compute_spine
from taxspine.tax.usd import Usd
from taxspine.tax.year_rules import (
    TaxYearRules,
    UnsupportedTaxYearError,
    get_tax_year_rules,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/returns", tags=["returns"])

_ADDITIONAL_INCOME_LINES = frozenset(f.name for f in fields(AdditionalIncome))
_ADJUSTMENT_LINES = frozenset(f.name for f in fields(Adjustments))

# Largest dollar amount accepted on any line.
MAX_AMOUNT = Decimal("1000000000000")

Amount = Annotated[Decimal, Field(ge=0, le=MAX_AMOUNT)]
SignedAmount = Annotated[Decimal, Field(ge=-MAX_AMOUNT, le=MAX_AMOUNT)]


class FilerPayload(BaseModel):
    """Age and blindness boxes for one filer."""

    is_65_or_older: bool = False
    is_blind: bool = False


class ReturnRequest(BaseModel):
    """Payload for computing one return."""

    tax_year: int | None = None
    filing_status: FilingStatus
    wages: Amount = Decimal("0")
    federal_withholding: Amount = Decimal("0")
    estimated_payments: Amount = Decimal("0")
    taxpayer: FilerPayload = Field(default_factory=FilerPayload)
    spouse: FilerPayload | None = None
    is_dependent: bool = False
    is_dual_status_alien: bool = False
    spouse_itemizes: bool = False
    additional_income: dict[str, SignedAmount] = Field(default_factory=dict)
    """Schedule 1 Part I amounts keyed by line name."""

    adjustments: dict[str, Amount] = Field(default_factory=dict)
    """Schedule 1 Part II amounts keyed by line name."""

    @field_validator("additional_income")
    @classmethod
    def validate_additional_income(cls, value: dict[str, Decimal]) -> dict[str, Decimal]:
        """Only accept known Schedule 1 Part I lines."""
        unknown = sorted(set(value) - _ADDITIONAL_INCOME_LINES)
        if unknown:
            raise ValueError(f"Unknown additional income lines: {unknown}")
        return value

    @field_validator("adjustments")
    @classmethod
    def validate_adjustments(cls, value: dict[str, Decimal]) -> dict[str, Decimal]:
        """Only accept known Schedule 1 Part II lines."""
        unknown = sorted(set(value) - _ADJUSTMENT_LINES)
        if unknown:
            raise ValueError(f"Unknown adjustment lines: {unknown}")
        return value

    @model_validator(mode="after")
    def validate_spouse(self) -> ReturnRequest:
        """A spouse only accompanies married and surviving-spouse statuses."""
        if self.spouse is not None and self.filing_status.is_unmarried:
            raise ValueError(
                f"spouse is not allowed with filing status {self.filing_status.value}"
            )
        return self

    def to_return_input(self, rules: TaxYearRules) -> ReturnInput:
        """Convert the payload into spine input for the given rules."""
        return ReturnInput(
            tax_year=rules.year(),
            filing_status=self.filing_status,
            w2_wages=Usd.from_decimal(self.wages),
            fed_withholding=Usd.from_decimal(self.federal_withholding),
            taxpayer=Filer(**self.taxpayer.model_dump()),
            spouse=Filer(**self.spouse.model_dump()) if self.spouse else None,
            is_dependent=self.is_dependent,
            is_dual_status_alien=self.is_dual_status_alien,
            spouse_itemizes=self.spouse_itemizes,
            additional_income=AdditionalIncome(
                **{line: Usd.from_decimal(amount) for line, amount in self.additional_income.items()}
            ),
            adjustments=Adjustments(
                **{line: Usd.from_decimal(amount) for line, amount in self.adjustments.items()}
            ),
            estimated_payments=Usd.from_decimal(self.estimated_payments),
        )


class LedgerEntry(BaseModel):
    """One ledger stage."""

    stage: str
    amount: Decimal
    display: str


class ReturnResponse(BaseModel):
    """Computed ledger for one return, in pipeline order."""

    tax_year: int
    filing_status: FilingStatus
    ledger: list[LedgerEntry]


@router.post("/compute", response_model=ReturnResponse)
def compute_return(payload: ReturnRequest) -> ReturnResponse:
    """Run the Form 1040 spine for one return.

    Args:
        payload: Return facts. ``tax_year`` defaults to the configured year.

    Returns:
        ReturnResponse with every ledger stage.

    Raises:
        HTTPException: 422 when the year is unsupported or tax cannot be
            computed.
    """
    tax_year = (
        settings.default_tax_year if payload.tax_year is None else payload.tax_year
    )
    token = tax_year_ctx.set(tax_year)
    try:
        try:
            rules = get_tax_year_rules(tax_year)
            ledger = compute_spine(rules, payload.to_return_input(rules))
        except UnsupportedTaxYearError as exc:
            logger.warning("return_unsupported_tax_year", tax_year=tax_year)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except TaxComputeError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
    finally:
        tax_year_ctx.reset(token)

    return ReturnResponse(
        tax_year=tax_year,
        filing_status=payload.filing_status,
        ledger=[
            LedgerEntry(stage=key.value, amount=amount.to_decimal(), display=str(amount))
            for key, amount in ledger.items()
        ],
    )
