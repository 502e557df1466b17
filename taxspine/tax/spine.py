"""Form 1040 spine: income through refund or amount owed.

``compute_spine`` runs the fixed Form 1040 sequence against one year's rules
and returns a ``Ledger`` holding every intermediate and final amount:

    Income -> Adjustments -> AGI -> Deductions -> Taxable Income ->
    Regular Tax -> Additional Tax -> Credits -> Payments -> Refund / Owed

Stages that are not wired to a data source yet (additional taxes, credits)
still write a zero entry, so every ledger carries the same seventeen keys.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from taxspine.core.logging import get_logger
from taxspine.tax import brackets
from taxspine.tax.filing import Filer, FilingStatus, TaxYear
from taxspine.tax.schedule1 import AdditionalIncome, Adjustments
from taxspine.tax.usd import Usd
from taxspine.tax.year_rules import DeductionParams, TaxYearRules

logger = get_logger(__name__)

TaxFunction = Callable[[TaxYear, FilingStatus, int], int]


# =============================================================================
# Ledger
# =============================================================================


class LedgerKey(str, Enum):
    """Ledger stages, declared in pipeline order."""

    TOTAL_INCOME = "total_income"
    ADJUSTMENTS = "adjustments"
    AGI = "agi"
    DEDUCTIONS = "deductions"
    TAXABLE_INCOME = "taxable_income"
    REGULAR_TAX = "regular_tax"
    ADDITIONAL_TAX = "additional_tax"
    TOTAL_TAX_PRE_CREDITS = "total_tax_pre_credits"
    NONREFUNDABLE_CREDITS = "nonrefundable_credits"
    TAX_AFTER_NONREFUNDABLE_CREDITS = "tax_after_nonrefundable_credits"
    REFUNDABLE_CREDITS = "refundable_credits"
    TOTAL_TAX = "total_tax"
    WITHHOLDING = "withholding"
    ESTIMATED_PAYMENTS = "estimated_payments"
    TOTAL_PAYMENTS = "total_payments"
    REFUND = "refund"
    AMOUNT_OWED = "amount_owed"


class Ledger(Mapping[LedgerKey, Usd]):
    """Read-only record of every stage amount for one computation.

    Every ``LedgerKey`` is present, zero or not; a missing key is never a
    stand-in for zero. Iteration follows pipeline order whatever order the
    entries were supplied in.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[LedgerKey, Usd]):
        missing = [key.value for key in LedgerKey if key not in entries]
        if missing:
            raise ValueError(f"Ledger is missing stages: {missing}")
        unknown = [key for key in entries if not isinstance(key, LedgerKey)]
        if unknown:
            raise ValueError(f"Ledger has unknown stages: {unknown}")
        self._entries: dict[LedgerKey, Usd] = {key: entries[key] for key in LedgerKey}

    def __getitem__(self, key: LedgerKey) -> Usd:
        return self._entries[key]

    def __iter__(self) -> Iterator[LedgerKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{key.value}={amount}" for key, amount in self._entries.items())
        return f"Ledger({body})"

    def as_dict(self) -> dict[str, str]:
        """Render the ledger as ``{stage: "$D.CC"}`` in pipeline order."""
        return {key.value: str(amount) for key, amount in self._entries.items()}


# =============================================================================
# Input
# =============================================================================


@dataclass(frozen=True)
class ReturnInput:
    """Facts for one return.

    Only the first four fields are required; the rest default to a
    non-dependent filer with no boxes checked, no Schedule 1 entries and no
    estimated payments.

    Attributes:
        tax_year: Tax year of the return.
        filing_status: Filing status on the return.
        w2_wages: Total W-2 box 1 wages.
        fed_withholding: Total federal income tax withheld.
        taxpayer: Age and blindness boxes for the taxpayer.
        spouse: Age and blindness boxes for the spouse, if any.
        is_dependent: Taxpayer can be claimed as someone's dependent.
        is_dual_status_alien: Taxpayer was a dual-status alien.
        spouse_itemizes: Spouse itemizes on a separate return.
        additional_income: Schedule 1, Part I.
        adjustments: Schedule 1, Part II.
        estimated_payments: Estimated tax payments for the year.
    """

    tax_year: TaxYear
    filing_status: FilingStatus
    w2_wages: Usd
    fed_withholding: Usd
    taxpayer: Filer = Filer()
    spouse: Filer | None = None
    is_dependent: bool = False
    is_dual_status_alien: bool = False
    spouse_itemizes: bool = False
    additional_income: AdditionalIncome = AdditionalIncome()
    adjustments: Adjustments = Adjustments()
    estimated_payments: Usd = Usd.ZERO

    @property
    def earned_income(self) -> Usd:
        """Wages plus business and farm income from Schedule 1."""
        return (
            self.w2_wages
            + self.additional_income.business_income
            + self.additional_income.farm_income
        )

    def deduction_params(self) -> DeductionParams:
        """Build the standard deduction inputs for this return."""
        return DeductionParams(
            filing_status=self.filing_status,
            taxpayer=self.taxpayer,
            spouse=self.spouse,
            is_dependent=self.is_dependent,
            is_dual_status_alien=self.is_dual_status_alien,
            spouse_itemizes=self.spouse_itemizes,
            earned_income=self.earned_income,
        )


# =============================================================================
# Errors
# =============================================================================


class SpineError(Exception):
    """Base class for spine computation failures."""


class YearMismatchError(SpineError):
    """Raised when the return and the rules are for different tax years."""

    def __init__(self, input_year: TaxYear, rules_year: TaxYear):
        self.input_year = input_year
        self.rules_year = rules_year
        super().__init__(
            f"tax year mismatch: input={int(input_year)}, rules={int(rules_year)}"
        )


class TaxComputeError(SpineError):
    """Raised when the bracket lookup fails; the original error is kept."""

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"tax computation error: {error}")


# =============================================================================
# Spine
# =============================================================================


def compute_spine(
    rules: TaxYearRules,
    return_input: ReturnInput,
    *,
    tax_fn: TaxFunction | None = None,
) -> Ledger:
    """Compute the core Form 1040 flow and return the ledger.

    Args:
        rules: Rules for the return's tax year.
        return_input: Facts for the return.
        tax_fn: Bracket lookup taking (year, status, whole-dollar taxable
            income) and returning whole-dollar tax. Defaults to
            ``brackets.compute_tax``.

    Returns:
        Ledger with all seventeen stages.

    Raises:
        YearMismatchError: If ``return_input.tax_year`` differs from
            ``rules.year()``. Raised before anything else is computed.
        TaxComputeError: If the bracket lookup raises.
    """
    if return_input.tax_year != rules.year():
        logger.warning(
            "spine_year_mismatch",
            input_year=int(return_input.tax_year),
            rules_year=int(rules.year()),
        )
        raise YearMismatchError(return_input.tax_year, rules.year())

    tax_fn = tax_fn or brackets.compute_tax
    tax_year = return_input.tax_year
    filing_status = return_input.filing_status

    logger.debug(
        "spine_compute_start",
        tax_year=int(tax_year),
        filing_status=filing_status.value,
    )

    total_income = return_input.w2_wages + return_input.additional_income.total()
    adjustments = return_input.adjustments.total()
    agi = total_income - adjustments

    # TODO: compare against Schedule A once itemized deductions are modeled
    deductions = rules.standard_deduction(return_input.deduction_params())
    taxable_income = max(agi - deductions, Usd.ZERO)

    # The bracket lookup works in whole dollars.
    taxable_whole_dollars = taxable_income.irs_round().whole_dollars()
    try:
        regular_tax_whole_dollars = tax_fn(tax_year, filing_status, taxable_whole_dollars)
    except Exception as exc:
        logger.error(
            "spine_tax_compute_failed",
            tax_year=int(tax_year),
            filing_status=filing_status.value,
            error=str(exc),
        )
        raise TaxComputeError(exc) from exc
    regular_tax = Usd.from_dollars(regular_tax_whole_dollars)

    additional_tax = Usd.ZERO
    total_tax_pre_credits = regular_tax + additional_tax

    nonrefundable_credits = Usd.ZERO
    tax_after_nonrefundable = max(total_tax_pre_credits - nonrefundable_credits, Usd.ZERO)

    refundable_credits = Usd.ZERO
    total_tax = tax_after_nonrefundable - refundable_credits

    withholding = return_input.fed_withholding
    estimated_payments = return_input.estimated_payments
    total_payments = withholding + estimated_payments

    net = total_payments - total_tax
    refund = max(net, Usd.ZERO)
    amount_owed = max(-net, Usd.ZERO)

    ledger = Ledger(
        {
            LedgerKey.TOTAL_INCOME: total_income,
            LedgerKey.ADJUSTMENTS: adjustments,
            LedgerKey.AGI: agi,
            LedgerKey.DEDUCTIONS: deductions,
            LedgerKey.TAXABLE_INCOME: taxable_income,
            LedgerKey.REGULAR_TAX: regular_tax,
            LedgerKey.ADDITIONAL_TAX: additional_tax,
            LedgerKey.TOTAL_TAX_PRE_CREDITS: total_tax_pre_credits,
            LedgerKey.NONREFUNDABLE_CREDITS: nonrefundable_credits,
            LedgerKey.TAX_AFTER_NONREFUNDABLE_CREDITS: tax_after_nonrefundable,
            LedgerKey.REFUNDABLE_CREDITS: refundable_credits,
            LedgerKey.TOTAL_TAX: total_tax,
            LedgerKey.WITHHOLDING: withholding,
            LedgerKey.ESTIMATED_PAYMENTS: estimated_payments,
            LedgerKey.TOTAL_PAYMENTS: total_payments,
            LedgerKey.REFUND: refund,
            LedgerKey.AMOUNT_OWED: amount_owed,
        }
    )

    logger.info(
        "spine_compute_complete",
        tax_year=int(tax_year),
        filing_status=filing_status.value,
        total_tax=str(total_tax),
        refund=str(refund),
        amount_owed=str(amount_owed),
    )

    return ledger
