"""Tax year-specific rules and the standard deduction algorithm.

Each supported tax year is one frozen ``TaxYearRules`` record holding the
IRS-published dollar figures for that filing season. The standard deduction
formula is written once on the record and shared by every year, so adding a
year means adding one record to ``TAX_YEAR_RULES``.

Example:
    >>> from taxspine.tax.year_rules import get_tax_year_rules
    >>> rules = get_tax_year_rules(2025)
    >>> print(rules.typical_standard_deduction(FilingStatus.SINGLE))
    $15750.00
"""

from __future__ import annotations

from dataclasses import dataclass

from taxspine.tax.filing import Filer, FilingStatus, TaxYear
from taxspine.tax.usd import Usd


class UnsupportedTaxYearError(ValueError):
    """Raised when no rule set exists for the requested tax year."""

    def __init__(self, year: int, available: list[int]):
        self.year = year
        self.available = available
        super().__init__(
            f"No tax rules for year {year}. Available years: {available}"
        )


@dataclass(frozen=True)
class DeductionParams:
    """Inputs to the standard deduction computation.

    A spouse may accompany married filing separately only when that spouse
    had no income, is not filing a return and cannot be claimed as another
    taxpayer's dependent. Callers establish this before building the params;
    it is not checked here.

    Attributes:
        filing_status: Filing status on the return.
        taxpayer: Age and blindness boxes for the primary taxpayer.
        spouse: Age and blindness boxes for the spouse, if any.
        is_dependent: Someone can claim the taxpayer (or spouse on a joint
            return) as a dependent.
        is_dual_status_alien: Taxpayer was a dual-status alien.
        spouse_itemizes: Spouse itemizes on a separate return (MFS only).
        earned_income: Earned income, used only for dependents.
    """

    filing_status: FilingStatus
    taxpayer: Filer = Filer()
    spouse: Filer | None = None
    is_dependent: bool = False
    is_dual_status_alien: bool = False
    spouse_itemizes: bool = False
    earned_income: Usd = Usd.ZERO


@dataclass(frozen=True)
class TaxYearRules:
    """IRS-published parameters for one tax year.

    Records are immutable and hold only constants, so one instance can be
    shared by any number of concurrent computations.

    Attributes:
        tax_year: The tax year these values apply to.
        single_mfs_standard_deduction: Base deduction, single and MFS.
        mfj_qss_standard_deduction: Base deduction, MFJ and qualifying
            surviving spouse.
        hoh_standard_deduction: Base deduction, head of household.
        additional_deduction_unmarried: Per checked box, single and HoH.
        additional_deduction_married: Per checked box, married statuses.
        dependent_earned_income_addition: Added to a dependent's earned
            income before applying the floor.
        dependent_minimum_deduction: Floor on a dependent's deduction.
    """

    tax_year: TaxYear
    single_mfs_standard_deduction: Usd
    mfj_qss_standard_deduction: Usd
    hoh_standard_deduction: Usd
    additional_deduction_unmarried: Usd
    additional_deduction_married: Usd
    dependent_earned_income_addition: Usd
    dependent_minimum_deduction: Usd

    def year(self) -> TaxYear:
        """Return the tax year these rules implement."""
        return self.tax_year

    def typical_standard_deduction(self, filing_status: FilingStatus) -> Usd:
        """Base standard deduction for a filing status, before any boxes."""
        by_status = {
            FilingStatus.SINGLE: self.single_mfs_standard_deduction,
            FilingStatus.MARRIED_FILING_SEPARATELY: self.single_mfs_standard_deduction,
            FilingStatus.MARRIED_FILING_JOINTLY: self.mfj_qss_standard_deduction,
            FilingStatus.QUALIFYING_SURVIVING_SPOUSE: self.mfj_qss_standard_deduction,
            FilingStatus.HEAD_OF_HOUSEHOLD: self.hoh_standard_deduction,
        }
        return by_status[filing_status]

    def standard_deduction(self, params: DeductionParams) -> Usd:
        """Compute the standard deduction (Form 1040 line 12).

        Dual-status aliens, and MFS filers whose spouse itemizes, get no
        standard deduction; nothing else is evaluated for them. Otherwise
        the base for the filing status is increased by one additional amount
        per checked age/blindness box. A dependent's base is replaced by
        earned income plus the addition, no lower than the dependent minimum
        and no higher than the ordinary base.

        Args:
            params: Filing status, filers and flags for the return.

        Returns:
            The standard deduction amount.
        """
        status = params.filing_status
        if params.is_dual_status_alien or (
            status == FilingStatus.MARRIED_FILING_SEPARATELY and params.spouse_itemizes
        ):
            return Usd.ZERO

        base = self.typical_standard_deduction(status)

        if status.is_unmarried:
            per_box = self.additional_deduction_unmarried
            boxes = params.taxpayer.checked_boxes
        else:
            per_box = self.additional_deduction_married
            boxes = params.taxpayer.checked_boxes
            if params.spouse is not None:
                boxes += params.spouse.checked_boxes

        additional = per_box * boxes

        if params.is_dependent:
            floor = self.dependent_minimum_deduction
            earned = params.earned_income + self.dependent_earned_income_addition
            return min(max(earned, floor), base) + additional

        return base + additional


# 2024 rules - IRS published values (Rev. Proc. 2023-34)
RULES_2024 = TaxYearRules(
    tax_year=TaxYear.Y2024,
    single_mfs_standard_deduction=Usd.from_dollars(14_600),
    mfj_qss_standard_deduction=Usd.from_dollars(29_200),
    hoh_standard_deduction=Usd.from_dollars(21_900),
    additional_deduction_unmarried=Usd.from_dollars(1_950),
    additional_deduction_married=Usd.from_dollars(1_550),
    dependent_earned_income_addition=Usd.from_dollars(450),
    dependent_minimum_deduction=Usd.from_dollars(1_300),
)

# 2025 rules - Form 1040 instructions for 2025 (filed in 2026)
RULES_2025 = TaxYearRules(
    tax_year=TaxYear.Y2025,
    single_mfs_standard_deduction=Usd.from_dollars(15_750),
    mfj_qss_standard_deduction=Usd.from_dollars(31_500),
    hoh_standard_deduction=Usd.from_dollars(23_625),
    additional_deduction_unmarried=Usd.from_dollars(2_000),
    additional_deduction_married=Usd.from_dollars(1_600),
    dependent_earned_income_addition=Usd.from_dollars(450),
    dependent_minimum_deduction=Usd.from_dollars(1_350),
)

# Registry of available tax year rules
TAX_YEAR_RULES: dict[TaxYear, TaxYearRules] = {
    TaxYear.Y2024: RULES_2024,
    TaxYear.Y2025: RULES_2025,
}


def get_tax_year_rules(year: TaxYear | int) -> TaxYearRules:
    """Get the rules for a specific tax year.

    Args:
        year: The tax year, as a ``TaxYear`` or a plain int (e.g., 2025).

    Returns:
        TaxYearRules for the specified year.

    Raises:
        UnsupportedTaxYearError: If no rules exist for the requested year.

    Example:
        >>> get_tax_year_rules(2024).year()
        <TaxYear.Y2024: 2024>
    """
    try:
        return TAX_YEAR_RULES[TaxYear(year)]
    except (KeyError, ValueError):
        available = sorted(int(key) for key in TAX_YEAR_RULES)
        raise UnsupportedTaxYearError(int(year), available) from None
