"""Federal income tax bracket lookup.

Computes regular income tax on whole-dollar taxable income using the
marginal rate schedules for each supported year. The spine hands this module
an IRS-rounded dollar amount and gets whole dollars back.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from taxspine.tax.filing import FilingStatus, TaxYear


class TaxError(Exception):
    """Raised when tax cannot be computed for the given inputs."""

    def __init__(
        self,
        message: str,
        tax_year: int | None = None,
        filing_status: FilingStatus | None = None,
    ):
        """Initialize TaxError.

        Args:
            message: Human-readable error message.
            tax_year: Tax year of the failed lookup, if known.
            filing_status: Filing status of the failed lookup, if known.
        """
        self.tax_year = tax_year
        self.filing_status = filing_status
        super().__init__(message)


Bracket = tuple[int | None, Decimal]

_RATES = (
    Decimal("0.10"),
    Decimal("0.12"),
    Decimal("0.22"),
    Decimal("0.24"),
    Decimal("0.32"),
    Decimal("0.35"),
    Decimal("0.37"),
)


def _schedule(*upper_bounds: int) -> list[Bracket]:
    """Pair upper bounds with the seven marginal rates; the top is open."""
    return list(zip((*upper_bounds, None), _RATES))


# Tax brackets by (year, filing_status) - list of (upper_bound, rate)
# None for upper_bound means no limit
TAX_BRACKETS: dict[tuple[TaxYear, FilingStatus], list[Bracket]] = {
    (TaxYear.Y2024, FilingStatus.SINGLE): _schedule(
        11_600, 47_150, 100_525, 191_950, 243_725, 609_350
    ),
    (TaxYear.Y2024, FilingStatus.MARRIED_FILING_JOINTLY): _schedule(
        23_200, 94_300, 201_050, 383_900, 487_450, 731_200
    ),
    (TaxYear.Y2024, FilingStatus.MARRIED_FILING_SEPARATELY): _schedule(
        11_600, 47_150, 100_525, 191_950, 243_725, 365_600
    ),
    (TaxYear.Y2024, FilingStatus.HEAD_OF_HOUSEHOLD): _schedule(
        16_550, 63_100, 100_500, 191_950, 243_700, 609_350
    ),
    (TaxYear.Y2025, FilingStatus.SINGLE): _schedule(
        11_925, 48_475, 103_350, 197_300, 250_525, 626_350
    ),
    (TaxYear.Y2025, FilingStatus.MARRIED_FILING_JOINTLY): _schedule(
        23_850, 96_950, 206_700, 394_600, 501_050, 751_600
    ),
    (TaxYear.Y2025, FilingStatus.MARRIED_FILING_SEPARATELY): _schedule(
        11_925, 48_475, 103_350, 197_300, 250_525, 375_800
    ),
    (TaxYear.Y2025, FilingStatus.HEAD_OF_HOUSEHOLD): _schedule(
        17_000, 64_850, 103_350, 197_300, 250_500, 626_350
    ),
}

# Qualifying surviving spouse uses the joint schedule.
for _year in TaxYear:
    TAX_BRACKETS[(_year, FilingStatus.QUALIFYING_SURVIVING_SPOUSE)] = TAX_BRACKETS[
        (_year, FilingStatus.MARRIED_FILING_JOINTLY)
    ]


def compute_tax(
    tax_year: TaxYear | int, filing_status: FilingStatus, taxable_income: int
) -> int:
    """Calculate federal income tax using marginal brackets.

    Args:
        tax_year: Tax year (e.g., 2025).
        filing_status: Filing status on the return.
        taxable_income: Taxable income in whole dollars.

    Returns:
        Regular tax in whole dollars, rounded half-up.

    Raises:
        TaxError: If the year/status pair has no schedule or income is
            negative.

    Example:
        >>> compute_tax(TaxYear.Y2025, FilingStatus.SINGLE, 50_000)
        5914
    """
    if taxable_income < 0:
        raise TaxError(
            f"Taxable income must not be negative, got {taxable_income}",
            tax_year=int(tax_year),
            filing_status=filing_status,
        )

    key = (tax_year, filing_status)
    if key not in TAX_BRACKETS:
        raise TaxError(
            f"Unknown filing status/year: {filing_status}/{tax_year}",
            tax_year=int(tax_year),
            filing_status=filing_status,
        )

    remaining_income = Decimal(taxable_income)
    gross_tax = Decimal("0")
    prev_bracket = Decimal("0")

    for upper_bound, rate in TAX_BRACKETS[key]:
        if remaining_income <= 0:
            break

        if upper_bound is None:
            bracket_size = remaining_income
        else:
            bracket_size = min(remaining_income, upper_bound - prev_bracket)
            prev_bracket = Decimal(upper_bound)

        gross_tax += bracket_size * rate
        remaining_income -= bracket_size

    return int(gross_tax.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
