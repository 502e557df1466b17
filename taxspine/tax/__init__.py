"""Form 1040 computation: currency, year rules, brackets and the spine."""

from taxspine.tax.brackets import TaxError, compute_tax
from taxspine.tax.filing import Filer, FilingStatus, TaxYear
from taxspine.tax.schedule1 import AdditionalIncome, Adjustments
from taxspine.tax.spine import (
    Ledger,
    LedgerKey,
    ReturnInput,
    SpineError,
    TaxComputeError,
    YearMismatchError,
    compute_spine,
)
from taxspine.tax.usd import Usd
from taxspine.tax.year_rules import (
    RULES_2024,
    RULES_2025,
    TAX_YEAR_RULES,
    DeductionParams,
    TaxYearRules,
    UnsupportedTaxYearError,
    get_tax_year_rules,
)

__all__ = [
    "AdditionalIncome",
    "Adjustments",
    "DeductionParams",
    "Filer",
    "FilingStatus",
    "Ledger",
    "LedgerKey",
    "RULES_2024",
    "RULES_2025",
    "ReturnInput",
    "SpineError",
    "TAX_YEAR_RULES",
    "TaxComputeError",
    "TaxError",
    "TaxYear",
    "TaxYearRules",
    "UnsupportedTaxYearError",
    "Usd",
    "YearMismatchError",
    "compute_spine",
    "compute_tax",
    "get_tax_year_rules",
]
