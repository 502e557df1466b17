"""Tax year, filing status and filer qualification types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class TaxYear(IntEnum):
    """Tax years with published rules and brackets."""

    Y2024 = 2024
    Y2025 = 2025

    def __str__(self) -> str:
        return str(self.value)


class FilingStatus(str, Enum):
    """IRS filing status for Form 1040."""

    SINGLE = "single"
    MARRIED_FILING_JOINTLY = "mfj"
    MARRIED_FILING_SEPARATELY = "mfs"
    HEAD_OF_HOUSEHOLD = "hoh"
    QUALIFYING_SURVIVING_SPOUSE = "qss"

    @property
    def is_unmarried(self) -> bool:
        """Whether the unmarried additional-deduction rate applies."""
        return self in (FilingStatus.SINGLE, FilingStatus.HEAD_OF_HOUSEHOLD)


@dataclass(frozen=True)
class Filer:
    """A taxpayer or spouse for the age and blindness boxes.

    Attributes:
        is_65_or_older: Born before January 2 of the year 65 years earlier.
        is_blind: Legally blind at the end of the tax year.
    """

    is_65_or_older: bool = False
    is_blind: bool = False

    @property
    def checked_boxes(self) -> int:
        """Number of boxes (0, 1 or 2) that add to the standard deduction."""
        return int(self.is_65_or_older) + int(self.is_blind)
