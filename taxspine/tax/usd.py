"""Exact US dollar amounts with IRS rounding rules.

Amounts are stored as an integer count of cents so every addition,
subtraction and integer multiplication is exact. Rounding to whole dollars
is always explicit:

- ``round_up``: toward positive infinity.
- ``round_down``: toward negative infinity (-$1.50 becomes -$2.00).
- ``irs_round``: nearest dollar on the absolute value, 50 cents rounds away
  from zero, sign reapplied. This is the form amounts take on the return.

Overflow is not checked; no tax return approaches the range where it would
matter.

Example:
    >>> income = Usd.from_dollars(50_000)
    >>> str(income - Usd.from_dollars(15_750))
    '$34250.00'
    >>> Usd.from_cents(1_050).irs_round() == Usd.from_dollars(11)
    True
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import ClassVar

CENTS_PER_DOLLAR = 100


@dataclass(frozen=True, order=True)
class Usd:
    """US dollar amount held as whole cents.

    Attributes:
        cents: Total value in cents.
    """

    cents: int = 0

    ZERO: ClassVar[Usd]

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int):
            raise TypeError(f"Usd cents must be an int, got {type(self.cents).__name__}")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_dollars(cls, dollars: int) -> Usd:
        """Create an amount from whole dollars."""
        return cls(dollars * CENTS_PER_DOLLAR)

    @classmethod
    def from_cents(cls, cents: int) -> Usd:
        """Create an amount from a cent count."""
        return cls(cents)

    @classmethod
    def from_decimal(cls, amount: Decimal) -> Usd:
        """Create an amount from a decimal dollar value.

        Fractions of a cent are rounded half-up, which only matters for
        values that arrive from outside the calculator.

        Raises:
            ValueError: If the value is not finite or has more digits than
                the decimal context can quantize.
        """
        try:
            cents = (Decimal(amount) * CENTS_PER_DOLLAR).quantize(
                Decimal("1"), rounding=ROUND_HALF_UP
            )
        except InvalidOperation as exc:
            raise ValueError(f"Cannot convert {amount} to cents") from exc
        return cls(int(cents))

    @classmethod
    def total(cls, amounts: Iterable[Usd]) -> Usd:
        """Sum a sequence of amounts. An empty sequence sums to zero."""
        result = cls.ZERO
        for amount in amounts:
            result = result + amount
        return result

    def to_decimal(self) -> Decimal:
        """Return the dollar value as a two-place Decimal."""
        return Decimal(self.cents).scaleb(-2)

    # -------------------------------------------------------------------------
    # Rounding
    # -------------------------------------------------------------------------

    def round_up(self) -> Usd:
        """Round toward positive infinity to the nearest whole dollar."""
        remainder = self.cents % CENTS_PER_DOLLAR
        if remainder == 0:
            return self
        return Usd(self.cents + (CENTS_PER_DOLLAR - remainder))

    def round_down(self) -> Usd:
        """Round toward negative infinity to the nearest whole dollar."""
        return Usd(self.cents - self.cents % CENTS_PER_DOLLAR)

    def irs_round(self) -> Usd:
        """Round to the nearest whole dollar using the IRS method.

        Amounts under 50 cents are dropped and 50 cents or more go up to the
        next dollar. The rule applies to the absolute value, so negative
        amounts round away from zero.
        """
        magnitude = abs(self.cents)
        remainder = magnitude % CENTS_PER_DOLLAR
        if remainder >= 50:
            rounded = magnitude + (CENTS_PER_DOLLAR - remainder)
        else:
            rounded = magnitude - remainder
        return Usd(-rounded if self.cents < 0 else rounded)

    def whole_dollars(self) -> int:
        """Return the amount in whole dollars.

        Raises:
            ValueError: If the amount still carries cents.
        """
        dollars, remainder = divmod(self.cents, CENTS_PER_DOLLAR)
        if remainder:
            raise ValueError(f"{self} is not a whole-dollar amount")
        return dollars

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> Usd:
        if not isinstance(other, Usd):
            return NotImplemented
        return Usd(self.cents + other.cents)

    def __radd__(self, other: object) -> Usd:
        # Lets builtin sum() start from its integer 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Usd:
        if not isinstance(other, Usd):
            return NotImplemented
        return Usd(self.cents - other.cents)

    def __neg__(self) -> Usd:
        return Usd(-self.cents)

    def __mul__(self, scalar: object) -> Usd:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        return Usd(self.cents * scalar)

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return self.cents != 0

    def __str__(self) -> str:
        sign = "-" if self.cents < 0 else ""
        dollars, cents = divmod(abs(self.cents), CENTS_PER_DOLLAR)
        return f"{sign}${dollars}.{cents:02d}"


Usd.ZERO = Usd(0)
