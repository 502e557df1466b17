"""Tests for the cents-backed Usd amount and its rounding rules."""

from decimal import Decimal

import pytest

from taxspine.tax.usd import Usd


class TestConstruction:
    """Tests for building amounts and reading them back."""

    def test_from_dollars(self) -> None:
        """Whole dollars are stored as cents."""
        assert Usd.from_dollars(42).cents == 4200
        assert Usd.from_dollars(-5).cents == -500
        assert Usd.from_dollars(0).cents == 0

    def test_from_cents(self) -> None:
        """Cent counts are stored unchanged."""
        assert Usd.from_cents(4200).cents == 4200
        assert Usd.from_cents(-1).cents == -1

    def test_default_is_zero(self) -> None:
        """A bare Usd is zero."""
        assert Usd() == Usd.ZERO

    def test_rejects_non_integer_cents(self) -> None:
        """Floats never become amounts."""
        with pytest.raises(TypeError):
            Usd(10.5)  # type: ignore[arg-type]

    def test_from_decimal_rounds_half_up_to_cents(self) -> None:
        """Decimal dollars convert to cents, fractions rounded half-up."""
        assert Usd.from_decimal(Decimal("123.45")) == Usd.from_cents(12345)
        assert Usd.from_decimal(Decimal("0.005")) == Usd.from_cents(1)
        assert Usd.from_decimal(Decimal("50000")) == Usd.from_dollars(50_000)

    @pytest.mark.parametrize("amount", ["1E+30", "Infinity", "NaN"])
    def test_from_decimal_rejects_unrepresentable(self, amount: str) -> None:
        """Values the decimal context cannot quantize raise ValueError."""
        with pytest.raises(ValueError):
            Usd.from_decimal(Decimal(amount))

    def test_to_decimal(self) -> None:
        """Amounts convert back to two-place decimals."""
        assert Usd.from_cents(1050).to_decimal() == Decimal("10.50")
        assert Usd.from_cents(-5).to_decimal() == Decimal("-0.05")


class TestArithmetic:
    """Tests for exact integer arithmetic."""

    def test_add_and_sub(self) -> None:
        """Addition and subtraction work on cents."""
        a = Usd.from_dollars(10)
        b = Usd.from_cents(550)
        assert a + b == Usd.from_cents(1550)
        assert a - b == Usd.from_cents(450)

    def test_neg(self) -> None:
        """Negation flips the sign."""
        assert -Usd.from_dollars(5) == Usd.from_dollars(-5)
        assert -Usd.from_dollars(-3) == Usd.from_dollars(3)
        assert -Usd.ZERO == Usd.ZERO

    def test_mul_by_int(self) -> None:
        """Multiplying by an integer scalar works from either side."""
        assert Usd.from_dollars(5) * 3 == Usd.from_dollars(15)
        assert 2 * Usd.from_cents(33) == Usd.from_cents(66)

    @pytest.mark.parametrize("scalar", [1.5, Decimal("2"), True])
    def test_mul_rejects_non_int(self, scalar: object) -> None:
        """Only integer scalars are allowed."""
        with pytest.raises(TypeError):
            Usd.from_dollars(5) * scalar  # type: ignore[operator]

    def test_add_rejects_plain_numbers(self) -> None:
        """Mixing Usd with bare numbers is an error."""
        with pytest.raises(TypeError):
            Usd.from_dollars(1) + 1  # type: ignore[operator]

    def test_total(self) -> None:
        """Usd.total sums a sequence."""
        amounts = [Usd.from_dollars(100), Usd.from_dollars(200), Usd.from_cents(50)]
        assert Usd.total(amounts) == Usd.from_cents(30_050)

    def test_total_empty(self) -> None:
        """An empty sequence sums to zero."""
        assert Usd.total([]) == Usd.ZERO

    def test_builtin_sum(self) -> None:
        """Builtin sum works starting from 0."""
        assert sum([Usd.from_dollars(1), Usd.from_dollars(2)]) == Usd.from_dollars(3)

    def test_ordering(self) -> None:
        """Amounts order by value and work with min/max."""
        assert Usd.from_dollars(10) > Usd.from_dollars(5)
        assert Usd.from_cents(-1) < Usd.ZERO
        assert max(Usd.from_cents(-1), Usd.ZERO) == Usd.ZERO

    def test_hashable(self) -> None:
        """Equal amounts hash equally."""
        assert {Usd.from_dollars(1), Usd.from_cents(100)} == {Usd.from_dollars(1)}


class TestRounding:
    """Tests for whole-dollar rounding rules."""

    @pytest.mark.parametrize(
        ("cents", "expected_dollars"),
        [(100, 1), (101, 2), (199, 2), (1, 1), (0, 0), (150, 2)],
    )
    def test_round_up_positive(self, cents: int, expected_dollars: int) -> None:
        """Any positive remainder advances to the next dollar."""
        assert Usd.from_cents(cents).round_up() == Usd.from_dollars(expected_dollars)

    @pytest.mark.parametrize(
        ("cents", "expected_dollars"),
        [(-100, -1), (-101, -1), (-199, -1), (-1, 0), (-150, -1)],
    )
    def test_round_up_negative(self, cents: int, expected_dollars: int) -> None:
        """Negative amounts round up toward zero."""
        assert Usd.from_cents(cents).round_up() == Usd.from_dollars(expected_dollars)

    @pytest.mark.parametrize(
        ("cents", "expected_dollars"),
        [(100, 1), (101, 1), (199, 1), (1, 0), (0, 0)],
    )
    def test_round_down_positive(self, cents: int, expected_dollars: int) -> None:
        """Positive remainders are dropped."""
        assert Usd.from_cents(cents).round_down() == Usd.from_dollars(expected_dollars)

    @pytest.mark.parametrize(
        ("cents", "expected_dollars"),
        [(-100, -1), (-101, -2), (-199, -2), (-1, -1), (-150, -2)],
    )
    def test_round_down_negative(self, cents: int, expected_dollars: int) -> None:
        """Negative amounts move further negative."""
        assert Usd.from_cents(cents).round_down() == Usd.from_dollars(expected_dollars)

    @pytest.mark.parametrize(
        ("cents", "expected_dollars"),
        [(149, 1), (150, 2), (151, 2), (100, 1), (199, 2), (0, 0), (49, 0), (50, 1)],
    )
    def test_irs_round_positive(self, cents: int, expected_dollars: int) -> None:
        """Under 50 cents drops, 50 cents or more rounds up."""
        assert Usd.from_cents(cents).irs_round() == Usd.from_dollars(expected_dollars)

    @pytest.mark.parametrize(
        ("cents", "expected_dollars"),
        [(-149, -1), (-150, -2), (-151, -2), (-100, -1), (-199, -2), (-50, -1)],
    )
    def test_irs_round_negative(self, cents: int, expected_dollars: int) -> None:
        """Negative amounts round on the absolute value, away from zero."""
        assert Usd.from_cents(cents).irs_round() == Usd.from_dollars(expected_dollars)

    @pytest.mark.parametrize("cents", [-12_351, -150, -1, 0, 1, 49, 50, 99, 12_350, 987_654])
    def test_irs_round_is_idempotent(self, cents: int) -> None:
        """Rounding an already-rounded amount changes nothing."""
        once = Usd.from_cents(cents).irs_round()
        assert once.irs_round() == once

    def test_whole_dollars(self) -> None:
        """Whole-dollar amounts convert to int dollars."""
        assert Usd.from_cents(1_050).irs_round().whole_dollars() == 11
        assert Usd.from_dollars(-3).whole_dollars() == -3

    def test_whole_dollars_rejects_cents(self) -> None:
        """Amounts that still carry cents cannot be read as dollars."""
        with pytest.raises(ValueError, match="not a whole-dollar"):
            Usd.from_cents(1_050).whole_dollars()


class TestDisplay:
    """Tests for string rendering."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Usd.from_cents(1050), "$10.50"),
            (Usd.from_cents(5), "$0.05"),
            (Usd.from_dollars(100), "$100.00"),
            (Usd.from_cents(-1050), "-$10.50"),
            (Usd.from_cents(-5), "-$0.05"),
            (Usd.ZERO, "$0.00"),
        ],
    )
    def test_str(self, amount: Usd, expected: str) -> None:
        """Amounts render as [-]$D.CC."""
        assert str(amount) == expected
