"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from shopcalc.domain.exceptions import ValidationError

CURRENCY = "INR"
CURRENCY_SYMBOL = "₹"

_CENT = Decimal("0.01")
_HUNDRED = Decimal("100")
# Largest power of ten accepted from typed input.
MAX_INPUT_EXPONENT = 12


def parse_decimal(text: str | None) -> Decimal | None:
    """Parse user-typed text into a finite Decimal, or None.

    Mirrors what a numeric text field accepts: surrounding whitespace is
    ignored, blanks and garbage yield None rather than raising. Values of
    10**13 or more are treated as garbage too, so later arithmetic cannot
    overflow the decimal context.
    """
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or value.adjusted() > MAX_INPUT_EXPONENT:
        return None
    return value


def parse_int(text: str | None) -> int | None:
    """Parse user-typed text into an int, or None. Decimals are rejected."""
    if text is None:
        return None
    try:
        return int(str(text).strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Amounts are kept at full
    precision; rounding to paise only happens for display.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def percent(self, rate: Percentage) -> Money:
        """Return ``rate`` percent of this amount."""
        return Money(self.amount * rate.value / _HUNDRED, self.currency)

    # --- Display --------------------------------------------------------------

    def rounded(self) -> Decimal:
        """Amount rounded half-up to two decimal places."""
        return self.amount.quantize(_CENT, rounding=ROUND_HALF_UP)

    def __str__(self) -> str:
        return f"{CURRENCY_SYMBOL}{self.rounded()}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Weight:
    """A positive weight in grams."""

    grams: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.grams, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.grams).__name__}"
            )
        if self.grams <= 0:
            raise ValidationError("Weight must be positive")

    @property
    def kilograms(self) -> Decimal:
        return self.grams / Decimal("1000")

    def __str__(self) -> str:
        return f"{self.grams.normalize():f} g"


@dataclass(frozen=True)
class Percentage:
    """A non-negative percentage such as a discount or tax rate."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Percentage must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(f"Percentage cannot be negative, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value.normalize():f}%"

    @staticmethod
    def of(value: str | int | Decimal) -> Percentage:
        parsed = parse_decimal(str(value))
        if parsed is None:
            raise ValidationError(f"Invalid percentage: {value!r}")
        return Percentage(parsed)

    @staticmethod
    def zero() -> Percentage:
        return Percentage(Decimal("0"))
