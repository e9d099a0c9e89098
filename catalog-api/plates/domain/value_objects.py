"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self
from uuid import UUID, uuid4

REGISTRATION_MAX_LENGTH = 50

CENT = Decimal("0.01")

# Fifteen significant digits survive every backend, including SQLite REAL.
MONEY_MAX_DIGITS = 15
MONEY_MAX = Decimal("9999999999999.99")


@dataclass(frozen=True)
class PlateId:
    """Unique identifier for a Plate."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Registration:
    """Displayable plate code, e.g. ``ABC123``."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Registration is required")
        if len(self.value) > REGISTRATION_MAX_LENGTH:
            raise ValueError(
                f"Registration cannot exceed {REGISTRATION_MAX_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Currency amount with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation as exc:
                raise ValueError("Money amount must be a decimal number") from exc
        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")
        if self.amount > MONEY_MAX:
            raise ValueError(f"Money amount cannot exceed {MONEY_MAX}")
        if self.amount != self.amount.quantize(CENT):
            raise ValueError("Money amount cannot have fractions of a cent")

    def __mul__(self, factor: Decimal) -> "Money":
        return Money((self.amount * factor).quantize(CENT, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
