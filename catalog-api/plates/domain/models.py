"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in plates/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import ROUND_DOWN, Decimal

from plates.domain.value_objects import CENT, MONEY_MAX, Money, PlateId, Registration

# Sale price is always purchase price plus 20%.
MARKUP_FACTOR = Decimal("1.20")

# Highest purchase price whose marked-up sale price is still storable.
MAX_PURCHASE_PRICE = (MONEY_MAX / MARKUP_FACTOR).quantize(CENT, rounding=ROUND_DOWN)


@dataclass(frozen=True)
class Plate:
    """Domain representation of a registration plate."""

    id: PlateId
    registration: Registration
    purchase_price: Money
    sale_price: Money
    is_for_sale: bool = True
    letters: str | None = None
    numbers: int | None = None
    created_at: datetime | None = None

    def with_markup(self) -> "Plate":
        return replace(self, sale_price=self.purchase_price * MARKUP_FACTOR)

    def sold(self) -> "Plate":
        return replace(self, is_for_sale=False)

    def to_transfer(self) -> "PlateTransfer":
        return PlateTransfer(
            registration=self.registration.value,
            purchase_price=self.purchase_price.amount,
            sale_price=self.sale_price.amount,
            is_for_sale=self.is_for_sale,
        )


@dataclass(frozen=True)
class PlateTransfer:
    """Public-facing shape of a Plate.

    Deliberately carries no id, letters or numbers.
    """

    registration: str
    purchase_price: Decimal
    sale_price: Decimal
    is_for_sale: bool = True
