from plates.domain.models import MARKUP_FACTOR, MAX_PURCHASE_PRICE, Plate, PlateTransfer
from plates.domain.queries import PlateQuery, SortDirection
from plates.domain.value_objects import Money, PlateId, Registration

__all__ = [
    "Plate",
    "PlateTransfer",
    "PlateId",
    "Registration",
    "Money",
    "PlateQuery",
    "SortDirection",
    "MARKUP_FACTOR",
    "MAX_PURCHASE_PRICE",
]
