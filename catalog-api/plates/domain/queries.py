"""Declarative plate query handed from the service to a store."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class SortDirection(Enum):
    """Sale price ordering."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_param(cls, value: str | None) -> Self | None:
        """Return the direction for ``"asc"``/``"desc"``, None for anything else."""
        for direction in cls:
            if direction.value == value:
                return direction
        return None


@dataclass(frozen=True)
class PlateQuery:
    """Filter, sort and page window applied in that order."""

    offset: int
    limit: int
    is_for_sale: bool | None = None
    registration_contains: str | None = None
    sort: SortDirection | None = None

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("Offset cannot be negative")
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")

    @classmethod
    def page(
        cls,
        page_number: int,
        page_size: int,
        *,
        is_for_sale: bool | None = None,
        registration_contains: str | None = None,
        sort: SortDirection | None = None,
    ) -> Self:
        return cls(
            offset=(page_number - 1) * page_size,
            limit=page_size,
            is_for_sale=is_for_sale,
            registration_contains=registration_contains or None,
            sort=sort,
        )
