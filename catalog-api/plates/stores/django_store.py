"""Django ORM implementation of the PlateStore."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import InvalidOperation
from functools import wraps

from django.db import DatabaseError, transaction
from django.db.models import QuerySet, Value
from django.db.models.functions import StrIndex

from plates import models
from plates.domain import Money, Plate, PlateId, PlateQuery, Registration, SortDirection
from plates.domain.errors import PlateStoreError
from plates.stores.interfaces import PlateStore

_TIEBREAKERS = ("created_at", "id")

# LIMIT and OFFSET are signed 64-bit on every supported backend.
_MAX_ROW_INDEX = 2**63 - 1


def _translate_errors(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (DatabaseError, InvalidOperation, ValueError) as exc:
            raise PlateStoreError(method.__name__) from exc

    return wrapper


def _to_domain(row: models.Plate) -> Plate:
    return Plate(
        id=PlateId(row.id),
        registration=Registration(row.registration),
        purchase_price=Money(row.purchase_price),
        sale_price=Money(row.sale_price),
        is_for_sale=row.is_for_sale,
        letters=row.letters,
        numbers=row.numbers,
        created_at=row.created_at,
    )


class DjangoPlateStore(PlateStore):
    """Relational plate store using Django ORM."""

    @_translate_errors
    def query(self, query: PlateQuery) -> list[Plate]:
        qs = self._filtered(models.Plate.objects.all(), query)
        qs = self._sorted(qs, query.sort)
        if query.offset >= _MAX_ROW_INDEX:
            return []
        end = min(query.offset + query.limit, _MAX_ROW_INDEX)
        rows = qs[query.offset : end]
        return [_to_domain(row) for row in rows]

    @_translate_errors
    def insert(self, plate: Plate) -> Plate:
        with transaction.atomic():
            row = models.Plate.objects.create(
                id=plate.id.value,
                registration=plate.registration.value,
                purchase_price=plate.purchase_price.amount,
                sale_price=plate.sale_price.amount,
                is_for_sale=plate.is_for_sale,
                letters=plate.letters,
                numbers=plate.numbers,
            )
            # Re-read so callers see what the database normalized.
            row.refresh_from_db()
            return _to_domain(row)

    @_translate_errors
    def fetch_all(self) -> list[Plate]:
        return [_to_domain(row) for row in models.Plate.objects.order_by(*_TIEBREAKERS)]

    @_translate_errors
    def fetch_by_id(self, plate_id: PlateId) -> Plate | None:
        row = models.Plate.objects.filter(id=plate_id.value).first()
        return _to_domain(row) if row is not None else None

    @_translate_errors
    def update(self, plate: Plate) -> Plate:
        updated = models.Plate.objects.filter(id=plate.id.value).update(
            registration=plate.registration.value,
            purchase_price=plate.purchase_price.amount,
            sale_price=plate.sale_price.amount,
            is_for_sale=plate.is_for_sale,
            letters=plate.letters,
            numbers=plate.numbers,
        )
        if updated == 0:
            raise PlateStoreError("update")
        return plate

    @contextmanager
    def atomic(self) -> Iterator[None]:
        try:
            with transaction.atomic():
                yield
        except DatabaseError as exc:
            raise PlateStoreError("atomic") from exc

    @staticmethod
    def _filtered(qs: QuerySet, query: PlateQuery) -> QuerySet:
        if query.is_for_sale is not None:
            qs = qs.filter(is_for_sale=query.is_for_sale)
        if query.registration_contains:
            # __contains is case-insensitive on SQLite; instr/strpos are not.
            qs = qs.annotate(
                match_at=StrIndex("registration", Value(query.registration_contains))
            ).filter(match_at__gt=0)
        return qs

    @staticmethod
    def _sorted(qs: QuerySet, sort: SortDirection | None) -> QuerySet:
        if sort is SortDirection.ASC:
            return qs.order_by("sale_price", *_TIEBREAKERS)
        if sort is SortDirection.DESC:
            return qs.order_by("-sale_price", *_TIEBREAKERS)
        return qs.order_by(*_TIEBREAKERS)
