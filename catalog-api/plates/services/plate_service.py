"""Plate service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return transfer objects or domain errors

Store failures are logged here and re-raised unchanged; they are never
turned into an empty or negative result.
"""

import logging

from plates.domain import (
    MAX_PURCHASE_PRICE,
    Money,
    Plate,
    PlateId,
    PlateQuery,
    PlateTransfer,
    Registration,
    SortDirection,
)
from plates.domain.errors import (
    InvalidPageError,
    InvalidPlateError,
    InvalidPlateIdError,
    PlateStoreError,
)
from plates.stores.interfaces import PlateStore

logger = logging.getLogger(__name__)


class PlateService:
    """Service for plate catalog operations."""

    def __init__(self, store: PlateStore) -> None:
        self._store = store

    def list_plates(
        self,
        page_number: int,
        page_size: int,
        sort_order: str | None = None,
        filter_string: str | None = None,
        is_for_sale: bool | None = None,
    ) -> list[PlateTransfer]:
        """Return one page of plates.

        Plates are filtered by ``is_for_sale`` and by case-sensitive
        substring ``filter_string`` on the registration, then sorted by
        sale price when ``sort_order`` is ``"asc"`` or ``"desc"``, then
        paged. A page past the end is empty.

        Raises:
            InvalidPageError: If page_number or page_size is below 1.
            PlateStoreError: If the store fails.
        """
        if page_number < 1 or page_size < 1:
            raise InvalidPageError()

        query = PlateQuery.page(
            page_number,
            page_size,
            is_for_sale=is_for_sale,
            registration_contains=filter_string,
            sort=SortDirection.from_param(sort_order),
        )
        try:
            plates = self._store.query(query)
        except PlateStoreError:
            logger.exception("Error occurred while fetching plates (query=%s).", query)
            raise
        return [plate.to_transfer() for plate in plates]

    def add_plate(self, transfer: PlateTransfer | None) -> PlateTransfer:
        """Create a plate and return the transfer view of what was stored.

        Raises:
            InvalidPlateError: If the input is missing or invalid.
            PlateStoreError: If the store fails.
        """
        plate = self._new_plate(transfer)
        try:
            committed = self._store.insert(plate)
        except PlateStoreError:
            logger.exception(
                "An error occurred while adding plate %s (%s).",
                plate.id,
                plate.registration,
            )
            raise
        logger.info("Added plate %s (%s).", committed.id, committed.registration)
        return committed.to_transfer()

    def apply_markup(self) -> list[PlateTransfer]:
        """Set every plate's sale price to its purchase price plus 20%.

        All writes happen in one store transaction, so a failure leaves
        every plate as it was.

        Raises:
            PlateStoreError: If the store fails.
        """
        written: list[PlateId] = []
        stage = "fetch"
        try:
            with self._store.atomic():
                marked_up = [plate.with_markup() for plate in self._store.fetch_all()]
                for plate in marked_up:
                    stage = f"plate {plate.id}"
                    self._store.update(plate)
                    written.append(plate.id)
                stage = "commit"
        except PlateStoreError:
            logger.exception(
                "An error occurred while applying markup to plates; "
                "%d update(s) rolled back, failed at %s.",
                len(written),
                stage,
            )
            raise
        logger.info("Applied markup to %d plate(s).", len(marked_up))
        return [plate.to_transfer() for plate in marked_up]

    def mark_as_sold(self, plate_id: str | PlateId) -> bool:
        """Flag a plate as no longer for sale.

        Returns False when no plate has the given ID.

        Raises:
            InvalidPlateIdError: If plate_id is not a valid UUID.
            PlateStoreError: If the store fails.
        """
        plate_id = self._parse_id(plate_id)
        try:
            plate = self._store.fetch_by_id(plate_id)
            if plate is None:
                logger.warning(
                    "Attempted to mark a plate as sold, but the plate with ID %s was not found.",
                    plate_id,
                )
                return False
            self._store.update(plate.sold())
        except PlateStoreError:
            logger.exception("An error occurred while marking plate %s as sold.", plate_id)
            raise
        return True

    @staticmethod
    def _parse_id(plate_id: str | PlateId) -> PlateId:
        if isinstance(plate_id, PlateId):
            return plate_id
        try:
            return PlateId.from_string(str(plate_id))
        except ValueError as exc:
            raise InvalidPlateIdError() from exc

    @staticmethod
    def _new_plate(transfer: PlateTransfer | None) -> Plate:
        if transfer is None:
            raise InvalidPlateError()
        try:
            plate = Plate(
                id=PlateId.new(),
                registration=Registration(transfer.registration),
                purchase_price=Money(transfer.purchase_price),
                sale_price=Money(transfer.sale_price),
                is_for_sale=transfer.is_for_sale,
            )
        except (TypeError, ValueError) as exc:
            raise InvalidPlateError(str(exc)) from exc
        if plate.purchase_price.amount > MAX_PURCHASE_PRICE:
            raise InvalidPlateError(f"Purchase price cannot exceed {MAX_PURCHASE_PRICE}")
        return plate
