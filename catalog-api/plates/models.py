"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from plates.domain.models import MAX_PURCHASE_PRICE
from plates.domain.value_objects import MONEY_MAX_DIGITS, REGISTRATION_MAX_LENGTH


class Plate(models.Model):
    """Persistence model for registration plates."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    registration = models.CharField(max_length=REGISTRATION_MAX_LENGTH)
    purchase_price = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(MAX_PURCHASE_PRICE)],
    )
    sale_price = models.DecimalField(
        max_digits=MONEY_MAX_DIGITS, decimal_places=2, validators=[MinValueValidator(0)]
    )
    letters = models.CharField(max_length=REGISTRATION_MAX_LENGTH, blank=True, null=True)
    numbers = models.IntegerField(blank=True, null=True)
    is_for_sale = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["created_at"], name="plates_created_at_idx"),
            models.Index(fields=["is_for_sale", "sale_price"], name="plates_for_sale_price_idx"),
        ]

    def __str__(self) -> str:
        return self.registration
