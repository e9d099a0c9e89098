"""Serializers for transforming transfer objects to and from API payloads."""

from rest_framework import serializers

from plates.domain import MAX_PURCHASE_PRICE, PlateTransfer
from plates.domain.value_objects import MONEY_MAX, MONEY_MAX_DIGITS, REGISTRATION_MAX_LENGTH


class PlateTransferSerializer(serializers.Serializer):
    """Serializer for the PlateTransfer shape."""

    registration = serializers.CharField(max_length=REGISTRATION_MAX_LENGTH)
    purchasePrice = serializers.DecimalField(
        source="purchase_price",
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=2,
        min_value=0,
        max_value=MAX_PURCHASE_PRICE,
    )
    salePrice = serializers.DecimalField(
        source="sale_price",
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=2,
        min_value=0,
        max_value=MONEY_MAX,
    )
    isForSale = serializers.BooleanField(source="is_for_sale", default=True)

    def create(self, validated_data: dict) -> PlateTransfer:
        return PlateTransfer(**validated_data)


class PlateListParamsSerializer(serializers.Serializer):
    """Query parameters accepted by GET /plates."""

    pageNumber = serializers.IntegerField(min_value=1, default=1)
    pageSize = serializers.IntegerField(min_value=1, required=False)
    sortOrder = serializers.CharField(required=False, allow_blank=True, default=None)
    filterString = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, default=None
    )
    isForSale = serializers.BooleanField(required=False, allow_null=True, default=None)
