from django.contrib import admin

from plates.models import Plate


@admin.register(Plate)
class PlateAdmin(admin.ModelAdmin):
    list_display = ["registration", "purchase_price", "sale_price", "is_for_sale", "created_at"]
    list_filter = ["is_for_sale"]
    search_fields = ["registration", "letters"]
    readonly_fields = ["id", "created_at"]
