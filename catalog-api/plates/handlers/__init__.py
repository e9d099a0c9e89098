from plates.handlers.views import ApplyMarkupView, MarkAsSoldView, PlateListView

__all__ = ["PlateListView", "MarkAsSoldView", "ApplyMarkupView"]
