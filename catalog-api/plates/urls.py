from django.urls import path

from plates.handlers import ApplyMarkupView, MarkAsSoldView, PlateListView

urlpatterns = [
    path("plates", PlateListView.as_view(), name="plate-list"),
    path("plates/ApplyMarkup", ApplyMarkupView.as_view(), name="plate-apply-markup"),
    path(
        "plates/MarkAsSold/<str:plate_id>",
        MarkAsSoldView.as_view(),
        name="plate-mark-as-sold",
    ),
]
