"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from plates.domain.errors import DomainError, ErrorCode
from plates.handlers.serializers import PlateListParamsSerializer, PlateTransferSerializer
from plates.services import PlateService
from plates.stores import DjangoPlateStore

_STATUS_BY_CODE = {
    ErrorCode.INVALID_PLATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PLATE_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STORE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_plate_service() -> PlateService:
    return PlateService(DjangoPlateStore())


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=_STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


class PlateListView(APIView):
    """Handler for GET and POST /api/plates"""

    def get(self, request: Request) -> Response:
        params = PlateListParamsSerializer(data=request.query_params)
        if not params.is_valid():
            return Response(params.errors, status=status.HTTP_400_BAD_REQUEST)
        data = params.validated_data
        try:
            plates = get_plate_service().list_plates(
                data["pageNumber"],
                data.get("pageSize", settings.PLATES_DEFAULT_PAGE_SIZE),
                sort_order=data["sortOrder"],
                filter_string=data["filterString"],
                is_for_sale=data["isForSale"],
            )
        except DomainError as error:
            return error_response(error)
        return Response(PlateTransferSerializer(plates, many=True).data)

    def post(self, request: Request) -> Response:
        if not request.data:
            return Response(
                {"code": ErrorCode.INVALID_PLATE.value, "message": "Plate data is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        serializer = PlateTransferSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        try:
            created = get_plate_service().add_plate(serializer.save())
        except DomainError as error:
            return error_response(error)
        return Response(PlateTransferSerializer(created).data, status=status.HTTP_201_CREATED)


class MarkAsSoldView(APIView):
    """Handler for PUT /api/plates/MarkAsSold/{plate_id}"""

    def put(self, request: Request, plate_id: str) -> Response:
        try:
            found = get_plate_service().mark_as_sold(plate_id)
        except DomainError as error:
            return error_response(error)
        if not found:
            return Response(
                {"code": "PLATE_NOT_FOUND", "message": "Plate not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)


class ApplyMarkupView(APIView):
    """Handler for POST /api/plates/ApplyMarkup"""

    def post(self, request: Request) -> Response:
        try:
            plates = get_plate_service().apply_markup()
        except DomainError as error:
            return error_response(error)
        return Response(PlateTransferSerializer(plates, many=True).data)
