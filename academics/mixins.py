import logging

from django.db import DatabaseError
from rest_framework.decorators import action
from rest_framework.permissions import SAFE_METHODS
from rest_framework.response import Response

from schoolrecords.exceptions import StoreReadFailed, StoreWriteFailed

from .exports import build_workbook, xlsx_response

logger = logging.getLogger(__name__)


class StoreErrorMixin:
    """Turn database failures into typed 503s instead of bare 500s."""

    def handle_exception(self, exc):
        if isinstance(exc, DatabaseError):
            logger.error(
                "Store error on %s %s", self.request.method, self.request.path, exc_info=exc
            )
            if self.request.method in SAFE_METHODS:
                exc = StoreReadFailed()
            else:
                exc = StoreWriteFailed()
        return super().handle_exception(exc)


class ListExportMixin:
    """
    Shared list + ``export/`` for the record screens.

    Both go through ``get_rows`` so the spreadsheet holds exactly the rows
    the list shows, in the same order.
    """
    export_columns = ()
    export_filename = "export.xlsx"
    export_sheet = "Sheet1"

    def order_rows(self, rows):
        return rows

    def get_rows(self):
        return self.order_rows(list(self.filter_queryset(self.get_queryset())))

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_rows(), many=True)
        return Response(serializer.data)

    @action(detail=False, methods=["get"], url_path="export")
    def export(self, request):
        data = self.get_serializer(self.get_rows(), many=True).data
        columns = self.export_columns or (list(data[0].keys()) if data else [])
        content = build_workbook(data, columns, sheet_name=self.export_sheet)
        return xlsx_response(content, self.export_filename)
