import io
from datetime import date, datetime
from decimal import Decimal

from django.http import HttpResponse
from openpyxl import Workbook

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _cell(value):
    if value is None or isinstance(value, (str, int, float, Decimal, date, datetime)):
        return value
    return str(value)


def build_workbook(rows, columns, sheet_name="Sheet1") -> bytes:
    """
    One sheet, header row = column keys, then one line per row dict.
    Rows are written in the order given; nothing is filtered here.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    ws.append(list(columns))
    for row in rows:
        ws.append([_cell(row.get(col)) for col in columns])

    bio = io.BytesIO()
    wb.save(bio)
    wb.close()
    return bio.getvalue()


def xlsx_response(content: bytes, filename: str) -> HttpResponse:
    resp = HttpResponse(content, content_type=XLSX_CONTENT_TYPE)
    resp["Content-Disposition"] = f'attachment; filename="{filename}"'
    return resp
