from rest_framework import status
from rest_framework.exceptions import APIException


class RecordValidationError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid record."
    default_code = "invalid"


class StoreReadFailed(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Error fetching records."
    default_code = "read_failed"


class StoreWriteFailed(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Error saving record."
    default_code = "write_failed"
