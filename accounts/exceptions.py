from rest_framework import status
from rest_framework.exceptions import APIException


class CannotBlockSelf(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "You cannot block yourself"
    default_code = "self_block"
