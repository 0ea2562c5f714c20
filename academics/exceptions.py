from rest_framework import status
from rest_framework.exceptions import APIException

from schoolrecords.exceptions import RecordValidationError, StoreReadFailed, StoreWriteFailed

__all__ = [
    "RecordValidationError",
    "StoreReadFailed",
    "StoreWriteFailed",
    "DuplicateLearner",
    "NotEligible",
    "PromotionFailed",
]


class DuplicateLearner(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "This LRN already exists in the database. Please use a unique LRN."
    default_code = "duplicate_lrn"


class NotEligible(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = (
        "Cannot promote: Student does not have grades for all 4 quarters "
        "in their current grade level."
    )
    default_code = "missing_quarters"


class PromotionFailed(StoreWriteFailed):
    """Record update and advisory insert were rolled back together."""
    default_detail = "Promotion failed; no changes were saved."
    default_code = "promotion_failed"
