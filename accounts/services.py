import logging

from django.db import DatabaseError

from schoolrecords.exceptions import RecordValidationError, StoreReadFailed, StoreWriteFailed

from .models import User

logger = logging.getLogger(__name__)

ACTION_BLOCK = "block"
ACTION_UNBLOCK = "unblock"

TARGET_STATUS = {
    ACTION_BLOCK: User.STATUS_BLOCKED,
    ACTION_UNBLOCK: User.STATUS_ACTIVE,
}


def set_account_status(account_id: int, action: str) -> User:
    """
    Active <-> Blocked transition for one account.

    Only ``status`` is written. Repeating an action is a no-op update, not an
    error. Returns the re-fetched row so callers can patch their list in place.
    """
    target = TARGET_STATUS.get((action or "").strip().lower())
    if target is None:
        raise RecordValidationError('action must be "block" or "unblock"')

    try:
        account = User.objects.get(pk=account_id)
    except DatabaseError:
        logger.exception("Error fetching account %s", account_id)
        raise StoreReadFailed("Could not load the account.")

    if account.status == target:
        logger.info("account %s already %s", account_id, target)

    try:
        User.objects.filter(pk=account_id).update(status=target)
    except DatabaseError:
        logger.exception("Error updating status of account %s", account_id)
        raise StoreWriteFailed("Could not update the account status.")

    account.status = target
    logger.info("%s account %s", "blocked" if target == User.STATUS_BLOCKED else "unblocked", account_id)
    return account


def update_teacher_assignment(teacher: User, grade_level=None, section=None) -> User:
    """Set the advisory class of a teacher; other fields are left alone."""
    patch = {}
    if grade_level is not None:
        patch["grade_level"] = grade_level
    if section is not None:
        patch["section"] = section
    if not patch:
        return teacher

    try:
        User.objects.filter(pk=teacher.pk, role=User.ROLE_TEACHER).update(**patch)
        teacher.refresh_from_db()
    except DatabaseError:
        logger.exception("Error updating teacher %s", teacher.pk)
        raise StoreWriteFailed("Failed to update teacher record.")
    return teacher
