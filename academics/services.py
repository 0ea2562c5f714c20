from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from django.db import DatabaseError, IntegrityError, transaction

from .constants import (
    ADMISSION_REQUIRED_FIELDS,
    REASON_FETCH_FAILED,
    REASON_MISSING_QUARTERS,
    REQUIRED_QUARTERS,
)
from .exceptions import (
    DuplicateLearner,
    NotEligible,
    PromotionFailed,
    RecordValidationError,
    StoreReadFailed,
    StoreWriteFailed,
)
from .models import AdvisoryRecord, GradeEntry, StudentRecord

logger = logging.getLogger(__name__)


@dataclass
class Eligibility:
    eligible: bool
    reason: Optional[str] = None
    missing: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict:
        return {"eligible": self.eligible, "reason": self.reason, "missing": self.missing}


def quarters_on_record(lrn: str, grade_level: str) -> set:
    return set(
        GradeEntry.objects.filter(lrn=lrn, grade_level=grade_level).values_list("quarter", flat=True)
    )


def check_promotion_eligibility(student: StudentRecord) -> Eligibility:
    """
    A student may leave their current grade level only once grades exist for
    all four quarters of it. Extra or repeated entries do not matter.
    """
    try:
        present = quarters_on_record(student.lrn, student.grade_level)
    except DatabaseError:
        logger.exception("Error fetching grades for promotion check (lrn=%s)", student.lrn)
        return Eligibility(False, REASON_FETCH_FAILED)

    missing = [q for q in REQUIRED_QUARTERS if q not in present]
    if missing:
        return Eligibility(False, REASON_MISSING_QUARTERS, missing)
    return Eligibility(True)


def _update_student(lrn: str, patch: Mapping) -> int:
    return StudentRecord.objects.filter(lrn=lrn).update(**patch)


def _append_advisory(*, lrn: str, grade: str, section: str, adviser: str, school_year: str) -> AdvisoryRecord:
    return AdvisoryRecord.objects.create(
        lrn=lrn, grade=grade, section=section, adviser=adviser or "", school_year=school_year
    )


def promote_student(
    student: StudentRecord,
    *,
    grade_level: str,
    section: str,
    school_year: str,
    adviser: str = "",
) -> AdvisoryRecord:
    eligibility = check_promotion_eligibility(student)
    if not eligibility.eligible:
        if eligibility.reason == REASON_FETCH_FAILED:
            raise StoreReadFailed("Error fetching grades for promotion check.")
        raise NotEligible()

    lrn = student.lrn
    # record update and lineage row land together or not at all
    with transaction.atomic():
        try:
            updated = _update_student(
                lrn, {"grade_level": grade_level, "section": section, "school_year": school_year}
            )
        except DatabaseError:
            logger.exception("Error updating student record %s", lrn)
            raise StoreWriteFailed("Error updating student record.")
        if not updated:
            raise StoreWriteFailed(f"No student record with LRN {lrn}.")

        try:
            advisory = _append_advisory(
                lrn=lrn, grade=grade_level, section=section, adviser=adviser, school_year=school_year
            )
        except DatabaseError:
            logger.exception("Error inserting advisory data for %s; student update rolled back", lrn)
            raise PromotionFailed("Error inserting advisory data; the promotion was not saved.")

    logger.info("promoted %s to %s / %s (%s)", lrn, grade_level, section, school_year)
    return advisory


def validate_admission(data: Mapping) -> None:
    for name in ADMISSION_REQUIRED_FIELDS:
        value = data.get(name)
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise RecordValidationError(f"{name.replace('_', ' ')} is required")


def lrn_exists(lrn: str) -> bool:
    try:
        return StudentRecord.objects.filter(lrn=lrn).exists()
    except DatabaseError:
        logger.exception("Error checking for duplicate LRN %s", lrn)
        raise StoreReadFailed("Could not verify that the LRN is unique.")


def admit_student(data: Mapping) -> StudentRecord:
    """
    Insert a new student plus its first advisory row.

    The existence check runs first so the common duplicate case never reaches
    the insert; the unique index on ``lrn`` catches the concurrent case.
    """
    validate_admission(data)
    lrn = data["lrn"].strip()
    if lrn_exists(lrn):
        raise DuplicateLearner()

    fields = {
        "last_name": data["last_name"],
        "first_name": data["first_name"],
        "middle_name": data.get("middle_name") or "",
        "lrn": lrn,
        "birthdate": data["birthdate"],
        "sex": data.get("sex") or "Male",
        "grade_level": data["grade_level"],
        "section": data["section"],
        "school_year": data["school_year"],
        "adviser": data.get("adviser") or "",
    }
    try:
        with transaction.atomic():
            student = StudentRecord.objects.create(**fields)
            _append_advisory(
                lrn=lrn,
                grade=student.grade_level,
                section=student.section,
                adviser=student.adviser,
                school_year=student.school_year,
            )
    except IntegrityError:
        logger.warning("LRN %s inserted concurrently; admission refused", lrn)
        raise DuplicateLearner()
    except DatabaseError:
        logger.exception("Error inserting student %s", lrn)
        raise StoreWriteFailed("Failed to add student record")

    logger.info("admitted %s into %s / %s", lrn, student.grade_level, student.section)
    return student


def students_for_advisory(grade_level: str, section: str):
    """Students of one advisory class; scope is always passed in explicitly."""
    if not grade_level or not section:
        return StudentRecord.objects.none()
    return StudentRecord.objects.filter(grade_level=grade_level, section=section)


def advisory_history(lrn: str):
    return AdvisoryRecord.objects.filter(lrn=lrn).order_by("created_at", "id")


def grades_for_current_level(student: StudentRecord):
    return GradeEntry.objects.filter(lrn=student.lrn, grade_level=student.grade_level)
