import datetime

import pytest
from rest_framework.test import APIClient

from academics.constants import REQUIRED_QUARTERS
from academics.models import GradeEntry, StudentRecord
from accounts.models import User

LRN = "123456789012"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        "admin@school.edu", "adminpass123", name="Registrar Admin", role=User.ROLE_ADMIN
    )


@pytest.fixture
def teacher_user(db):
    return User.objects.create_user(
        "teacher@school.edu",
        "teacherpass123",
        name="Ana Reyes",
        role=User.ROLE_TEACHER,
        grade_level="Grade 2",
        section="Section A",
    )


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def teacher_client(api_client, teacher_user):
    api_client.force_authenticate(user=teacher_user)
    return api_client


@pytest.fixture
def make_student(db):
    def _make(**overrides):
        fields = {
            "last_name": "Dela Cruz",
            "first_name": "Juan",
            "middle_name": "",
            "lrn": LRN,
            "birthdate": datetime.date(2017, 6, 1),
            "sex": "Male",
            "grade_level": "Grade 2",
            "section": "Section A",
            "school_year": "2024-2025",
            "adviser": "Ana Reyes",
        }
        fields.update(overrides)
        return StudentRecord.objects.create(**fields)

    return _make


@pytest.fixture
def student(make_student):
    return make_student()


@pytest.fixture
def add_grades(db):
    def _add(lrn, grade_level, quarters=REQUIRED_QUARTERS, subject="Mathematics"):
        return [
            GradeEntry.objects.create(lrn=lrn, grade_level=grade_level, quarter=q, subject=subject, grade=90)
            for q in quarters
        ]

    return _add


@pytest.fixture
def admission_payload():
    return {
        "last_name": "Santos",
        "first_name": "Maria",
        "middle_name": "Lopez",
        "lrn": "987654321098",
        "birthdate": "2018-02-14",
        "sex": "Female",
        "grade_level": "Grade 1",
        "section": "Section C",
        "school_year": "2025-2026",
        "adviser": "Ana Reyes",
    }
