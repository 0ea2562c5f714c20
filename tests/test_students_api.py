import io

from django.db import DatabaseError
from django.db.models.query import QuerySet
from openpyxl import load_workbook

from academics import views
from academics.constants import REQUIRED_QUARTERS
from academics.models import AdvisoryRecord, StudentRecord

from .conftest import LRN

PROMOTION = {"grade_level": "Grade 3", "section": "Section B", "school_year": "2025-2026", "adviser": "Jose Rizal"}


def test_admission_endpoint_creates_record(admin_client, admission_payload):
    resp = admin_client.post("/api/students/", admission_payload, format="json")

    assert resp.status_code == 201
    assert resp.data["lrn"] == "987654321098"
    assert AdvisoryRecord.objects.filter(lrn="987654321098").count() == 1


def test_admission_missing_field_is_400(admin_client, admission_payload):
    admission_payload["section"] = ""

    resp = admin_client.post("/api/students/", admission_payload, format="json")

    assert resp.status_code == 400
    assert resp.data["detail"] == "section is required"
    assert StudentRecord.objects.count() == 0


def test_admission_duplicate_lrn_is_409(admin_client, student, admission_payload):
    admission_payload["lrn"] = LRN

    resp = admin_client.post("/api/students/", admission_payload, format="json")

    assert resp.status_code == 409
    assert "already exists" in resp.data["detail"]
    assert StudentRecord.objects.count() == 1


def test_admission_rejects_malformed_school_year(admin_client, admission_payload):
    admission_payload["school_year"] = "next year"

    resp = admin_client.post("/api/students/", admission_payload, format="json")

    assert resp.status_code == 400
    assert "school_year" in resp.data


def test_teacher_sees_only_advisory_class(teacher_client, make_student):
    make_student()
    make_student(lrn="222222222222", last_name="Santos", first_name="Maria", section="Section B")
    make_student(lrn="333333333333", last_name="Bautista", first_name="Pedro", grade_level="Grade 3")

    resp = teacher_client.get("/api/students/")

    assert resp.status_code == 200
    assert [row["lrn"] for row in resp.data] == [LRN]


def test_teacher_without_advisory_class_sees_nothing(teacher_client, teacher_user, student):
    teacher_user.section = ""
    teacher_user.save()

    assert teacher_client.get("/api/students/").data == []


def test_teacher_cannot_promote_outside_class(teacher_client, make_student):
    make_student(lrn="333333333333", grade_level="Grade 5")

    resp = teacher_client.post("/api/students/333333333333/promote/", PROMOTION, format="json")

    assert resp.status_code == 404


def test_list_sorted_by_grade_then_last_name(admin_client, make_student):
    make_student(lrn="1", last_name="Zamora", grade_level="Grade 1")
    make_student(lrn="2", last_name="abad", grade_level="Grade 2")
    make_student(lrn="3", last_name="Bautista", grade_level="Grade 1")
    make_student(lrn="4", last_name="Cruz", grade_level="Grade 2")

    resp = admin_client.get("/api/students/")

    assert [row["lrn"] for row in resp.data] == ["3", "1", "2", "4"]


def test_search_santos_returns_only_santos(admin_client, make_student):
    make_student(lrn="1", last_name="Dela Cruz", first_name="Juan")
    make_student(lrn="2", last_name="Santos", first_name="Maria")

    assert [r["lrn"] for r in admin_client.get("/api/students/", {"search": "santos"}).data] == ["2"]
    assert len(admin_client.get("/api/students/", {"search": ""}).data) == 2


def test_search_spans_last_and_first_name(admin_client, make_student):
    make_student(lrn="1", last_name="Dela Cruz", first_name="Juan")
    make_student(lrn="2", last_name="Santos", first_name="Maria")

    assert [r["lrn"] for r in admin_client.get("/api/students/", {"search": "DELA cruz j"}).data] == ["1"]
    assert admin_client.get("/api/students/", {"search": "reyes"}).data == []


def test_explicit_filters(admin_client, make_student):
    make_student(lrn="1", school_year="2024-2025")
    make_student(lrn="2", school_year="2025-2026")

    resp = admin_client.get("/api/students/", {"school_year": "2025-2026"})

    assert [r["lrn"] for r in resp.data] == ["2"]


def test_student_export_matches_list(admin_client, make_student):
    make_student(lrn="1", last_name="Dela Cruz", first_name="Juan", grade_level="Grade 2")
    make_student(lrn="2", last_name="Santos", first_name="Maria", grade_level="Grade 1")
    make_student(lrn="3", last_name="Santiago", first_name="Jose", grade_level="Grade 3")

    listed = admin_client.get("/api/students/", {"search": "sant"}).data
    resp = admin_client.get("/api/students/export/", {"search": "sant"})

    assert resp["Content-Disposition"] == 'attachment; filename="student_management.xlsx"'
    ws = load_workbook(io.BytesIO(resp.content)).active
    assert ws.title == "Students"
    rows = list(ws.iter_rows(values_only=True))
    assert rows[0][3] == "lrn"
    assert [r[3] for r in rows[1:]] == [row["lrn"] for row in listed] == ["2", "3"]


def test_update_cannot_change_lrn(admin_client, student):
    resp = admin_client.patch(f"/api/students/{LRN}/", {"lrn": "999"}, format="json")

    assert resp.status_code == 400
    assert StudentRecord.objects.filter(lrn=LRN).exists()


def test_update_returns_refreshed_record(admin_client, student):
    resp = admin_client.patch(f"/api/students/{LRN}/", {"adviser": "Jose Rizal"}, format="json")

    assert resp.status_code == 200
    assert resp.data["adviser"] == "Jose Rizal"


def test_update_cannot_move_grade_level(admin_client, student):
    resp = admin_client.patch(
        f"/api/students/{LRN}/", {"grade_level": "Grade 5", "section": "Section F"}, format="json"
    )

    assert resp.status_code == 400
    assert set(resp.data) == {"grade_level", "section"}
    student.refresh_from_db()
    assert (student.grade_level, student.section) == ("Grade 2", "Section A")
    assert AdvisoryRecord.objects.count() == 0


def test_update_cannot_change_school_year(admin_client, student):
    resp = admin_client.patch(f"/api/students/{LRN}/", {"school_year": "2030-2031"}, format="json")

    assert resp.status_code == 400
    assert StudentRecord.objects.get(lrn=LRN).school_year == "2024-2025"


def test_full_update_with_unchanged_class_is_accepted(admin_client, student):
    payload = {
        "last_name": "Dela Cruz", "first_name": "Juan", "middle_name": "Perez", "lrn": LRN,
        "birthdate": "2017-06-01", "sex": "Male", "grade_level": "Grade 2",
        "section": "Section A", "school_year": "2024-2025", "adviser": "Ana Reyes",
    }

    resp = admin_client.put(f"/api/students/{LRN}/", payload, format="json")

    assert resp.status_code == 200
    assert resp.data["middle_name"] == "Perez"


def _broken_store(*args, **kwargs):
    raise DatabaseError("server closed the connection")


def test_read_failure_is_503(admin_client, student, monkeypatch):
    monkeypatch.setattr(QuerySet, "_fetch_all", _broken_store)

    resp = admin_client.get("/api/students/")

    assert resp.status_code == 503
    assert resp.data["detail"].code == "read_failed"


def test_admission_write_failure_is_503(admin_client, admission_payload, monkeypatch):
    monkeypatch.setattr(views, "admit_student", _broken_store)

    resp = admin_client.post("/api/students/", admission_payload, format="json")

    assert resp.status_code == 503
    assert resp.data["detail"].code == "write_failed"


def test_update_write_failure_is_503(admin_client, student, monkeypatch):
    monkeypatch.setattr(StudentRecord, "save", _broken_store)

    resp = admin_client.patch(f"/api/students/{LRN}/", {"adviser": "Jose Rizal"}, format="json")

    assert resp.status_code == 503
    assert resp.data["detail"].code == "write_failed"
    assert StudentRecord.objects.get(lrn=LRN).adviser == "Ana Reyes"


def test_eligibility_endpoint(admin_client, student, add_grades):
    add_grades(LRN, "Grade 2", REQUIRED_QUARTERS[:3])

    resp = admin_client.get(f"/api/students/{LRN}/eligibility/")

    assert resp.data == {"eligible": False, "reason": "missing quarters", "missing": ["4th Quarter"]}


def test_promote_endpoint_missing_quarters(admin_client, student, add_grades):
    add_grades(LRN, "Grade 2", REQUIRED_QUARTERS[:3])

    resp = admin_client.post(f"/api/students/{LRN}/promote/", PROMOTION, format="json")

    assert resp.status_code == 409
    assert StudentRecord.objects.get(lrn=LRN).grade_level == "Grade 2"
    assert AdvisoryRecord.objects.count() == 0


def test_promote_endpoint_success(teacher_client, student, add_grades):
    add_grades(LRN, "Grade 2")

    resp = teacher_client.post(f"/api/students/{LRN}/promote/", PROMOTION, format="json")

    assert resp.status_code == 200
    assert resp.data["student"]["grade_level"] == "Grade 3"
    assert resp.data["student"]["section"] == "Section B"
    assert resp.data["advisory"]["adviser"] == "Jose Rizal"
    assert AdvisoryRecord.objects.filter(lrn=LRN, grade="Grade 3", school_year="2025-2026").count() == 1


def test_promote_endpoint_validates_target(admin_client, student, add_grades):
    add_grades(LRN, "Grade 2")

    resp = admin_client.post(f"/api/students/{LRN}/promote/", {"grade_level": "Grade 3"}, format="json")

    assert resp.status_code == 400
    assert StudentRecord.objects.get(lrn=LRN).grade_level == "Grade 2"


def test_grades_and_history_endpoints(admin_client, student, add_grades):
    add_grades(LRN, "Grade 1")
    add_grades(LRN, "Grade 2", REQUIRED_QUARTERS[:2])
    AdvisoryRecord.objects.create(lrn=LRN, grade="Grade 2", section="Section A", adviser="Ana Reyes", school_year="2024-2025")

    grades = admin_client.get(f"/api/students/{LRN}/grades/").data
    history = admin_client.get(f"/api/students/{LRN}/history/").data

    assert {g["grade_level"] for g in grades} == {"Grade 2"}
    assert len(grades) == 2
    assert [h["grade"] for h in history] == ["Grade 2"]


def test_student_records_require_staff_role(api_client, db):
    from accounts.models import User

    guardian = User.objects.create_user("parent@school.edu", "parentpass1", name="Parent")
    api_client.force_authenticate(user=guardian)

    assert api_client.get("/api/students/").status_code == 403


def test_anonymous_is_rejected(api_client, db):
    assert api_client.get("/api/students/").status_code == 401
