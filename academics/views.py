# academics/views.py
import logging

from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .constants import grade_number
from .mixins import ListExportMixin, StoreErrorMixin
from .models import StudentRecord
from .permissions import IsAdminOrTeacher
from .search import STUDENT_NAME_FIELDS, NameSearchFilter
from .serializers import (
    AdvisoryRecordSerializer,
    GradeEntrySerializer,
    PromotionSerializer,
    StudentRecordSerializer,
)
from .services import (
    admit_student,
    advisory_history,
    check_promotion_eligibility,
    grades_for_current_level,
    promote_student,
    students_for_advisory,
    validate_admission,
)

logger = logging.getLogger(__name__)


class StudentRecordViewSet(
    StoreErrorMixin,
    ListExportMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    Student records, keyed by LRN.

    Teachers only ever see their own advisory class; the scope comes from
    their account, never from the request.
    """
    serializer_class = StudentRecordSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdminOrTeacher]
    filter_backends = [NameSearchFilter]
    name_search_fields = STUDENT_NAME_FIELDS
    lookup_field = "lrn"

    export_columns = (
        "last_name", "first_name", "middle_name", "lrn", "birthdate",
        "sex", "grade_level", "section", "school_year", "adviser",
    )
    export_filename = "student_management.xlsx"
    export_sheet = "Students"

    def get_queryset(self):
        user = self.request.user
        if getattr(user, "role", None) == "teacher":
            qs = students_for_advisory(user.grade_level, user.section)
        else:
            qs = StudentRecord.objects.all()

        params = self.request.query_params
        for name in ("grade_level", "section", "school_year"):
            value = params.get(name)
            if value:
                qs = qs.filter(**{name: value})
        return qs

    def order_rows(self, rows):
        return sorted(rows, key=lambda s: (grade_number(s.grade_level), s.last_name.lower()))

    # ---- Admission ----
    def create(self, request, *args, **kwargs):
        validate_admission(request.data)
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        student = admit_student(serializer.validated_data)
        return Response(self.get_serializer(student).data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        student = serializer.save()
        logger.info("updated student record %s", student.lrn)

    # ---- Promotion ----
    @action(detail=True, methods=["get"])
    def eligibility(self, request, lrn=None):
        student = self.get_object()
        return Response(check_promotion_eligibility(student).as_dict())

    @action(detail=True, methods=["post"])
    def promote(self, request, lrn=None):
        """
        POST /api/students/{lrn}/promote/
        {"grade_level": "Grade 3", "section": "Section B",
         "school_year": "2025-2026", "adviser": "..."}
        """
        student = self.get_object()
        serializer = PromotionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        advisory = promote_student(student, **serializer.validated_data)
        student.refresh_from_db()
        return Response({
            "student": self.get_serializer(student).data,
            "advisory": AdvisoryRecordSerializer(advisory).data,
        })

    # ---- Read-only views of related rows ----
    @action(detail=True, methods=["get"])
    def grades(self, request, lrn=None):
        student = self.get_object()
        rows = grades_for_current_level(student)
        return Response(GradeEntrySerializer(rows, many=True).data)

    @action(detail=True, methods=["get"])
    def history(self, request, lrn=None):
        student = self.get_object()
        return Response(AdvisoryRecordSerializer(advisory_history(student.lrn), many=True).data)
