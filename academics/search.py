from django.db.models import CharField, F, Value
from django.db.models.functions import Concat
from rest_framework.filters import BaseFilterBackend

STUDENT_NAME_FIELDS = ("last_name", "first_name", "middle_name")


class NameSearchFilter(BaseFilterBackend):
    """
    ``?search=`` as a case-insensitive substring of a composed name.

    Views list the fields to join in ``name_search_fields``; they are
    concatenated with single spaces in the database, so students match on
    "last first middle". An empty query leaves the queryset alone.
    """
    search_param = "search"

    def filter_queryset(self, request, queryset, view):
        query = request.query_params.get(self.search_param) or ""
        fields = getattr(view, "name_search_fields", None)
        if not query or not fields:
            return queryset

        parts = []
        for i, name in enumerate(fields):
            if i:
                parts.append(Value(" "))
            parts.append(name)
        composed = F(fields[0]) if len(fields) == 1 else Concat(*parts, output_field=CharField())
        return queryset.annotate(search_name=composed).filter(search_name__icontains=query)
