from rest_framework import serializers

from .constants import GRADE_LEVELS
from .models import AdvisoryRecord, GradeEntry, StudentRecord

SCHOOL_YEAR_PATTERN = r"^\d{4}-\d{4}$"

# moved only by promotion, which checks grades and writes the advisory row
PROMOTION_FIELDS = ('grade_level', 'section', 'school_year')

class StudentRecordSerializer(serializers.ModelSerializer):
    school_year = serializers.RegexField(
        SCHOOL_YEAR_PATTERN, max_length=9,
        error_messages={"invalid": "school year must look like 2025-2026"},
    )

    class Meta:
        model = StudentRecord
        fields = (
            'id', 'last_name', 'first_name', 'middle_name', 'lrn', 'birthdate',
            'sex', 'grade_level', 'section', 'school_year', 'adviser',
        )
        # duplicates are answered with 409 by the admission service
        extra_kwargs = {'lrn': {'validators': []}}

    def validate_lrn(self, value):
        value = value.strip()
        if self.instance is not None and value != self.instance.lrn:
            raise serializers.ValidationError("LRN cannot be changed.")
        return value

    def validate(self, attrs):
        if self.instance is not None:
            errors = {
                name: "Use promote/ to change the grade level, section or school year."
                for name in PROMOTION_FIELDS
                if name in attrs and attrs[name] != getattr(self.instance, name)
            }
            if errors:
                raise serializers.ValidationError(errors)
        return attrs

class PromotionSerializer(serializers.Serializer):
    grade_level = serializers.ChoiceField(choices=GRADE_LEVELS)
    section = serializers.CharField(max_length=50)
    school_year = serializers.RegexField(SCHOOL_YEAR_PATTERN, max_length=9)
    adviser = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")

class AdvisoryRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = AdvisoryRecord
        fields = ('id', 'lrn', 'grade', 'section', 'adviser', 'school_year', 'created_at')

class GradeEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = GradeEntry
        fields = ('id', 'lrn', 'grade_level', 'quarter', 'subject', 'grade')
