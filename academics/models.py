from django.db import models

from .constants import GRADE_LEVELS, REQUIRED_QUARTERS, SEXES, SEX_MALE

GRADE_CHOICES = [(g, g) for g in GRADE_LEVELS]
QUARTER_CHOICES = [(q, q) for q in REQUIRED_QUARTERS]


class StudentRecord(models.Model):
    last_name = models.CharField(max_length=100)
    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True)
    # learner reference number; uniqueness is also checked before insert
    lrn = models.CharField(max_length=20, unique=True)
    birthdate = models.DateField()
    sex = models.CharField(max_length=6, choices=SEXES, default=SEX_MALE)
    grade_level = models.CharField(max_length=20, choices=GRADE_CHOICES)
    section = models.CharField(max_length=50)
    school_year = models.CharField(max_length=9)  # e.g. "2025-2026"
    adviser = models.CharField(max_length=150, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["last_name", "first_name"]
        indexes = [
            models.Index(fields=["grade_level", "section"], name="student_grade_section_idx"),
            models.Index(fields=["last_name", "first_name"], name="student_name_idx"),
        ]

    def __str__(self):
        return f"{self.last_name} {self.first_name} ({self.lrn})"


class AdvisoryRecord(models.Model):
    """Append-only: one row per admission and per promotion."""
    lrn = models.CharField(max_length=20, db_index=True)
    grade = models.CharField(max_length=20)
    section = models.CharField(max_length=50)
    adviser = models.CharField(max_length=150, blank=True)
    school_year = models.CharField(max_length=9)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.lrn}: {self.grade} / {self.section} ({self.school_year})"


class GradeEntry(models.Model):
    lrn = models.CharField(max_length=20)
    grade_level = models.CharField(max_length=20, choices=GRADE_CHOICES)
    quarter = models.CharField(max_length=12, choices=QUARTER_CHOICES)
    subject = models.CharField(max_length=100, blank=True)
    grade = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)

    class Meta:
        ordering = ["lrn", "grade_level", "quarter", "subject"]
        indexes = [
            models.Index(fields=["lrn", "grade_level"], name="grade_lrn_level_idx"),
        ]

    def __str__(self):
        return f"{self.lrn} {self.grade_level} {self.quarter} {self.subject}"
