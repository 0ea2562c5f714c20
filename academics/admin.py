from django.contrib import admin
from .models import AdvisoryRecord, GradeEntry, StudentRecord

@admin.register(StudentRecord)
class StudentRecordAdmin(admin.ModelAdmin):
    list_display = ('lrn', 'last_name', 'first_name', 'grade_level', 'section', 'school_year', 'adviser')
    search_fields = ('lrn', 'last_name', 'first_name', 'middle_name')
    list_filter = ('grade_level', 'section', 'school_year')

@admin.register(GradeEntry)
class GradeEntryAdmin(admin.ModelAdmin):
    list_display = ('lrn', 'grade_level', 'quarter', 'subject', 'grade')
    search_fields = ('lrn', 'subject')
    list_filter = ('grade_level', 'quarter')

@admin.register(AdvisoryRecord)
class AdvisoryRecordAdmin(admin.ModelAdmin):
    """Lineage rows are append-only; the admin may look but not touch."""
    list_display = ('lrn', 'grade', 'section', 'adviser', 'school_year', 'created_at')
    search_fields = ('lrn', 'adviser')
    list_filter = ('grade', 'school_year')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
