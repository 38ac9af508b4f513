from django.contrib import admin
from .models import CutoffRecord


@admin.register(CutoffRecord)
class CutoffRecordAdmin(admin.ModelAdmin):
    list_display = ("sno", "inst_code", "institute_name", "branch_code", "dist_code", "co_education", "oc_boys", "oc_girls")
    search_fields = ("inst_code", "institute_name", "place", "branch_name")
    list_filter = ("dist_code", "branch_code", "co_education")
    ordering = ("sno",)

    # Reference data is loaded outside the application.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
