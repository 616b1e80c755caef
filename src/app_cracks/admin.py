from django.contrib import admin

from app_cracks.models import CrackIdentification


@admin.register(CrackIdentification)
class CrackIdentificationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "project",
        "block",
        "chainage_from",
        "chainage_to",
        "defect_type",
        "length_mm",
        "width_mm",
        "height_mm",
        "start_time",
        "end_time",
    )
    list_filter = ("project", "defect_type")
    search_fields = ("defect_type", "chainage_from", "chainage_to", "video_file_name")
    list_select_related = ("project", "block")
    autocomplete_fields = ("block",)
