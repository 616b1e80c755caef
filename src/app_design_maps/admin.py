from django.contrib import admin

from app_design_maps.models import DesignMap


@admin.register(DesignMap)
class DesignMapAdmin(admin.ModelAdmin):
    list_display = ("id", "project", "crack", "x", "y", "width", "height", "updated_at")
    list_filter = ("project",)
    list_select_related = ("project", "crack")
    raw_id_fields = ("crack",)
