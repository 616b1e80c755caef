from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from app_projects.models import Block, Project, ProjectFile, ProjectMember


class ProjectMemberInline(admin.TabularInline):
    model = ProjectMember
    extra = 0
    autocomplete_fields = ("user",)


class BlockInline(admin.TabularInline):
    model = Block
    extra = 0


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("name", "client_name", "location", "members_count", "created_at", "updated_at")
    search_fields = ("name", "client_name", "location")
    inlines = (ProjectMemberInline, BlockInline)
    save_on_top = True

    @admin.display(description=_("Участников"))
    def members_count(self, obj: Project) -> int:
        return obj.memberships.count()


@admin.register(Block)
class BlockAdmin(admin.ModelAdmin):
    list_display = ("name", "project")
    list_filter = ("project",)
    search_fields = ("name",)
    list_select_related = ("project",)


@admin.register(ProjectFile)
class ProjectFileAdmin(admin.ModelAdmin):
    list_display = ("title", "project", "original_name", "mime_type", "size", "created_at")
    list_filter = ("project",)
    search_fields = ("title", "original_name")
    list_select_related = ("project",)
    readonly_fields = ("file", "size", "mime_type", "uploaded_by", "created_at")
