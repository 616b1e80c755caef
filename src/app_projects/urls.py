from django.urls import path

from app_projects.views.blocks_view import views as blocks_view
from app_projects.views.files_view import views as files_view
from app_projects.views.members_view import views as members_view
from app_projects.views.projects_view import views as projects_view

app_name = "app_projects"

urlpatterns = [
    path(
        "projects/",
        projects_view.ProjectListAPIView.as_view(),
        name="project-list",
    ),
    path(
        "projects/<int:project_id>/",
        projects_view.ProjectDetailAPIView.as_view(),
        name="project-detail",
    ),
    path(
        "projects/<int:project_id>/users/",
        members_view.ProjectMemberAPIView.as_view(),
        name="project-members",
    ),
    path(
        "blocks/",
        blocks_view.BlockListCreateAPIView.as_view(),
        name="block-list",
    ),
    # Вложения проекта
    path(
        "project-files/",
        files_view.ProjectFileListCreateAPIView.as_view(),
        name="project-file-list",
    ),
    path(
        "project-files/<int:file_id>/",
        files_view.ProjectFileDetailAPIView.as_view(),
        name="project-file-detail",
    ),
    path(
        "project-files/<int:file_id>/download/",
        files_view.ProjectFileDownloadAPIView.as_view(),
        name="project-file-download",
    ),
]
