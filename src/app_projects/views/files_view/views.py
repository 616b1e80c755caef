"""
API вложений проекта.

GET    /api/v1/project-files/?projectId=1
POST   /api/v1/project-files/                 multipart: projectId, title, file
GET    /api/v1/project-files/<id>/download/
DELETE /api/v1/project-files/<id>/
"""

from django.http import FileResponse
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from app_projects.exceptions import ProjectAccessDenied, ProjectNotFoundError
from app_projects.models import ProjectFile
from app_projects.repositories import ProjectRepository
from app_users.roles import Permissions
from core.permissions import HasRolePermission
from core.responses import error_response
from core.utils.params import parse_id

from .exceptions import (
    FileStorageException,
    FileTooLargeException,
    ProjectFileNotFoundError,
    StoredFileMissingException,
    UnsupportedFileTypeException,
)
from .serializers import ProjectFileSerializer, ProjectFileUploadSerializer
from .services import ProjectFileService


class BaseProjectFileAPIView(APIView):
    permission_classes = [HasRolePermission]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.project_repo = ProjectRepository()
        self.service = ProjectFileService()

    def handle_error(self, e: Exception):
        """Централизованная обработка ошибок."""
        if isinstance(e, (ProjectNotFoundError, ProjectFileNotFoundError)):
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        if isinstance(e, ProjectAccessDenied):
            return error_response(str(e), status.HTTP_403_FORBIDDEN)
        if isinstance(e, FileTooLargeException):
            return error_response(str(e), status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)
        if isinstance(e, UnsupportedFileTypeException):
            return error_response(str(e), status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)
        if isinstance(e, StoredFileMissingException):
            return error_response(str(e), status.HTTP_410_GONE)
        if isinstance(e, FileStorageException):
            return error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise e


class ProjectFileListCreateAPIView(BaseProjectFileAPIView):
    parser_classes = [MultiPartParser, FormParser]
    required_permissions = {
        "GET": [Permissions.READ_PROJECT_FILE],
        "POST": [Permissions.UPLOAD_PROJECT_FILE],
    }

    @extend_schema(
        summary="Файлы проекта",
        parameters=[OpenApiParameter("projectId", int, required=True)],
        responses={200: ProjectFileSerializer(many=True)},
        tags=["Project files"],
    )
    def get(self, request):
        project_id = parse_id(request.query_params.get("projectId"))
        if not project_id:
            return error_response("projectId required", status.HTTP_400_BAD_REQUEST)

        try:
            self.project_repo.ensure_access(request.user, project_id)
        except ProjectAccessDenied as e:
            return self.handle_error(e)

        files = ProjectFile.objects.filter(project_id=project_id)
        return Response(ProjectFileSerializer(files, many=True).data)

    @extend_schema(
        summary="Загрузить файл",
        request=ProjectFileUploadSerializer,
        responses={
            201: ProjectFileSerializer,
            400: OpenApiResponse(description="Не хватает полей формы"),
            413: OpenApiResponse(description="Файл больше 20MB"),
            415: OpenApiResponse(description="Тип файла не разрешён"),
            500: OpenApiResponse(description="Не удалось записать файл"),
        },
        tags=["Project files"],
    )
    def post(self, request):
        serializer = ProjectFileUploadSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid upload",
                status.HTTP_400_BAD_REQUEST,
                errors=[serializer.errors],
            )

        data = serializer.validated_data
        try:
            project = self.project_repo.get_by_id_or_raise(data["projectId"])
            record = self.service.upload(project, data["file"], data["title"], request.user)
        except Exception as e:
            return self.handle_error(e)

        return Response(ProjectFileSerializer(record).data, status=status.HTTP_201_CREATED)


class ProjectFileDetailAPIView(BaseProjectFileAPIView):
    required_permissions = {"DELETE": [Permissions.DELETE_PROJECT_FILE]}

    @extend_schema(
        summary="Удалить файл",
        responses={200: OpenApiResponse(description="{id, projectId}")},
        tags=["Project files"],
    )
    def delete(self, request, file_id: int):
        try:
            deleted = self.service.delete(file_id)
        except Exception as e:
            return self.handle_error(e)
        return Response(deleted, status=status.HTTP_200_OK)


class ProjectFileDownloadAPIView(BaseProjectFileAPIView):
    required_permissions = {"GET": [Permissions.READ_PROJECT_FILE]}

    @extend_schema(
        summary="Скачать файл",
        responses={
            200: OpenApiResponse(description="Содержимое файла"),
            404: OpenApiResponse(description="Запись не найдена"),
            410: OpenApiResponse(description="Файл отсутствует на диске"),
        },
        tags=["Project files"],
    )
    def get(self, request, file_id: int):
        try:
            record = self.service.get(file_id)
            self.project_repo.ensure_access(request.user, record.project_id)
            handle = self.service.open_for_download(record)
        except Exception as e:
            return self.handle_error(e)

        return FileResponse(
            handle,
            as_attachment=True,
            filename=record.original_name,
            content_type=record.mime_type,
        )
