"""
API проектов.

GET    /api/v1/projects/?search=...
POST   /api/v1/projects/            JSON или multipart: name, clientName, location, description, designImageFile
GET    /api/v1/projects/<id>/
PATCH  /api/v1/projects/<id>/       те же поля, все необязательны
DELETE /api/v1/projects/<id>/       → {"id"}
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from app_projects.exceptions import ProjectAccessDenied, ProjectNotFoundError
from app_projects.repositories import ProjectRepository
from app_users.roles import Permissions
from core.permissions import HasRolePermission
from core.responses import error_response

from .exceptions import (
    DesignImageStorageException,
    DesignImageTooLargeException,
    DesignImageTypeException,
    ProjectNameTakenException,
    ProjectValidationException,
)
from .serializers import ProjectSerializer, ProjectWriteSerializer
from .services import ProjectService

WRITE_ERRORS = {
    400: OpenApiResponse(description="Пустое имя или заказчик, нечего менять"),
    409: OpenApiResponse(description="Проект с таким именем уже есть"),
    413: OpenApiResponse(description="Чертёж больше 20MB"),
    415: OpenApiResponse(description="Чертёж не изображение"),
}


class BaseProjectAPIView(APIView):
    permission_classes = [HasRolePermission]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.repo = ProjectRepository()
        self.service = ProjectService()

    def handle_error(self, e: Exception):
        """Централизованная обработка ошибок."""
        if isinstance(e, ProjectNotFoundError):
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        if isinstance(e, ProjectAccessDenied):
            return error_response(str(e), status.HTTP_403_FORBIDDEN)
        if isinstance(e, ProjectValidationException):
            return error_response(str(e), status.HTTP_400_BAD_REQUEST)
        if isinstance(e, ProjectNameTakenException):
            return error_response(str(e), status.HTTP_409_CONFLICT)
        if isinstance(e, DesignImageTypeException):
            return error_response(str(e), status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)
        if isinstance(e, DesignImageTooLargeException):
            return error_response(str(e), status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)
        if isinstance(e, DesignImageStorageException):
            return error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise e

    def validated_write_data(self, request):
        serializer = ProjectWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return None, error_response(
                "Invalid project data",
                status.HTTP_400_BAD_REQUEST,
                errors=[serializer.errors],
            )
        data = dict(serializer.validated_data)
        return data, None


class ProjectListAPIView(BaseProjectAPIView):
    required_permissions = {
        "GET": [Permissions.READ_PROJECT],
        "POST": [Permissions.CREATE_PROJECT],
    }

    @extend_schema(
        summary="Список проектов",
        parameters=[OpenApiParameter("search", str, description="Имя, заказчик или место")],
        responses={200: ProjectSerializer(many=True)},
        tags=["Projects"],
    )
    def get(self, request):
        search = (request.query_params.get("search") or "").strip()
        projects = self.repo.visible_for(request.user, search=search or None)
        return Response(ProjectSerializer(projects, many=True).data)

    @extend_schema(
        summary="Создать проект",
        request=ProjectWriteSerializer,
        responses={201: ProjectSerializer, **WRITE_ERRORS},
        tags=["Projects"],
    )
    def post(self, request):
        data, error = self.validated_write_data(request)
        if error is not None:
            return error

        image = data.pop("designImageFile", None)
        try:
            project = self.service.create(data, image)
        except Exception as e:
            return self.handle_error(e)

        return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


class ProjectDetailAPIView(BaseProjectAPIView):
    required_permissions = {
        "GET": [Permissions.READ_PROJECT],
        "PATCH": [Permissions.EDIT_PROJECT],
        "DELETE": [Permissions.DELETE_PROJECT],
    }

    @extend_schema(
        summary="Проект",
        responses={
            200: ProjectSerializer,
            403: OpenApiResponse(description="Нет доступа к проекту"),
            404: OpenApiResponse(description="Проект не найден"),
        },
        tags=["Projects"],
    )
    def get(self, request, project_id: int):
        try:
            project = self.repo.get_by_id_or_raise(project_id)
            self.repo.ensure_access(request.user, project.id)
        except Exception as e:
            return self.handle_error(e)

        return Response(ProjectSerializer(project).data)

    @extend_schema(
        summary="Изменить проект",
        request=ProjectWriteSerializer,
        responses={
            200: ProjectSerializer,
            404: OpenApiResponse(description="Проект не найден"),
            **WRITE_ERRORS,
        },
        tags=["Projects"],
    )
    def patch(self, request, project_id: int):
        data, error = self.validated_write_data(request)
        if error is not None:
            return error

        image = data.pop("designImageFile", None)
        try:
            project = self.repo.get_by_id_or_raise(project_id)
            project = self.service.update(project, data, image)
        except Exception as e:
            return self.handle_error(e)

        return Response(ProjectSerializer(project).data)

    @extend_schema(
        summary="Удалить проект",
        responses={
            200: OpenApiResponse(description="{id}"),
            404: OpenApiResponse(description="Проект не найден"),
        },
        tags=["Projects"],
    )
    def delete(self, request, project_id: int):
        try:
            project = self.repo.get_by_id_or_raise(project_id)
            deleted = self.service.delete(project)
        except Exception as e:
            return self.handle_error(e)

        return Response(deleted, status=status.HTTP_200_OK)
