"""
API участников проекта.

GET    /api/v1/projects/<id>/users/
POST   /api/v1/projects/<id>/users/   {"userId"} → 201 | 400 | 404 | 409
DELETE /api/v1/projects/<id>/users/   {"userId"} (или ?userId=) → 200 | 400 | 404
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from app_projects.exceptions import ProjectAccessDenied, ProjectNotFoundError
from app_projects.repositories import ProjectRepository
from app_users.roles import Permissions
from core.permissions import HasRolePermission
from core.responses import error_response

from .exceptions import (
    AlreadyMemberException,
    MembershipNotFoundException,
    ProjectOrUserNotFoundException,
    UserIdRequiredException,
)
from .serializers import MemberRequestSerializer, MemberSerializer, MembershipSerializer
from .services import MemberService


class ProjectMemberAPIView(APIView):
    permission_classes = [HasRolePermission]
    required_permissions = {
        "GET": [Permissions.READ_PROJECT],
        "POST": [Permissions.MANAGE_PROJECT_USERS],
        "DELETE": [Permissions.MANAGE_PROJECT_USERS],
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.project_repo = ProjectRepository()
        self.service = MemberService()

    def handle_error(self, e: Exception):
        """Централизованная обработка ошибок."""
        if isinstance(e, UserIdRequiredException):
            return error_response(str(e), status.HTTP_400_BAD_REQUEST)
        if isinstance(
            e, (ProjectNotFoundError, ProjectOrUserNotFoundException, MembershipNotFoundException)
        ):
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        if isinstance(e, ProjectAccessDenied):
            return error_response(str(e), status.HTTP_403_FORBIDDEN)
        if isinstance(e, AlreadyMemberException):
            return error_response(str(e), status.HTTP_409_CONFLICT)
        raise e

    @extend_schema(
        summary="Участники проекта",
        responses={
            200: MemberSerializer(many=True),
            403: OpenApiResponse(description="Пользователь проекта не участник"),
            404: OpenApiResponse(description="Проект не найден"),
        },
        tags=["Project members"],
    )
    def get(self, request, project_id: int):
        try:
            project = self.project_repo.get_by_id_or_raise(project_id)
            self.project_repo.ensure_access(request.user, project.id)
        except Exception as e:
            return self.handle_error(e)

        members = self.service.list(project.id)
        return Response(MemberSerializer(members, many=True).data)

    @extend_schema(
        summary="Добавить участника",
        request=MemberRequestSerializer,
        responses={
            201: MembershipSerializer,
            400: OpenApiResponse(description="userId не передан"),
            404: OpenApiResponse(description="Проект или пользователь не найден"),
            409: OpenApiResponse(description="Уже участник"),
        },
        tags=["Project members"],
    )
    def post(self, request, project_id: int):
        try:
            user_id = self.service.user_id_from(request.data)
            membership = self.service.add(project_id, user_id)
        except Exception as e:
            return self.handle_error(e)

        return Response(MembershipSerializer(membership).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Убрать участника",
        request=MemberRequestSerializer,
        responses={
            200: OpenApiResponse(description="{projectId, userId}"),
            400: OpenApiResponse(description="userId не передан"),
            404: OpenApiResponse(description="Участие не найдено"),
        },
        tags=["Project members"],
    )
    def delete(self, request, project_id: int):
        data = request.data if request.data else request.query_params
        try:
            user_id = self.service.user_id_from(data)
            removed = self.service.remove(project_id, user_id)
        except Exception as e:
            return self.handle_error(e)

        return Response(removed, status=status.HTTP_200_OK)
