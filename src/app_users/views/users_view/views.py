"""
API пользователей.

GET   /api/v1/users/?search=&role=&status=&page=&pageSize=
POST  /api/v1/users/        {"name", "email", "password", "role", "status"}
GET   /api/v1/users/<id>/
PATCH /api/v1/users/<id>/   {"name"?, "role"?, "status"?}
GET   /api/v1/users/me/     текущий пользователь и его права
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from app_users.exceptions import UserNotFoundError
from app_users.repositories import UserRepository
from app_users.roles import Permissions, Role
from core.pagination import page_params, paginate
from core.permissions import HasRolePermission
from core.responses import error_response

from .exceptions import EmailTakenException, UserValidationException
from .serializers import (
    CurrentUserSerializer,
    UserCreateSerializer,
    UserPageSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from .services import UserService

STATUS_FILTER = {"true": True, "1": True, "false": False, "0": False}


class BaseUserAPIView(APIView):
    permission_classes = [HasRolePermission]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.repo = UserRepository()
        self.service = UserService()

    def handle_error(self, e: Exception):
        """Централизованная обработка ошибок."""
        if isinstance(e, UserValidationException):
            return error_response(str(e), status.HTTP_400_BAD_REQUEST)
        if isinstance(e, UserNotFoundError):
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        if isinstance(e, EmailTakenException):
            return error_response(str(e), status.HTTP_409_CONFLICT)
        raise e


class UserListCreateAPIView(BaseUserAPIView):
    required_permissions = {
        "GET": [Permissions.READ_USERS],
        "POST": [Permissions.EDIT_USERS],
    }

    @extend_schema(
        summary="Пользователи (постранично)",
        parameters=[
            OpenApiParameter("search", str, description="Имя или email"),
            OpenApiParameter("role", str, enum=Role.values),
            OpenApiParameter("status", bool),
            OpenApiParameter("page", int),
            OpenApiParameter("pageSize", int, description="Не больше 100"),
        ],
        responses={200: UserPageSerializer},
        tags=["Users"],
    )
    def get(self, request):
        params = request.query_params
        role = params.get("role")
        qs = self.repo.filtered(
            search=(params.get("search") or "").strip() or None,
            role=role if role in Role.values else None,
            is_active=STATUS_FILTER.get((params.get("status") or "").strip().lower()),
        )
        page, page_size = page_params(params)
        return Response(UserPageSerializer(paginate(qs, page, page_size)).data)

    @extend_schema(
        summary="Создать пользователя",
        request=UserCreateSerializer,
        responses={
            201: UserSerializer,
            400: OpenApiResponse(description="Нет email или пароля"),
            409: OpenApiResponse(description="Email уже занят"),
        },
        tags=["Users"],
    )
    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid user data",
                status.HTTP_400_BAD_REQUEST,
                errors=[serializer.errors],
            )

        try:
            user = self.service.create(serializer.validated_data)
        except Exception as e:
            return self.handle_error(e)

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailAPIView(BaseUserAPIView):
    required_permissions = {
        "GET": [Permissions.READ_USERS],
        "PATCH": [Permissions.EDIT_USERS],
    }

    @extend_schema(
        summary="Пользователь",
        responses={200: UserSerializer, 404: OpenApiResponse(description="Не найден")},
        tags=["Users"],
    )
    def get(self, request, user_id: int):
        try:
            user = self.repo.get_by_id_or_raise(user_id)
        except Exception as e:
            return self.handle_error(e)
        return Response(UserSerializer(user).data)

    @extend_schema(
        summary="Изменить пользователя",
        request=UserUpdateSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(description="Нечего менять"),
            404: OpenApiResponse(description="Не найден"),
        },
        tags=["Users"],
    )
    def patch(self, request, user_id: int):
        serializer = UserUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid user data",
                status.HTTP_400_BAD_REQUEST,
                errors=[serializer.errors],
            )

        try:
            user = self.service.update(user_id, serializer.validated_data)
        except Exception as e:
            return self.handle_error(e)

        return Response(UserSerializer(user).data)


class CurrentUserAPIView(BaseUserAPIView):
    # Точка входа панели; клиент строит меню по списку permissions
    required_permissions = {"GET": [Permissions.VIEW_DASHBOARD]}

    @extend_schema(
        summary="Текущий пользователь",
        responses={200: CurrentUserSerializer},
        tags=["Users"],
    )
    def get(self, request):
        return Response(CurrentUserSerializer(request.user).data)
