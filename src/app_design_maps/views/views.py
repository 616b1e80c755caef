"""
API карт чертежа.

GET    /api/v1/design-maps/?projectId=&crackIdentificationId=&naturalWidth=&naturalHeight=
POST   /api/v1/design-maps/  {projectId, crackIdentificationId, x, y, width, height}
DELETE /api/v1/design-maps/?id=  (или JSON {id})
GET    /api/v1/design-maps/<id>/
PATCH  /api/v1/design-maps/<id>/ {x?, y?, width?, height?, crackIdentificationId?}
DELETE /api/v1/design-maps/<id>/
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from app_design_maps.display import legacy_display_rect
from app_design_maps.exceptions import (
    CrackNotInProjectError,
    DesignMapConflictError,
    DesignMapNotFoundError,
    NothingToUpdateError,
)
from app_design_maps.geometry import Rect
from app_design_maps.services import RECT_FIELDS, DesignMapService
from app_users.roles import Permissions
from core.permissions import HasRolePermission
from core.responses import error_response
from core.utils.params import parse_id, parse_positive_float

from .serializers import (
    DesignMapCreateSerializer,
    DesignMapDeleteSerializer,
    DesignMapListSerializer,
    DesignMapSerializer,
    DesignMapUpdateSerializer,
    DisplayRectSerializer,
)


class BaseDesignMapAPIView(APIView):
    """Базовый класс для API карт."""

    permission_classes = [HasRolePermission]
    required_permissions = {
        "GET": [Permissions.READ_DESIGN_MAP],
        "POST": [Permissions.WRITE_DESIGN_MAP],
        "PATCH": [Permissions.WRITE_DESIGN_MAP],
        "DELETE": [Permissions.WRITE_DESIGN_MAP],
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.service = DesignMapService()

    def handle_error(self, e: Exception):
        """Централизованная обработка ошибок."""
        if isinstance(e, (DesignMapNotFoundError, CrackNotInProjectError)):
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        if isinstance(e, DesignMapConflictError):
            return error_response(str(e), status.HTTP_409_CONFLICT)
        if isinstance(e, NothingToUpdateError):
            return error_response(str(e), status.HTTP_400_BAD_REQUEST)
        raise e

    def delete_map(self, map_id):
        try:
            deleted_id = self.service.delete(map_id)
        except DesignMapNotFoundError as e:
            return self.handle_error(e)
        return Response({"id": deleted_id}, status=status.HTTP_200_OK)


class DesignMapCollectionAPIView(BaseDesignMapAPIView):
    @extend_schema(
        summary="Карты проекта",
        description=(
            "При переданных naturalWidth/naturalHeight каждая карта получает "
            "поле display — прямоугольник для показа на изображении этого размера."
        ),
        parameters=[
            OpenApiParameter("projectId", int, required=True),
            OpenApiParameter("crackIdentificationId", int),
            OpenApiParameter("naturalWidth", float),
            OpenApiParameter("naturalHeight", float),
        ],
        responses={200: DesignMapListSerializer},
        tags=["Design maps"],
    )
    def get(self, request):
        params = request.query_params
        project_id = parse_id(params.get("projectId"))
        if not project_id:
            return error_response("projectId required", status.HTTP_400_BAD_REQUEST)

        maps = self.service.list(project_id, crack_id=parse_id(params.get("crackIdentificationId")))
        items = DesignMapSerializer(maps, many=True).data

        natural_width = parse_positive_float(params.get("naturalWidth"))
        natural_height = parse_positive_float(params.get("naturalHeight"))
        if natural_width and natural_height:
            for item, design_map in zip(items, maps):
                display = legacy_display_rect(Rect.of(design_map), natural_width, natural_height)
                item["display"] = DisplayRectSerializer(display).data

        return Response({"items": items})

    @extend_schema(
        summary="Создать карту",
        request=DesignMapCreateSerializer,
        responses={
            201: DesignMapSerializer,
            400: OpenApiResponse(description="Не хватает полей или координаты не числа"),
            404: OpenApiResponse(description="Трещина не найдена в проекте"),
            409: OpenApiResponse(description="У трещины уже есть карта"),
        },
        tags=["Design maps"],
    )
    def post(self, request):
        serializer = DesignMapCreateSerializer(data=request.data)
        if not serializer.is_valid():
            errors = serializer.errors
            if "projectId" in errors:
                message = "projectId required"
            elif "crackIdentificationId" in errors:
                message = "crackIdentificationId required"
            else:
                message = "x,y,width,height required"
            return error_response(message, status.HTTP_400_BAD_REQUEST, errors=[errors])

        data = serializer.validated_data
        rect = Rect(**{field: data[field] for field in RECT_FIELDS})
        try:
            design_map = self.service.create(
                data["projectId"], data["crackIdentificationId"], rect
            )
        except Exception as e:
            return self.handle_error(e)

        return Response(DesignMapSerializer(design_map).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Удалить карту (id в query или JSON)",
        parameters=[OpenApiParameter("id", int)],
        request=DesignMapDeleteSerializer,
        responses={200: OpenApiResponse(description="{id}")},
        tags=["Design maps"],
    )
    def delete(self, request):
        map_id = None
        if isinstance(request.data, dict):
            map_id = parse_id(request.data.get("id"))
        if map_id is None:
            map_id = parse_id(request.query_params.get("id"))
        if map_id is None:
            return error_response("id required", status.HTTP_400_BAD_REQUEST)
        return self.delete_map(map_id)


class DesignMapDetailAPIView(BaseDesignMapAPIView):
    @extend_schema(
        summary="Карта",
        responses={200: DesignMapSerializer},
        tags=["Design maps"],
    )
    def get(self, request, map_id: int):
        try:
            design_map = self.service.get(map_id)
        except DesignMapNotFoundError as e:
            return self.handle_error(e)
        return Response(DesignMapSerializer(design_map).data)

    @extend_schema(
        summary="Изменить карту",
        description="Сдвиг/размер и/или перепривязка к другой трещине того же проекта.",
        request=DesignMapUpdateSerializer,
        responses={
            200: DesignMapSerializer,
            400: OpenApiResponse(description="Нечего обновлять или неверные значения"),
            404: OpenApiResponse(description="Карта или трещина не найдены"),
            409: OpenApiResponse(description="У выбранной трещины уже есть карта"),
        },
        tags=["Design maps"],
    )
    def patch(self, request, map_id: int):
        serializer = DesignMapUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid design map data",
                status.HTTP_400_BAD_REQUEST,
                errors=[serializer.errors],
            )

        data = serializer.validated_data
        changes = {field: data[field] for field in RECT_FIELDS if field in data}
        try:
            design_map = self.service.update(
                map_id, changes, crack_id=data.get("crackIdentificationId")
            )
        except Exception as e:
            return self.handle_error(e)
        return Response(DesignMapSerializer(design_map).data)

    @extend_schema(
        summary="Удалить карту",
        responses={200: OpenApiResponse(description="{id}")},
        tags=["Design maps"],
    )
    def delete(self, request, map_id: int):
        return self.delete_map(map_id)
