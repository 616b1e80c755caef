"""
Чтение и удаление трещин проекта.

GET    /api/v1/cracks/?projectId=1&blockId=&defectType=&excludeMapped=1&page=1&pageSize=20
DELETE /api/v1/cracks/?projectId=1[&blockId=2]
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from app_cracks.repositories import CrackRepository
from app_users.roles import Permissions
from core.pagination import page_params, paginate
from core.permissions import HasRolePermission
from core.responses import error_response
from core.utils.params import parse_flag, parse_id

from .serializers import CrackDeleteResultSerializer, CrackPageSerializer


class CrackListAPIView(APIView):
    permission_classes = [HasRolePermission]
    required_permissions = {
        "GET": [Permissions.READ_CRACKS],
        "DELETE": [Permissions.IMPORT_CRACKS],
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.crack_repo = CrackRepository()

    @extend_schema(
        summary="Трещины проекта (постранично)",
        parameters=[
            OpenApiParameter("projectId", int, required=True),
            OpenApiParameter("blockId", int),
            OpenApiParameter("defectType", str),
            OpenApiParameter("excludeMapped", bool, description="Только без карты"),
            OpenApiParameter("page", int),
            OpenApiParameter("pageSize", int, description="Не больше 100"),
        ],
        responses={200: CrackPageSerializer},
        tags=["Cracks"],
    )
    def get(self, request):
        params = request.query_params
        project_id = parse_id(params.get("projectId"))
        if not project_id:
            return error_response("projectId required", status.HTTP_400_BAD_REQUEST)

        qs = self.crack_repo.filtered(
            project_id=project_id,
            block_id=parse_id(params.get("blockId")),
            defect_type=params.get("defectType") or None,
            exclude_mapped=parse_flag(params.get("excludeMapped")),
        )
        page, page_size = page_params(params)
        return Response(CrackPageSerializer(paginate(qs, page, page_size)).data)

    @extend_schema(
        summary="Удалить трещины проекта (или блока)",
        parameters=[
            OpenApiParameter("projectId", int, required=True),
            OpenApiParameter("blockId", int),
        ],
        responses={200: CrackDeleteResultSerializer},
        tags=["Cracks"],
    )
    def delete(self, request):
        project_id = parse_id(request.query_params.get("projectId"))
        if not project_id:
            return error_response("projectId required", status.HTTP_400_BAD_REQUEST)

        deleted = self.crack_repo.delete_for_project(
            project_id, block_id=parse_id(request.query_params.get("blockId"))
        )
        return Response({"deleted": deleted}, status=status.HTTP_200_OK)
