"""
API блоков проекта.

GET  /api/v1/blocks/?projectId=1         → [{"id", "name", "projectId"}, ...]
POST /api/v1/blocks/ {"projectId", "name"} → 201 | 404 | 409
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from app_projects.exceptions import ProjectNotFoundError
from app_projects.repositories import BlockRepository, ProjectRepository
from app_users.roles import Permissions
from core.permissions import HasRolePermission
from core.responses import error_response
from core.utils.params import parse_id

from .exceptions import BlockAlreadyExistsException
from .serializers import BlockCreateSerializer, BlockSerializer
from .services import BlockService


class BlockListCreateAPIView(APIView):
    permission_classes = [HasRolePermission]
    required_permissions = {
        "GET": [Permissions.READ_CRACKS],
        "POST": [Permissions.MANAGE_BLOCKS],
    }

    @extend_schema(
        summary="Блоки проекта",
        parameters=[OpenApiParameter("projectId", int, required=True)],
        responses={200: BlockSerializer(many=True)},
        tags=["Blocks"],
    )
    def get(self, request):
        project_id = parse_id(request.query_params.get("projectId"))
        if not project_id:
            return error_response("projectId required", status.HTTP_400_BAD_REQUEST)

        blocks = BlockRepository().for_project(project_id)
        return Response(BlockSerializer(blocks, many=True).data)

    @extend_schema(
        summary="Создать блок",
        request=BlockCreateSerializer,
        responses={
            201: BlockSerializer,
            404: OpenApiResponse(description="Проект не найден"),
            409: OpenApiResponse(description="Блок с таким именем уже есть"),
        },
        tags=["Blocks"],
    )
    def post(self, request):
        serializer = BlockCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "Invalid block data",
                status.HTTP_400_BAD_REQUEST,
                errors=[serializer.errors],
            )

        data = serializer.validated_data
        try:
            project = ProjectRepository().get_by_id_or_raise(data["projectId"])
            block = BlockService().create(project, data["name"])
        except ProjectNotFoundError as e:
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        except BlockAlreadyExistsException as e:
            return error_response(str(e), status.HTTP_409_CONFLICT)

        return Response(BlockSerializer(block).data, status=status.HTTP_201_CREATED)
