from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from app_projects.exceptions import ProjectNotFoundError
from app_projects.repositories import ProjectRepository
from app_users.roles import Permissions
from core.permissions import HasRolePermission
from core.responses import error_response
from core.utils.params import parse_id

from .exceptions import (
    CrackImportException,
    FileProcessingException,
    InvalidFileFormatException,
    InvalidFileStructureException,
    NoValidRowsException,
)
from .serializers import CrackImportFileSerializer, CrackImportResultSerializer
from .services import CrackImportService


class CrackImportAPIView(APIView):
    """API для импорта листа обследования трещин из Excel"""

    permission_classes = [HasRolePermission]
    required_permissions = {"POST": [Permissions.IMPORT_CRACKS]}

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.import_service = CrackImportService()

    @extend_schema(
        summary="Импорт трещин из Excel",
        description=(
            "Полностью заменяет трещины проекта данными первого листа. "
            "Колонки по позиции: блок, пикетаж от, пикетаж до, RL, тип дефекта, "
            "L, W, H, видео, начало, конец. Ошибочные строки пропускаются и "
            "возвращаются в errors."
        ),
        parameters=[OpenApiParameter("projectId", int, required=True)],
        request={"multipart/form-data": CrackImportFileSerializer},
        responses={
            200: OpenApiResponse(
                response=CrackImportResultSerializer,
                description="Успешный импорт",
            ),
            400: OpenApiResponse(description="Нет файла, неверный лист или нет пригодных строк"),
            404: OpenApiResponse(description="Проект не найден"),
        },
        tags=["Cracks"],
    )
    def post(self, request):
        project_id = parse_id(request.query_params.get("projectId"))
        if not project_id:
            return error_response("projectId required", status.HTTP_400_BAD_REQUEST)

        serializer = CrackImportFileSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "file required",
                status.HTTP_400_BAD_REQUEST,
                errors=[serializer.errors],
            )

        try:
            project = ProjectRepository().get_by_id_or_raise(project_id)
            result = self.import_service.import_cracks(
                project, serializer.validated_data["file"]
            )
        except ProjectNotFoundError as e:
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        except NoValidRowsException as e:
            return error_response(str(e), status.HTTP_400_BAD_REQUEST, errors=e.errors)
        except (InvalidFileFormatException, InvalidFileStructureException) as e:
            return error_response(str(e), status.HTTP_400_BAD_REQUEST)
        except (FileProcessingException, CrackImportException) as e:
            return error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            CrackImportResultSerializer(result.to_dict()).data,
            status=status.HTTP_200_OK,
        )
