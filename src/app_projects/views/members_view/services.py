import logging
from typing import Any, Dict

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from app_projects.models import Project, ProjectMember
from core.utils.params import parse_id

from .exceptions import (
    AlreadyMemberException,
    MembershipNotFoundException,
    ProjectOrUserNotFoundException,
    UserIdRequiredException,
)

logger = logging.getLogger(__name__)


class MemberService:
    """Состав участников проекта"""

    def user_id_from(self, data: Dict[str, Any]) -> int:
        user_id = parse_id(data.get("userId"))
        if user_id is None:
            raise UserIdRequiredException()
        return user_id

    def list(self, project_id: int) -> QuerySet[ProjectMember]:
        return (
            ProjectMember.objects.filter(project_id=project_id)
            .select_related("user")
            .order_by("created_at", "id")
        )

    def add(self, project_id: int, user_id: int) -> ProjectMember:
        project_exists = Project.objects.filter(pk=project_id).exists()
        user_exists = get_user_model().objects.filter(pk=user_id).exists()
        if not (project_exists and user_exists):
            raise ProjectOrUserNotFoundException()

        try:
            with transaction.atomic():
                membership = ProjectMember.objects.create(project_id=project_id, user_id=user_id)
        except IntegrityError:
            raise AlreadyMemberException()

        logger.info("Added user %s to project %s", user_id, project_id)
        return membership

    def remove(self, project_id: int, user_id: int) -> Dict[str, int]:
        deleted, _ = ProjectMember.objects.filter(project_id=project_id, user_id=user_id).delete()
        if not deleted:
            raise MembershipNotFoundException()

        logger.info("Removed user %s from project %s", user_id, project_id)
        return {"projectId": project_id, "userId": user_id}
