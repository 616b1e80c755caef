"""
Репозитории проектов и блоков.
"""

from typing import Optional

from django.db.models import Q, QuerySet

from app_projects.exceptions import ProjectAccessDenied, ProjectNotFoundError
from app_projects.models import Block, Project, ProjectMember
from core.base_repository import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    def get_by_id_or_raise(self, project_id: int) -> Project:
        project = self.get_by_id(project_id) if project_id else None
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def visible_for(self, user, search: Optional[str] = None) -> QuerySet[Project]:
        """Все проекты; для пользователя проекта — только те, где он участник."""
        qs = self.get_queryset(order_by=["name", "id"])
        if search:
            qs = qs.filter(
                Q(name__icontains=search)
                | Q(client_name__icontains=search)
                | Q(location__icontains=search)
            )
        if getattr(user, "is_project_user", False):
            qs = qs.filter(memberships__user=user)
        return qs

    def ensure_access(self, user, project_id: int) -> None:
        if not getattr(user, "is_project_user", False):
            return
        if not ProjectMember.objects.filter(project_id=project_id, user=user).exists():
            raise ProjectAccessDenied()


class BlockRepository(BaseRepository[Block]):
    model = Block

    def for_project(self, project_id: int) -> QuerySet[Block]:
        return self.get_queryset(filters={"project_id": project_id}, order_by=["name"])
