"""
Репозиторий записей трещин.
"""

from typing import Optional

from django.db.models import QuerySet

from app_cracks.models import CrackIdentification
from core.base_repository import BaseRepository


class CrackRepository(BaseRepository[CrackIdentification]):
    model = CrackIdentification

    def filtered(
        self,
        project_id: int,
        block_id: Optional[int] = None,
        defect_type: Optional[str] = None,
        exclude_mapped: bool = False,
    ) -> QuerySet[CrackIdentification]:
        """
        Трещины проекта с необязательными фильтрами.

        exclude_mapped — только трещины, к которым ещё не привязана карта
        (для выбора в редакторе карт).
        """
        filters = {"project_id": project_id}
        if block_id:
            filters["block_id"] = block_id
        if defect_type:
            filters["defect_type"] = defect_type
        if exclude_mapped:
            filters["design_map__isnull"] = True

        return self.get_queryset(
            filters=filters,
            select_related=["block"],
            order_by=["id"],
        )

    def delete_for_project(self, project_id: int, block_id: Optional[int] = None) -> int:
        filters = {"project_id": project_id}
        if block_id:
            filters["block_id"] = block_id
        return self.delete_where(**filters)
