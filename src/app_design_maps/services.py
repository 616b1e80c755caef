"""
Сервисный слой карт чертежа.

Проверяет ссылочную целостность (трещина из того же проекта) и правило
«одна карта на трещину». Уникальность дополнительно держит OneToOne в БД.
"""

import logging
from typing import Dict, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from app_cracks.models import CrackIdentification
from app_design_maps.exceptions import (
    CrackNotInProjectError,
    DesignMapConflictError,
    DesignMapNotFoundError,
    NothingToUpdateError,
)
from app_design_maps.geometry import Rect
from app_design_maps.models import DesignMap

logger = logging.getLogger(__name__)

RECT_FIELDS = ("x", "y", "width", "height")


class DesignMapService:
    def list(self, project_id: int, crack_id: Optional[int] = None) -> QuerySet[DesignMap]:
        qs = DesignMap.objects.filter(project_id=project_id)
        if crack_id:
            qs = qs.filter(crack_id=crack_id)
        return qs.order_by("id")

    def get(self, map_id: int) -> DesignMap:
        design_map = DesignMap.objects.filter(pk=map_id).first()
        if design_map is None:
            raise DesignMapNotFoundError(map_id)
        return design_map

    def _crack_in_project(self, crack_id: int, project_id: int) -> CrackIdentification:
        crack = CrackIdentification.objects.filter(pk=crack_id, project_id=project_id).first()
        if crack is None:
            raise CrackNotInProjectError()
        return crack

    def _ensure_unmapped(self, crack_id: int, exclude_map_id: Optional[int] = None) -> None:
        qs = DesignMap.objects.filter(crack_id=crack_id)
        if exclude_map_id:
            qs = qs.exclude(pk=exclude_map_id)
        if qs.exists():
            raise DesignMapConflictError()

    def create(self, project_id: int, crack_id: int, rect: Rect) -> DesignMap:
        crack = self._crack_in_project(crack_id, project_id)
        self._ensure_unmapped(crack.id)
        try:
            with transaction.atomic():
                design_map = DesignMap.objects.create(
                    project_id=project_id, crack=crack, **rect.as_dict()
                )
        except IntegrityError:
            raise DesignMapConflictError()

        logger.info("Design map %s created for crack %s", design_map.id, crack.id)
        return design_map

    def update(
        self,
        map_id: int,
        changes: Dict[str, float],
        crack_id: Optional[int] = None,
    ) -> DesignMap:
        """
        Сдвинуть/изменить прямоугольник и/или перепривязать трещину.
        Геометрия меняется только по переданным полям.
        """
        design_map = self.get(map_id)
        update_fields: List[str] = []

        for field in RECT_FIELDS:
            if field in changes:
                setattr(design_map, field, changes[field])
                update_fields.append(field)

        if crack_id is not None:
            # Трещина другого проекта: 404, как при создании
            crack = self._crack_in_project(crack_id, design_map.project_id)
            self._ensure_unmapped(crack.id, exclude_map_id=design_map.id)
            design_map.crack = crack
            update_fields.append("crack")

        if not update_fields:
            raise NothingToUpdateError()

        try:
            with transaction.atomic():
                design_map.save(update_fields=update_fields + ["updated_at"])
        except IntegrityError:
            raise DesignMapConflictError()
        return design_map

    def delete(self, map_id: int) -> int:
        deleted, _ = DesignMap.objects.filter(pk=map_id).delete()
        if not deleted:
            raise DesignMapNotFoundError(map_id)
        logger.info("Design map %s deleted", map_id)
        return map_id
