"""
Базовый репозиторий для работы с данными.

Отделяет бизнес-логику (импорт, сервисы карт) от прямых обращений к
Django ORM. Конкретные репозитории задают атрибут ``model``.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from django.db.models import Model, QuerySet

ModelType = TypeVar("ModelType", bound=Model)


class BaseRepository(Generic[ModelType]):
    """
    Базовый класс репозитория.

    Example:
        class BlockRepository(BaseRepository[Block]):
            model = Block
    """

    model: Type[ModelType] = None

    def __init__(self):
        if self.model is None:
            raise ValueError(f"{self.__class__.__name__} must define 'model'")

    def get_by_id(
        self,
        obj_id: int,
        select_related: Optional[List[str]] = None,
    ) -> Optional[ModelType]:
        """Объект по ID или None."""
        qs = self.model.objects.all()
        if select_related:
            qs = qs.select_related(*select_related)
        return qs.filter(pk=obj_id).first()

    def get_queryset(
        self,
        filters: Optional[Dict[str, Any]] = None,
        select_related: Optional[List[str]] = None,
        order_by: Optional[List[str]] = None,
    ) -> QuerySet[ModelType]:
        """
        QuerySet с фильтрацией, select_related и сортировкой.

        Args:
            filters: словарь для QuerySet.filter(**filters)
            select_related: связи для select_related
            order_by: поля сортировки
        """
        qs = self.model.objects.all()

        if filters:
            qs = qs.filter(**filters)

        if select_related:
            qs = qs.select_related(*select_related)

        if order_by:
            qs = qs.order_by(*order_by)

        return qs

    def exists(self, **filters) -> bool:
        return self.model.objects.filter(**filters).exists()

    def count(self, **filters) -> int:
        return self.model.objects.filter(**filters).count()

    def bulk_create(self, instances: List[ModelType]) -> List[ModelType]:
        return self.model.objects.bulk_create(instances)

    def delete_where(self, **filters) -> int:
        """
        Удалить все объекты по фильтрам.

        Returns:
            Количество удалённых объектов самой модели (каскадные
            удаления связанных моделей не учитываются).
        """
        _, per_model = self.model.objects.filter(**filters).delete()
        return per_model.get(self.model._meta.label, 0)
