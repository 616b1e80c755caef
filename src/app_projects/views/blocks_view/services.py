from django.db import IntegrityError, transaction

from app_projects.models import Block, Project

from .exceptions import BlockAlreadyExistsException


class BlockService:
    """Ручное создание блоков (импорт создаёт блоки сам, см. BlockResolver)."""

    def create(self, project: Project, name: str) -> Block:
        name = " ".join(name.split())
        try:
            with transaction.atomic():
                return Block.objects.create(project=project, name=name)
        except IntegrityError:
            raise BlockAlreadyExistsException()
