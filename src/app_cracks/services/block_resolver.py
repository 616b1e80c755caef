from typing import Dict

from app_projects.models import Block, Project


class BlockResolver:
    """
    Имя блока → ID блока в пределах одного проекта.

    Кэш живёт ровно столько, сколько один запуск импорта. Новые блоки
    создаются по первому упоминанию; уникальность (project, name) держит БД.
    """

    def __init__(self, project: Project):
        self.project = project
        self.cache: Dict[str, int] = {}
        self.created = 0

    @staticmethod
    def normalize(name: str) -> str:
        return " ".join(str(name).split())

    def resolve(self, name: str) -> int:
        key = self.normalize(name)
        block_id = self.cache.get(key)
        if block_id is None:
            block, created = Block.objects.get_or_create(project=self.project, name=key)
            if created:
                self.created += 1
            block_id = self.cache[key] = block.id
        return block_id
