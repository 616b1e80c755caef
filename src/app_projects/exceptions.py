"""
Исключения модуля проектов.
"""


class ProjectException(Exception):
    """Базовое исключение модуля проектов."""

    pass


class ProjectNotFoundError(ProjectException):
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__("Project not found")


class ProjectAccessDenied(ProjectException):
    """Пользователь проекта не состоит в проекте."""

    def __init__(self):
        super().__init__("Forbidden")
