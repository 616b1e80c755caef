"""
Исключения модуля карт чертежа.
"""


class DesignMapException(Exception):
    """Базовое исключение модуля карт."""

    pass


class DesignMapNotFoundError(DesignMapException):
    def __init__(self, map_id):
        self.map_id = map_id
        super().__init__("Not found")


class CrackNotInProjectError(DesignMapException):
    """Трещина не существует или принадлежит другому проекту."""

    def __init__(self):
        super().__init__("Crack not found in project")


class DesignMapConflictError(DesignMapException):
    """У трещины уже есть карта."""

    def __init__(self):
        super().__init__("Design map already exists for crack")


class NothingToUpdateError(DesignMapException):
    def __init__(self):
        super().__init__("Nothing to update")
