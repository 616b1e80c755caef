"""
Роли и права (RBAC).

Права — стабильные строковые идентификаторы; роль раскрывается в набор прав
через ROLE_PERMISSIONS. Чтобы добавить право — добавьте константу в
Permissions и включите её в нужные роли.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Role(models.TextChoices):
    ADMIN = "admin", _("Администратор")
    USER = "user", _("Сотрудник")
    PROJECT_USER = "project_user", _("Пользователь проекта")


class Permissions:
    VIEW_DASHBOARD = "view:dashboard"

    READ_USERS = "read:users"
    EDIT_USERS = "edit:users"

    CREATE_PROJECT = "create:project"
    READ_PROJECT = "read:project"
    EDIT_PROJECT = "edit:project"
    DELETE_PROJECT = "delete:project"
    MANAGE_PROJECT_USERS = "manage:project_users"

    UPLOAD_PROJECT_FILE = "upload:project_file"
    READ_PROJECT_FILE = "read:project_file"
    DELETE_PROJECT_FILE = "delete:project_file"

    IMPORT_CRACKS = "import:cracks"
    READ_CRACKS = "read:cracks"
    MANAGE_BLOCKS = "manage:blocks"

    READ_DESIGN_MAP = "read:design_map"
    WRITE_DESIGN_MAP = "write:design_map"

    @classmethod
    def all(cls) -> frozenset:
        return frozenset(
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        )


ROLE_PERMISSIONS = {
    Role.ADMIN: Permissions.all(),
    # Сотрудник: только чтение
    Role.USER: frozenset(
        {
            Permissions.VIEW_DASHBOARD,
            Permissions.READ_USERS,
            Permissions.READ_PROJECT,
            Permissions.READ_PROJECT_FILE,
            Permissions.READ_CRACKS,
            Permissions.READ_DESIGN_MAP,
        }
    ),
    # Внешний пользователь: только свои проекты
    Role.PROJECT_USER: frozenset(
        {
            Permissions.VIEW_DASHBOARD,
            Permissions.READ_PROJECT,
            Permissions.READ_PROJECT_FILE,
            Permissions.READ_CRACKS,
            Permissions.READ_DESIGN_MAP,
        }
    ),
}


def permissions_for(user) -> frozenset:
    """Набор прав пользователя. Суперпользователь считается администратором."""
    if not getattr(user, "is_authenticated", False):
        return frozenset()
    if user.is_superuser:
        return ROLE_PERMISSIONS[Role.ADMIN]
    return ROLE_PERMISSIONS.get(getattr(user, "role", None), frozenset())


def has_permission(user, permission: str) -> bool:
    return permission in permissions_for(user)
