"""
Проверка прав для API.

Представление объявляет словарь ``required_permissions`` вида
{"GET": [...], "POST": [...]}; метод без записи доступен любому
аутентифицированному пользователю.
"""

from rest_framework.permissions import BasePermission

from app_users.roles import has_permission


class HasRolePermission(BasePermission):
    message = "Forbidden"

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not (user and user.is_authenticated):
            return False

        required = getattr(view, "required_permissions", {}).get(request.method, [])
        return all(has_permission(user, perm) for perm in required)
