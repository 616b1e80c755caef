from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from app_users.roles import Role


class User(AbstractUser):
    role = models.CharField(
        _("Роль"),
        max_length=32,
        choices=Role.choices,
        default=Role.USER,
        db_index=True,
        help_text=_(
            "Администратор — полный доступ; сотрудник — чтение; "
            "пользователь проекта — только проекты, в которых он участник."
        ),
    )

    class Meta:
        verbose_name = _("Пользователь")
        verbose_name_plural = _("Пользователи")

    @property
    def is_project_user(self) -> bool:
        return self.role == Role.PROJECT_USER and not self.is_superuser
