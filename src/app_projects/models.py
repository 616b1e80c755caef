"""Модели «Проекты» (app_projects).

- Project — проект с чертежом (design image), поверх которого рисуются карты трещин.
- ProjectMember — участие внешнего пользователя в проекте.
- Block — именованный участок проекта, группирует записи трещин.
- ProjectFile — вложения проекта, лежат в файловом хранилище Django (MEDIA_ROOT).
"""

import os
import time
import uuid

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


def stored_name(filename: str) -> str:
    """<мс>-<uuid><расширение исходного файла>"""
    ext = os.path.splitext(filename)[1]
    return f"{int(time.time() * 1000)}-{uuid.uuid4()}{ext}"


def design_image_upload_to(instance: "Project", filename: str) -> str:
    # Сервис сохраняет чертёж после первого save(), pk уже есть
    folder = instance.pk or uuid.uuid4().hex
    return f"projects/{folder}/designs/{stored_name(filename)}"


def project_file_upload_to(instance: "ProjectFile", filename: str) -> str:
    return f"projects/{instance.project_id}/files/{stored_name(filename)}"


class Project(models.Model):
    name = models.CharField(
        _("Название"),
        max_length=255,
        unique=True,
    )
    client_name = models.CharField(
        _("Заказчик"),
        max_length=255,
        blank=True,
        default="",
    )
    location = models.CharField(
        _("Местоположение"),
        max_length=255,
        blank=True,
        default="",
    )
    description = models.TextField(
        _("Описание"),
        blank=True,
        default="",
    )
    design_image = models.FileField(
        _("Чертёж"),
        upload_to=design_image_upload_to,
        null=True,
        blank=True,
        help_text=_("Изображение чертежа, на котором размечаются трещины."),
    )
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="ProjectMember",
        related_name="projects",
        blank=True,
        verbose_name=_("Участники"),
    )
    created_at = models.DateTimeField(_("Создан"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Изменён"), auto_now=True)

    class Meta:
        verbose_name = _("Проект")
        verbose_name_plural = _("Проекты")
        ordering = ["name", "id"]

    def __str__(self) -> str:
        return self.name


class ProjectMember(models.Model):
    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="memberships",
        verbose_name=_("Проект"),
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="project_memberships",
        verbose_name=_("Пользователь"),
    )
    created_at = models.DateTimeField(_("Добавлен"), auto_now_add=True)

    class Meta:
        verbose_name = _("Участник проекта")
        verbose_name_plural = _("Участники проекта")
        constraints = [
            models.UniqueConstraint(
                fields=["project", "user"], name="uniq_project_member"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user} → {self.project}"


class Block(models.Model):
    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="blocks",
        verbose_name=_("Проект"),
    )
    name = models.CharField(
        _("Название"),
        max_length=255,
        help_text=_("Уникально в пределах проекта."),
    )

    class Meta:
        verbose_name = _("Блок")
        verbose_name_plural = _("Блоки")
        ordering = ["name", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["project", "name"], name="uniq_block_project_name"
            ),
        ]

    def __str__(self) -> str:
        return self.name


class ProjectFile(models.Model):
    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="files",
        verbose_name=_("Проект"),
    )
    title = models.CharField(_("Заголовок"), max_length=255)
    original_name = models.CharField(_("Исходное имя"), max_length=255)
    file = models.FileField(
        _("Файл"),
        upload_to=project_file_upload_to,
        max_length=255,
        help_text=_("Хранится как projects/<id проекта>/files/<мс>-<uuid><расширение>."),
    )
    mime_type = models.CharField(_("MIME-тип"), max_length=127)
    size = models.PositiveBigIntegerField(_("Размер, байт"))
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="uploaded_files",
        verbose_name=_("Загрузил"),
    )
    created_at = models.DateTimeField(_("Загружен"), auto_now_add=True)

    class Meta:
        verbose_name = _("Файл проекта")
        verbose_name_plural = _("Файлы проекта")
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return self.title
